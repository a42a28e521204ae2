"""Line trimming and set-once field assignment."""

from __future__ import annotations

import re
from typing import Any, Callable

from cuesheet.errors import FieldAlreadySetError, InvalidValueError

TRIM_CHARS = ' "\t\n'

# bare REM lines carry nothing
SKIPPED_LINES = frozenset({"", "REM"})

_INTEGER_RE = re.compile(r"-?[0-9]+")


def normalize_line(raw: str) -> str | None:
    """Return the trimmed line, or None when the line should be skipped."""
    line = raw.rstrip("\r\n").strip(TRIM_CHARS)
    if line in SKIPPED_LINES:
        return None
    return line


def assign_once(
    target: Any,
    attribute: str,
    value: Any,
    *,
    label: str | None = None,
    describe: Callable[[Any], Any] | None = None,
) -> None:
    """Set ``target.attribute`` to ``value`` unless it already holds a value.

    ``describe`` renders the current value for the error, e.g. as source text.
    """
    current = getattr(target, attribute)
    if current is not None:
        raise FieldAlreadySetError(label or attribute, describe(current) if describe else current)
    setattr(target, attribute, value)


def assign_text(target: Any, attribute: str, value: str, *, label: str | None = None) -> None:
    assign_once(target, attribute, value.strip(TRIM_CHARS), label=label)


def join_parameters(parameters: list[str]) -> str:
    return " ".join(parameters)


def parse_integer(token: str, *, label: str) -> int:
    """Parse a plain decimal integer token."""
    if _INTEGER_RE.fullmatch(token) is None:
        raise InvalidValueError(f"failed to parse {label}: {token!r} is not a number", value=token)
    return int(token)
