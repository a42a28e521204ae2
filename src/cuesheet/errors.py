"""Structured errors raised while parsing cue sheets."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cuesheet.models import IndexPoint


class ErrorKind(str, Enum):
    """Broad category of a parse failure."""

    SYNTAX = "syntax"
    VALUE = "value"
    STATE = "state"
    STRUCTURE = "structure"


class CueSheetError(Exception):
    """Base class for every cue sheet failure.

    Errors are chained with ``raise ... from ...``: each layer adds its own context
    (line, command, field) and ``str()`` renders the whole chain, outermost first.
    """

    kind: ErrorKind | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def root_cause(self) -> CueSheetError:
        """Return the innermost ``CueSheetError`` of the chain."""
        error = self
        while isinstance(error.__cause__, CueSheetError):
            error = error.__cause__
        return error

    @property
    def error_kind(self) -> ErrorKind | None:
        """Return the kind of the failure that started the chain."""
        return self.kind or self.root_cause.kind

    def __str__(self) -> str:
        parts = [self.message]
        cause = self.__cause__
        while cause is not None:
            parts.append(cause.message if isinstance(cause, CueSheetError) else str(cause))
            cause = cause.__cause__
        return ": ".join(parts)


class UnexpectedCommandError(CueSheetError):
    kind = ErrorKind.SYNTAX

    def __init__(self, keyword: str) -> None:
        super().__init__(f"unexpected command: {keyword}")
        self.keyword = keyword


class ParameterCountError(CueSheetError):
    kind = ErrorKind.SYNTAX

    def __init__(self, expected: int, actual: int, *, exact: bool) -> None:
        qualifier = "" if exact else "at least "
        super().__init__(f"expected {qualifier}{expected} parameters, got {actual}")
        self.expected = expected
        self.actual = actual
        self.exact = exact


class InvalidValueError(CueSheetError):
    """A token is malformed or outside its allowed set."""

    kind = ErrorKind.VALUE

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class FieldAlreadySetError(CueSheetError):
    kind = ErrorKind.STATE

    def __init__(self, field: str, current: Any) -> None:
        super().__init__(f"{field}: field already set: {current}")
        self.field = field
        self.current = current


class TrackSequenceError(CueSheetError):
    kind = ErrorKind.STATE


class IndexSequenceError(CueSheetError):
    kind = ErrorKind.STATE


class MissingFieldError(CueSheetError):
    kind = ErrorKind.STRUCTURE

    def __init__(self, message: str, *, field: str, track: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.track = track


class OverlappingIndexError(CueSheetError):
    kind = ErrorKind.STRUCTURE

    def __init__(
        self,
        first: IndexPoint,
        second: IndexPoint,
        *,
        first_track: int,
        second_track: int,
    ) -> None:
        if first_track == second_track:
            where = f"track {first_track}"
        else:
            where = f"tracks {first_track} and {second_track}"
        super().__init__(f"overlapping indices in {where}: {first} is not before {second}")
        self.first = first
        self.second = second
        self.first_track = first_track
        self.second_track = second_track


class CommandError(CueSheetError):
    """Wraps a handler failure with the command that raised it."""

    def __init__(self, command: str) -> None:
        super().__init__(f'error parsing "{command}" command')
        self.command = command


class LineError(CueSheetError):
    """Wraps a command failure with its 1-based source line."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {line}")
        self.line_number = line_number
        self.line = line


class InvalidCueSheetError(CueSheetError):
    """Wraps a failure of the post-parse validation pass."""

    def __init__(self) -> None:
        super().__init__("invalid cue sheet")
