"""Parse cue sheets into validated track layouts."""

from __future__ import annotations

import io
from typing import Iterable

from .errors import CueSheetError, ErrorKind
from .loader import CueSheetLoader, load_cue_sheet
from .models import AudioFormat, CueSheet, IndexPoint, Track
from .parser import CueSheetParser, ParserOptions


def parse(lines: Iterable[str], *, options: ParserOptions | None = None) -> CueSheet:
    """Parse cue sheet lines from any iterable, such as an open text file."""
    return CueSheetParser(options).parse(lines)


def parse_string(text: str, *, options: ParserOptions | None = None) -> CueSheet:
    """Parse a whole cue sheet held in memory."""
    # same line splitting as reading a text file
    return parse(io.StringIO(text, newline=None), options=options)


__all__ = [
    "AudioFormat",
    "CueSheet",
    "CueSheetError",
    "CueSheetLoader",
    "CueSheetParser",
    "ErrorKind",
    "IndexPoint",
    "ParserOptions",
    "Track",
    "load_cue_sheet",
    "parse",
    "parse_string",
]
