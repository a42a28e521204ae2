"""Shared pytest fixtures."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from cuesheet import CueSheet, parse_string

FULL_CUE_SHEET = """\
REM GENRE "Heavy Metal"
REM DATE 1989
REM DISCID 860B640B
REM COMMENT "ExactAudioCopy v0.99pb5"
PERFORMER "Sample Album Artist"
TITLE "Sample Album Title"
FILE "sample.flac" WAVE
  TRACK 01 AUDIO
    TITLE "Track 1"
    INDEX 01 00:01:00
  TRACK 02 AUDIO
    TITLE "Track 2"
    INDEX 00 00:58:00
    INDEX 01 01:00:00
"""


def _dedent(text: str) -> str:
    """Dedent an inline cue sheet so tests can indent it freely."""
    return textwrap.dedent(text).lstrip("\n")


@pytest.fixture
def parse_cue() -> Callable[[str], CueSheet]:
    """Parse an inline, indented cue sheet."""

    def _parse(text: str) -> CueSheet:
        return parse_string(_dedent(text))

    return _parse


@pytest.fixture
def full_cue_text() -> str:
    return FULL_CUE_SHEET


@pytest.fixture
def write_cue(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = "album.cue", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(_dedent(text), encoding=encoding)
        return path

    return _write
