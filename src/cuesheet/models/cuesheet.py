"""Data structures representing a parsed cue sheet."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Iterator

from cuesheet.errors import InvalidValueError

_TIMESTAMP_RE = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")


class AudioFormat(str, Enum):
    """File formats accepted by the FILE command."""

    WAVE = "WAVE"
    MP3 = "MP3"
    AIFF = "AIFF"
    BINARY = "BINARY"
    MOTOROLA = "MOTOROLA"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> AudioFormat:
        try:
            return cls(token.upper())
        except ValueError:
            accepted = ", ".join(member.value for member in cls)
            raise InvalidValueError(
                f"invalid format {token!r}, expected one of: {accepted}", value=token
            ) from None


@dataclass(slots=True, frozen=True)
class IndexPoint:
    """A disc position: whole seconds plus a raw sub-second frame count."""

    frame: int
    timestamp: timedelta

    @classmethod
    def parse(cls, token: str) -> IndexPoint:
        """Build an index point from an ``MM:SS:FF`` token."""
        match = _TIMESTAMP_RE.fullmatch(token)
        if match is None:
            raise InvalidValueError(
                f"error parsing timestamp and frame: expected MM:SS:FF, got {token!r}",
                value=token,
            )
        minutes, seconds, frames = (int(group) for group in match.groups())
        return cls(frame=frames, timestamp=timedelta(minutes=minutes, seconds=seconds))

    @property
    def sort_key(self) -> tuple[timedelta, int]:
        return self.timestamp, self.frame

    def precedes(self, other: IndexPoint) -> bool:
        """Return True when this point is strictly before ``other``."""
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        total = int(self.timestamp.total_seconds())
        minutes, seconds = divmod(total, 60)
        return f"{minutes:02d}:{seconds:02d}:{self.frame:02d}"


@dataclass(slots=True, frozen=True)
class Track:
    """A single TRACK entry and its index points."""

    number: int
    type: str
    index01: IndexPoint
    title: str | None = None
    index00: IndexPoint | None = None

    def index_points(self) -> Iterator[IndexPoint]:
        """Yield the pre-gap (when present) followed by the track start."""
        if self.index00 is not None:
            yield self.index00
        yield self.index01

    def has_pregap(self) -> bool:
        return self.index00 is not None


@dataclass(slots=True, frozen=True)
class CueSheet:
    """The validated contents of a cue sheet."""

    file_name: str
    format: AudioFormat
    tracks: tuple[Track, ...]
    album_performer: str | None = None
    album_title: str | None = None
    date: str | None = None
    disc_id: int | None = None
    genre: str | None = None
    remarks: tuple[str, ...] = ()

    @property
    def disc_id_hex(self) -> str | None:
        """Return the disc id as 8 upper-case hex digits, if one was given."""
        if self.disc_id is None:
            return None
        return f"{self.disc_id:08X}"

    def index_points(self) -> Iterator[tuple[Track, IndexPoint]]:
        """Yield every index point in document order with its owning track."""
        for track in self.tracks:
            for point in track.index_points():
                yield track, point
