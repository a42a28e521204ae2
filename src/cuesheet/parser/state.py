"""Mutable drafts filled in while a cue sheet is being parsed."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cuesheet.models import AudioFormat, IndexPoint


class ParserState(Enum):
    """Which target a TITLE command writes to.

    The move from BEFORE_ANY_TRACK to WITHIN_TRACK happens on the first TRACK and
    never reverses.
    """

    BEFORE_ANY_TRACK = "before-any-track"
    WITHIN_TRACK = "within-track"


@dataclass(slots=True)
class DraftTrack:
    number: int
    type: str | None = None
    title: str | None = None
    index00: IndexPoint | None = None
    index01: IndexPoint | None = None


@dataclass(slots=True)
class DraftCueSheet:
    album_performer: str | None = None
    album_title: str | None = None
    date: str | None = None
    disc_id: int | None = None
    format: AudioFormat | None = None
    file_name: str | None = None
    genre: str | None = None
    remarks: list[str] = field(default_factory=list)
    tracks: list[DraftTrack] = field(default_factory=list)
    state: ParserState = ParserState.BEFORE_ANY_TRACK

    @property
    def current_track(self) -> DraftTrack | None:
        return self.tracks[-1] if self.tracks else None

    def open_track(self, number: int) -> DraftTrack:
        track = DraftTrack(number=number)
        self.tracks.append(track)
        self.state = ParserState.WITHIN_TRACK
        return track
