"""Single-pass, fail-fast cue sheet parser."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable

from cuesheet.errors import (
    CommandError,
    CueSheetError,
    IndexSequenceError,
    InvalidValueError,
    LineError,
    TrackSequenceError,
)
from cuesheet.models import AudioFormat, CueSheet, IndexPoint
from cuesheet.parser.commands import Command, RemCommand
from cuesheet.parser.fields import (
    TRIM_CHARS,
    assign_once,
    assign_text,
    join_parameters,
    normalize_line,
    parse_integer,
)
from cuesheet.parser.state import DraftCueSheet, DraftTrack, ParserState
from cuesheet.parser.validator import validate

logger = logging.getLogger(__name__)

MAX_TRACKS = 99
TRACK_NUMBER_WIDTH = 2
DISC_ID_LENGTH = 8

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")

Handler = Callable[[DraftCueSheet, list[str]], None]


@dataclass(slots=True, frozen=True)
class ParserOptions:
    """Tunable limits for ``CueSheetParser``."""

    max_tracks: int = MAX_TRACKS


class CueSheetParser:
    """Parse cue sheet text into a validated ``CueSheet``.

    Each call to :meth:`parse` works on a fresh draft, so one parser can be reused.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options or ParserOptions()
        self._handlers: dict[Command, Handler] = {
            Command.FILE: self._parse_file,
            Command.PERFORMER: self._parse_performer,
            Command.TITLE: self._parse_title,
            Command.TRACK: self._parse_track,
            Command.INDEX: self._parse_index,
            Command.REM: self._parse_rem,
        }
        missing = set(Command).difference(self._handlers)
        if missing:
            raise RuntimeError(f"no handler for commands: {sorted(c.keyword for c in missing)}")

    def parse(self, lines: Iterable[str]) -> CueSheet:
        """Consume ``lines`` and return the validated cue sheet."""
        draft = DraftCueSheet()
        line_count = 0
        for line_count, raw in enumerate(lines, start=1):
            line = normalize_line(raw)
            if line is None:
                continue
            try:
                self.parse_line(draft, line)
            except CueSheetError as exc:
                raise LineError(line_count, line) from exc

        cue_sheet = validate(draft)
        logger.info(
            "cue sheet parsed correctly: lines=%d file=%s format=%s tracks=%d",
            line_count,
            cue_sheet.file_name,
            cue_sheet.format.value,
            len(cue_sheet.tracks),
        )
        return cue_sheet

    def parse_line(self, draft: DraftCueSheet, line: str) -> None:
        """Dispatch one normalized line to its command handler."""
        fields = line.split()
        if not fields:
            # only whitespace outside TRIM_CHARS, such as a form feed
            return
        keyword, *parameters = fields
        command = Command.lookup(keyword)
        try:
            command.check_arity(len(parameters))
            self._handlers[command](draft, parameters)
        except CueSheetError as exc:
            raise CommandError(keyword) from exc

    def _parse_file(self, draft: DraftCueSheet, parameters: list[str]) -> None:
        *name, format_token = parameters
        audio_format = AudioFormat.from_token(format_token.strip(TRIM_CHARS))
        assign_once(draft, "format", audio_format, label="FILE format")
        assign_text(draft, "file_name", join_parameters(name), label="FILE name")

    def _parse_performer(self, draft: DraftCueSheet, parameters: list[str]) -> None:
        assign_text(draft, "album_performer", join_parameters(parameters), label="PERFORMER")

    def _parse_title(self, draft: DraftCueSheet, parameters: list[str]) -> None:
        title = join_parameters(parameters)
        if draft.state is ParserState.BEFORE_ANY_TRACK:
            assign_text(draft, "album_title", title, label="album TITLE")
            return
        track = draft.current_track
        assign_text(track, "title", title, label=f"track {track.number} TITLE")

    def _parse_track(self, draft: DraftCueSheet, parameters: list[str]) -> None:
        number_token, track_type = parameters
        number = self._next_track_number(draft, number_token)

        previous = draft.current_track
        if previous is not None and previous.index01 is None:
            raise IndexSequenceError(
                f"track {previous.number} must have INDEX 01 before track {number}"
            )

        track = draft.open_track(number)
        assign_text(track, "type", track_type, label=f"track {number} TYPE")

    def _next_track_number(self, draft: DraftCueSheet, token: str) -> int:
        if len(token) != TRACK_NUMBER_WIDTH:
            raise InvalidValueError(
                f"invalid track number: expected {TRACK_NUMBER_WIDTH} digits, got {len(token)}",
                value=token,
            )
        number = parse_integer(token, label="track number")
        expected = len(draft.tracks) + 1
        if number != expected:
            raise TrackSequenceError(f"expected track number {expected}, got {number}")
        if number > self.options.max_tracks:
            raise TrackSequenceError(f"cannot have more than {self.options.max_tracks} tracks")
        return number

    def _parse_index(self, draft: DraftCueSheet, parameters: list[str]) -> None:
        number_token, timestamp = parameters
        track = draft.current_track
        if track is None:
            raise IndexSequenceError("INDEX must follow a TRACK command")

        number = parse_integer(number_token, label="index number")
        attribute = self._index_attribute(track, number)
        assign_once(
            track,
            attribute,
            IndexPoint.parse(timestamp),
            label=f"track {track.number} INDEX {number:02d}",
        )

    @staticmethod
    def _index_attribute(track: DraftTrack, number: int) -> str:
        if number not in (0, 1):
            raise InvalidValueError(f"expected index number 0 or 1, got {number}")
        if number == 0 and track.index01 is not None:
            raise IndexSequenceError(f"track {track.number} already has INDEX 01, got INDEX 00")
        # a repeated number is reported by the set-once rule
        return "index00" if number == 0 else "index01"

    def _parse_rem(self, draft: DraftCueSheet, parameters: list[str]) -> None:
        keyword, *rest = parameters
        command = RemCommand.find(keyword)
        if command is None:
            draft.remarks.append(join_parameters(parameters).strip(TRIM_CHARS))
            return
        try:
            command.check_arity(len(rest))
            if command is RemCommand.GENRE:
                assign_text(draft, "genre", join_parameters(rest), label="REM GENRE")
            elif command is RemCommand.DATE:
                assign_text(draft, "date", join_parameters(rest), label="REM DATE")
            elif command is RemCommand.DISCID:
                assign_once(
                    draft,
                    "disc_id",
                    _parse_disc_id(rest[0]),
                    label="REM DISCID",
                    describe=lambda disc_id: f"{disc_id:08X}",
                )
            else:
                draft.remarks.append(join_parameters(rest).strip(TRIM_CHARS))
        except CueSheetError as exc:
            raise CommandError(f"REM {keyword}") from exc


def _parse_disc_id(token: str) -> int:
    token = token.strip(TRIM_CHARS)
    if len(token) != DISC_ID_LENGTH:
        raise InvalidValueError(
            f"invalid disc id: expected {DISC_ID_LENGTH} hexadecimal digits, got {len(token)}",
            value=token,
        )
    if _HEX_RE.fullmatch(token) is None:
        raise InvalidValueError(f"invalid disc id: {token!r} is not hexadecimal", value=token)
    return int(token, 16)
