from __future__ import annotations

from datetime import timedelta

import pytest

from cuesheet.errors import (
    CommandError,
    CueSheetError,
    ErrorKind,
    FieldAlreadySetError,
    InvalidValueError,
    LineError,
)
from cuesheet.models import AudioFormat, CueSheet, IndexPoint, Track
from cuesheet.parser.commands import Command, RemCommand
from cuesheet.parser.fields import assign_once, assign_text, normalize_line
from cuesheet.parser.state import DraftTrack


def test_index_point_parse_and_render() -> None:
    index_point = IndexPoint.parse("12:34:56")

    assert index_point.frame == 56
    assert index_point.timestamp == timedelta(minutes=12, seconds=34)
    assert str(index_point) == "12:34:56"


@pytest.mark.parametrize("token", ["1:00:00", "00:00:000", "aa:bb:cc", "00-00-00", ""])
def test_index_point_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(InvalidValueError, match="error parsing timestamp and frame"):
        IndexPoint.parse(token)


def test_index_point_ordering_uses_timestamp_then_frame() -> None:
    early = IndexPoint.parse("00:10:74")
    later = IndexPoint.parse("00:11:00")
    same_second = IndexPoint.parse("00:11:01")

    assert early.precedes(later)
    assert later.precedes(same_second)
    assert not later.precedes(later)
    assert not later.precedes(early)


def test_audio_format_from_token() -> None:
    assert AudioFormat.from_token("mp3") is AudioFormat.MP3

    with pytest.raises(InvalidValueError, match="WAVE, MP3, AIFF, BINARY, MOTOROLA"):
        AudioFormat.from_token("FLAC")


def test_cue_sheet_index_points_in_document_order() -> None:
    first = Track(number=1, type="AUDIO", index01=IndexPoint.parse("00:00:00"))
    second = Track(
        number=2,
        type="AUDIO",
        index00=IndexPoint.parse("03:00:00"),
        index01=IndexPoint.parse("03:02:00"),
    )
    cue_sheet = CueSheet(file_name="a.wav", format=AudioFormat.WAVE, tracks=(first, second))

    assert [(track.number, str(point)) for track, point in cue_sheet.index_points()] == [
        (1, "00:00:00"),
        (2, "03:00:00"),
        (2, "03:02:00"),
    ]
    assert second.has_pregap() and not first.has_pregap()
    assert cue_sheet.disc_id_hex is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('  TITLE "Album"\n', "TITLE \"Album"),
        ("\tINDEX 01 00:00:00\r\n", "INDEX 01 00:00:00"),
        ("REM", None),
        ('  "" \n', None),
        ("", None),
        ("REM COMMENT x", "REM COMMENT x"),
    ],
)
def test_normalize_line(raw: str, expected: str | None) -> None:
    assert normalize_line(raw) == expected


def test_assign_once_treats_zero_point_as_set() -> None:
    track = DraftTrack(number=1)
    zero = IndexPoint(frame=0, timestamp=timedelta(0))

    assign_once(track, "index01", zero)

    with pytest.raises(FieldAlreadySetError) as excinfo:
        assign_once(track, "index01", zero, label="INDEX 01")
    assert excinfo.value.field == "INDEX 01"
    assert excinfo.value.current is zero


def test_assign_text_trims_value() -> None:
    track = DraftTrack(number=1)

    assign_text(track, "title", ' "Intro" ')

    assert track.title == "Intro"


def test_command_lookup_and_arity() -> None:
    assert Command.lookup("track") is Command.TRACK
    assert RemCommand.find("discid") is RemCommand.DISCID
    assert RemCommand.find("REPLAYGAIN_TRACK_GAIN") is None

    with pytest.raises(CueSheetError, match="unexpected command: CATALOG"):
        Command.lookup("CATALOG")
    with pytest.raises(CueSheetError, match="expected 2 parameters, got 1"):
        Command.INDEX.check_arity(1)
    with pytest.raises(CueSheetError, match="expected at least 1 parameters, got 0"):
        Command.TITLE.check_arity(0)
    Command.REM.check_arity(5)


def test_error_chain_rendering_and_kind() -> None:
    try:
        try:
            try:
                raise FieldAlreadySetError("PERFORMER", "First")
            except CueSheetError as exc:
                raise CommandError("PERFORMER") from exc
        except CueSheetError as exc:
            raise LineError(2, 'PERFORMER "Second') from exc
    except LineError as error:
        assert str(error) == (
            'line 2: PERFORMER "Second: error parsing "PERFORMER" command: '
            "PERFORMER: field already set: First"
        )
        assert error.kind is None
        assert error.error_kind is ErrorKind.STATE
        assert isinstance(error.root_cause, FieldAlreadySetError)
