"""Final structural checks that turn a draft into a ``CueSheet``."""

from __future__ import annotations

from itertools import pairwise

from cuesheet.errors import InvalidCueSheetError, MissingFieldError, OverlappingIndexError
from cuesheet.models import CueSheet, Track
from cuesheet.parser.state import DraftCueSheet, DraftTrack


def validate(draft: DraftCueSheet) -> CueSheet:
    """Check required fields and index ordering, returning the frozen cue sheet."""
    try:
        return _validate(draft)
    except (MissingFieldError, OverlappingIndexError) as exc:
        raise InvalidCueSheetError() from exc


def _validate(draft: DraftCueSheet) -> CueSheet:
    if not draft.file_name:
        raise MissingFieldError("missing file name", field="file_name")
    if draft.format is None:
        raise MissingFieldError("missing file format", field="format")
    if not draft.tracks:
        raise MissingFieldError("missing tracks", field="tracks")

    tracks = tuple(_freeze_track(track) for track in draft.tracks)
    _check_index_order(tracks)

    return CueSheet(
        file_name=draft.file_name,
        format=draft.format,
        tracks=tracks,
        album_performer=draft.album_performer,
        album_title=draft.album_title,
        date=draft.date,
        disc_id=draft.disc_id,
        genre=draft.genre,
        remarks=tuple(draft.remarks),
    )


def _freeze_track(draft: DraftTrack) -> Track:
    if not draft.type:
        raise MissingFieldError(
            f"missing track TYPE in track {draft.number}", field="type", track=draft.number
        )
    if draft.index01 is None:
        raise MissingFieldError(
            f"missing INDEX 01 in track {draft.number}", field="index01", track=draft.number
        )
    return Track(
        number=draft.number,
        type=draft.type,
        index01=draft.index01,
        title=draft.title,
        index00=draft.index00,
    )


def _check_index_order(tracks: tuple[Track, ...]) -> None:
    points = [(track, point) for track in tracks for point in track.index_points()]
    for (first_track, first), (second_track, second) in pairwise(points):
        if not first.precedes(second):
            raise OverlappingIndexError(
                first,
                second,
                first_track=first_track.number,
                second_track=second_track.number,
            )
