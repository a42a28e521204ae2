"""Command-line entry point for cuesheet."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from cuesheet.errors import CueSheetError
from cuesheet.loader import CueSheetLoader
from cuesheet.models import CueSheet
from cuesheet.parser import ParserOptions
from cuesheet.parser.parser import MAX_TRACKS


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "cue_path",
    type=click.Path(path_type=Path, readable=True, exists=True, dir_okay=False),
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of the cue sheet.",
)
@click.option(
    "--max-tracks",
    type=click.IntRange(1, MAX_TRACKS),
    default=MAX_TRACKS,
    show_default=True,
    help="Largest track number accepted.",
)
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Log parser progress to stderr.",
)
def main(cue_path: Path, encoding: str, max_tracks: int, verbose: bool) -> None:
    """Parse a cue sheet and print its track layout."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    loader = CueSheetLoader(cue_path, encoding=encoding, options=ParserOptions(max_tracks=max_tracks))
    try:
        cue_sheet = loader.load()
    except CueSheetError as exc:
        raise click.ClickException(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"cannot decode {cue_path} as {encoding}: {exc}") from exc

    _print_cue_sheet(cue_sheet)


def _print_cue_sheet(cue_sheet: CueSheet) -> None:
    click.echo(f"file: {cue_sheet.file_name} [{cue_sheet.format.value}]")
    if cue_sheet.album_performer:
        click.echo(f"performer: {cue_sheet.album_performer}")
    if cue_sheet.album_title:
        click.echo(f"title: {cue_sheet.album_title}")

    for track in cue_sheet.tracks:
        title = f" {track.title}" if track.title else ""
        click.echo(f"{track.number:02d}. {track.index01} {track.type}{title}")


if __name__ == "__main__":
    main()
