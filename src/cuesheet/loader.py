"""Reading cue sheets from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from cuesheet.models import CueSheet
from cuesheet.parser import CueSheetParser, ParserOptions

logger = logging.getLogger(__name__)


class CueSheetLoader:
    """Open a cue sheet file and hand its lines to the parser."""

    def __init__(
        self,
        path: Path | str,
        *,
        encoding: str = "utf-8",
        options: ParserOptions | None = None,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.parser = CueSheetParser(options)

    def load(self) -> CueSheet:
        """Return the parsed cue sheet stored at ``path``."""
        if not self.path.is_file():
            raise FileNotFoundError(f"Cue sheet not found: {self.path}")
        logger.debug("reading cue sheet %s (%s)", self.path, self.encoding)
        with self.path.open("r", encoding=self.encoding) as stream:
            return self.parser.parse(stream)


def load_cue_sheet(
    path: Path | str,
    *,
    encoding: str = "utf-8",
    options: ParserOptions | None = None,
) -> CueSheet:
    return CueSheetLoader(path, encoding=encoding, options=options).load()
