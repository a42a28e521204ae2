"""The closed set of cue sheet commands and their arity contracts."""

from __future__ import annotations

from enum import Enum

from cuesheet.errors import ParameterCountError, UnexpectedCommandError


class _Arity(Enum):
    def __init__(self, keyword: str, exact: int, minimum: int) -> None:
        self.keyword = keyword
        self.exact = exact
        self.minimum = minimum

    def check_arity(self, count: int) -> None:
        """Raise ParameterCountError unless ``count`` satisfies this command."""
        if self.exact and count != self.exact:
            raise ParameterCountError(self.exact, count, exact=True)
        if self.minimum and count < self.minimum:
            raise ParameterCountError(self.minimum, count, exact=False)

    @classmethod
    def lookup(cls, keyword: str):
        """Return the member for ``keyword``, compared case-insensitively."""
        wanted = keyword.upper()
        for member in cls:
            if member.keyword == wanted:
                return member
        raise UnexpectedCommandError(keyword)


class Command(_Arity):
    """Top-level commands."""

    FILE = ("FILE", 2, 0)
    PERFORMER = ("PERFORMER", 0, 1)
    TITLE = ("TITLE", 0, 1)
    TRACK = ("TRACK", 2, 0)
    INDEX = ("INDEX", 2, 0)
    REM = ("REM", 0, 1)


class RemCommand(_Arity):
    """REM sub-commands with their own meaning; other words are plain remarks."""

    GENRE = ("GENRE", 0, 1)
    DATE = ("DATE", 0, 1)
    DISCID = ("DISCID", 1, 0)
    COMMENT = ("COMMENT", 0, 1)

    @classmethod
    def find(cls, keyword: str) -> RemCommand | None:
        try:
            return cls.lookup(keyword)
        except UnexpectedCommandError:
            return None
