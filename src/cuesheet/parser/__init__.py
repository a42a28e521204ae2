"""Cue sheet command parser and validator."""

from .commands import Command, RemCommand
from .parser import CueSheetParser, ParserOptions
from .state import ParserState

__all__ = ["Command", "CueSheetParser", "ParserOptions", "ParserState", "RemCommand"]
