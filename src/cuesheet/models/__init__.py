"""Cue sheet data model."""

from .cuesheet import AudioFormat, CueSheet, IndexPoint, Track

__all__ = ["AudioFormat", "CueSheet", "IndexPoint", "Track"]
