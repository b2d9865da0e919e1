"""Core types and constants for midi2melody."""

from .note import NoteInterval, Segment, MelodyLine, Note, Chord, ChordProgression
from .events import RawEvent, NoteOn, NoteOff, Other, classify
from .constants import (
    NUM_PITCHES,
    REST,
    EMISSION_TPQ,
    DEFAULT_VELOCITY,
)

__all__ = [
    "NoteInterval",
    "Segment",
    "MelodyLine",
    "Note",
    "Chord",
    "ChordProgression",
    "RawEvent",
    "NoteOn",
    "NoteOff",
    "Other",
    "classify",
    "NUM_PITCHES",
    "REST",
    "EMISSION_TPQ",
    "DEFAULT_VELOCITY",
]
