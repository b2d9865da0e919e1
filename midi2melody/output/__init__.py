"""Output layer - Export to various formats.

This layer handles:
- Plain text melody lines (time in quarter notes, pitch)
- Writing notes, chords and progressions as MIDI events
- MIDI export of extracted melodies
"""

from .text import render, render_pitches
from .stream import (
    EventStream,
    append_note_on,
    append_note_off,
    add_note,
    add_notes,
    add_chord,
    add_consecutive_notes,
    add_progression,
)
from .midi import MelodyExporter

__all__ = [
    "render",
    "render_pitches",
    "EventStream",
    "append_note_on",
    "append_note_off",
    "add_note",
    "add_notes",
    "add_chord",
    "add_consecutive_notes",
    "add_progression",
    "MelodyExporter",
]
