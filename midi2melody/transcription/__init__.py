"""Transcription layer - Note-level reconstruction from MIDI events."""

from .reconstructor import NoteReconstructor, reconstruct

__all__ = [
    "NoteReconstructor",
    "reconstruct",
]
