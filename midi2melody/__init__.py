"""midi2melody - Monophonic melody extraction from MIDI files.

Architecture Layers:
    1. input/         - MIDI file loading (raw absolute-tick events)
    2. transcription/ - Note reconstruction from note-on/note-off pairs
    3. processing/    - Monophonic reduction (top voice, rest insertion)
    4. output/        - Text rendering, MIDI event writing, melody export
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core types
from .core import NoteInterval, Segment, RawEvent, Note, Chord, ChordProgression

# Input layer
from .input import MidiLoader, MidiLoadError

# Transcription layer
from .transcription import NoteReconstructor

# Processing layer
from .processing import MonophonicReducer

# Output layer
from .output import EventStream, MelodyExporter, render

# Pipeline
from .pipeline import ExtractionConfig, MelodyResult, extract_melody

__all__ = [
    # Core
    "NoteInterval",
    "Segment",
    "RawEvent",
    "Note",
    "Chord",
    "ChordProgression",
    # Input
    "MidiLoader",
    "MidiLoadError",
    # Transcription
    "NoteReconstructor",
    # Processing
    "MonophonicReducer",
    # Output
    "EventStream",
    "MelodyExporter",
    "render",
    # Pipeline
    "ExtractionConfig",
    "MelodyResult",
    "extract_melody",
]
