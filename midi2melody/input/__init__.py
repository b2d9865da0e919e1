"""Input layer - MIDI file loading.

Produces the raw, absolute-tick event stream consumed by transcription.
"""

from .loader import MidiLoader, MidiLoadError

__all__ = [
    "MidiLoader",
    "MidiLoadError",
]
