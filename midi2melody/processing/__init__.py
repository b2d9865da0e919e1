"""Processing layer - Note-level post-processing.

- Sorting of reconstructed intervals
- Monophonic reduction (top voice on simultaneous onsets, rest insertion)
- Pitch-only sequences
"""

from .reducer import MonophonicReducer, sort_intervals, reduce, pitch_sequence

__all__ = [
    "MonophonicReducer",
    "sort_intervals",
    "reduce",
    "pitch_sequence",
]
