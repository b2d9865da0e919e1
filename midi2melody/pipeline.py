"""Melody extraction pipeline: load -> reconstruct -> reduce."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .core import MelodyLine, NoteInterval
from .input import MidiLoader
from .processing import MonophonicReducer
from .transcription import NoteReconstructor

logger = logging.getLogger(__name__)


@dataclass
class ExtractionConfig:
    """Configuration for melody extraction.

    Attributes:
        track: Track to scan, or None to merge all tracks (default: None)
    """

    track: Optional[int] = None


@dataclass
class MelodyResult:
    """Container for an extracted melody."""

    line: MelodyLine
    ticks_per_quarter: int
    intervals: List[NoteInterval] = field(default_factory=list)
    valid_track: bool = True


def extract_melody(
    source: Union[str, Path, MidiLoader],
    config: Optional[ExtractionConfig] = None,
) -> MelodyResult:
    """
    Extract the monophonic melody of a MIDI file.

    Args:
        source: MIDI file path or an existing MidiLoader
        config: Extraction options (default: merge all tracks)

    Returns:
        MelodyResult with the melody line in ticks
    """
    config = config or ExtractionConfig()
    loader = source if isinstance(source, MidiLoader) else MidiLoader(source)

    valid = config.track is None or loader.is_valid_track(config.track)
    events = loader.events(config.track)
    intervals = NoteReconstructor().reconstruct(events)
    line = MonophonicReducer().reduce(intervals)

    logger.debug("Extracted %d melody segments from %d notes", len(line), len(intervals))

    return MelodyResult(
        line=line,
        ticks_per_quarter=loader.ticks_per_quarter,
        intervals=intervals,
        valid_track=valid,
    )
