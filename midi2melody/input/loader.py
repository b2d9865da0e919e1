"""MIDI file loading - the raw event stream for melody extraction."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import mido

from ..core import RawEvent

logger = logging.getLogger(__name__)


class MidiLoadError(ValueError):
    """Raised when a MIDI file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read MIDI file {path}: {reason}")


class MidiLoader:
    """Reads a Standard MIDI File into per-track absolute-tick events."""

    SUPPORTED_FORMATS = {".mid", ".midi", ".smf", ".kar"}

    def __init__(self, source: Union[str, Path, mido.MidiFile]):
        """
        Initialize MidiLoader.

        Args:
            source: Path to a MIDI file, or an already parsed mido.MidiFile

        Raises:
            FileNotFoundError: If the path doesn't exist
            MidiLoadError: If the file can't be parsed as MIDI
        """
        if isinstance(source, mido.MidiFile):
            self.path = Path(source.filename) if source.filename else None
            self.midi = source
        else:
            self.path = Path(source)
            self.midi = self._read(self.path)

    @classmethod
    def from_midi_file(cls, midi_file: mido.MidiFile) -> "MidiLoader":
        return cls(midi_file)

    @staticmethod
    def _read(path: Path) -> mido.MidiFile:
        if not path.exists():
            raise FileNotFoundError(f"MIDI file not found: {path}")

        if path.suffix.lower() not in MidiLoader.SUPPORTED_FORMATS:
            # Extension is only a hint; the header decides.
            logger.debug("Unusual MIDI extension %r for %s", path.suffix, path)

        try:
            return mido.MidiFile(str(path))
        except (OSError, EOFError, ValueError, KeyError, IndexError) as e:
            raise MidiLoadError(path, str(e) or type(e).__name__) from e

    @property
    def track_count(self) -> int:
        return len(self.midi.tracks)

    @property
    def ticks_per_quarter(self) -> int:
        """File resolution in ticks per quarter note."""
        return self.midi.ticks_per_beat

    def events(self, track: Optional[int] = None) -> List[RawEvent]:
        """
        Get the raw events of one track, or of all tracks merged.

        Args:
            track: Track index, or None to merge every track into one timeline

        Returns:
            Events in non-decreasing tick order. An invalid track index
            is logged and yields an empty list.
        """
        if track is None:
            return list(self._absolute(mido.merge_tracks(self.midi.tracks)))

        if track < 0 or track >= self.track_count:
            logger.warning(
                "Invalid track: %d Maximum track is: %d",
                track,
                self.track_count - 1,
            )
            return []

        return list(self._absolute(self.midi.tracks[track]))

    def is_valid_track(self, track: int) -> bool:
        return 0 <= track < self.track_count

    @staticmethod
    def _absolute(messages: Iterable[mido.Message]) -> Iterable[RawEvent]:
        """Convert delta-time messages to absolute-tick raw events."""
        tick = 0
        for msg in messages:
            tick += msg.time
            raw = msg.bytes()
            if not raw:
                continue
            yield RawEvent(tick=tick, status=raw[0], data=tuple(raw[1:]))
