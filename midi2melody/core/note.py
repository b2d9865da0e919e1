"""Note value types - reconstructed intervals, melody segments and emission notes."""

from dataclasses import dataclass, field
from typing import List, Sequence

from .constants import DEFAULT_VELOCITY, REST


@dataclass(frozen=True)
class NoteInterval:
    """A sounding pitch reconstructed from a note-on/note-off pair."""

    pitch: int  # MIDI pitch (0-127)
    onset: float  # Start tick
    duration: float  # Length in ticks

    @property
    def offset(self) -> float:
        """End tick."""
        return self.onset + self.duration


@dataclass(frozen=True)
class Segment:
    """One entry of a melody line: a pitch (or rest) starting at a tick."""

    time: float
    pitch: int

    @property
    def is_rest(self) -> bool:
        return self.pitch == REST


MelodyLine = List[Segment]


@dataclass(frozen=True)
class Note:
    """A note to be written, with its length in quarter notes."""

    tone: int
    length: float
    velocity: int = DEFAULT_VELOCITY


@dataclass(frozen=True)
class Chord:
    """Notes sounding together, occupying ``length`` quarter notes."""

    notes: Sequence[Note]
    length: float

    @classmethod
    def from_pitches(
        cls,
        pitches: Sequence[int],
        length: float,
        velocity: int = DEFAULT_VELOCITY,
    ) -> "Chord":
        """Build a chord whose notes all last the full chord length."""
        return cls(
            notes=tuple(Note(tone=p, length=length, velocity=velocity) for p in pitches),
            length=length,
        )


@dataclass
class ChordProgression:
    """Chords played one after another."""

    chords: List[Chord] = field(default_factory=list)

    @property
    def length(self) -> float:
        """Total length in quarter notes."""
        return sum(c.length for c in self.chords)
