"""Raw MIDI events and their note-level classification."""

from dataclasses import dataclass
from typing import Tuple, Union

from .constants import NOTE_OFF, NOTE_ON


@dataclass(frozen=True)
class RawEvent:
    """A timestamped MIDI event as read from a track."""

    tick: int  # Absolute tick
    status: int  # Status byte
    data: Tuple[int, ...] = ()  # Data bytes following the status

    @property
    def command(self) -> int:
        """Status high nibble (0x80, 0x90, ...)."""
        return self.status & 0xF0


@dataclass(frozen=True)
class NoteOn:
    pitch: int
    velocity: int


@dataclass(frozen=True)
class NoteOff:
    pitch: int


@dataclass(frozen=True)
class Other:
    pass


def classify(event: RawEvent) -> Union[NoteOn, NoteOff, Other]:
    """
    Map a raw event to a note-level event.

    A note-on with zero velocity is reported as a NoteOff. Anything that
    is not a complete note-on/note-off message is Other.
    """
    command = event.command
    if command == NOTE_ON and len(event.data) >= 2:
        pitch, velocity = event.data[0], event.data[1]
        if velocity == 0:
            return NoteOff(pitch)
        return NoteOn(pitch, velocity)
    if command == NOTE_OFF and len(event.data) >= 1:
        return NoteOff(event.data[0])
    return Other()
