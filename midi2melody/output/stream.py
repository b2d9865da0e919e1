"""Event stream sink - write notes, chords and progressions as MIDI events.

Times passed to the note helpers are in quarter notes and are scaled by
EMISSION_TPQ; the low-level append functions take raw ticks.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

import mido

from ..core import Chord, ChordProgression, Note, NoteOff, RawEvent, classify
from ..core.constants import (
    EMISSION_TPQ,
    MIDI_MAX,
    MIDI_MIN,
    NOTE_OFF,
    NOTE_ON,
    NUM_CHANNELS,
)


@dataclass(frozen=True)
class TimedEvent:
    tick: int
    message: Tuple[int, ...]

    @property
    def is_note_off(self) -> bool:
        event = RawEvent(tick=self.tick, status=self.message[0], data=self.message[1:])
        return isinstance(classify(event), NoteOff)


class EventStream:
    """Absolute-tick MIDI events grouped by track."""

    def __init__(self, num_tracks: int = 1):
        self.tracks: List[List[TimedEvent]] = [[] for _ in range(max(num_tracks, 1))]

    def add_event(self, track: int, tick: float, message: Iterable[int]) -> None:
        """Append an event to a track, creating missing tracks."""
        if track < 0:
            raise ValueError(f"Track index must be non-negative, got {track}")
        if tick < 0:
            raise ValueError(f"Event time must be non-negative, got {tick}")
        while len(self.tracks) <= track:
            self.tracks.append([])
        self.tracks[track].append(TimedEvent(tick=int(round(tick)), message=tuple(message)))

    def to_midi_file(self) -> mido.MidiFile:
        """
        Build a type-1 MIDI file.

        Within a tick, note-offs are written before other events so that a
        note ending where the next one starts is closed first. Otherwise
        events keep their insertion order.
        """
        midi = mido.MidiFile(type=1, ticks_per_beat=EMISSION_TPQ)
        for events in self.tracks:
            track = mido.MidiTrack()
            last_tick = 0
            for event in sorted(events, key=lambda e: (e.tick, not e.is_note_off)):
                msg = mido.Message.from_bytes(list(event.message))
                track.append(msg.copy(time=event.tick - last_tick))
                last_tick = event.tick
            track.append(mido.MetaMessage("end_of_track", time=0))
            midi.tracks.append(track)
        return midi

    def save(self, output_path: str) -> None:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        self.to_midi_file().save(str(output_path))


def _check(channel: int, pitch: int, velocity: int) -> None:
    if not 0 <= channel < NUM_CHANNELS:
        raise ValueError(f"MIDI channel must be 0-{NUM_CHANNELS - 1}, got {channel}")
    if not MIDI_MIN <= pitch <= MIDI_MAX:
        raise ValueError(f"MIDI pitch must be {MIDI_MIN}-{MIDI_MAX}, got {pitch}")
    if not MIDI_MIN <= velocity <= MIDI_MAX:
        raise ValueError(f"MIDI velocity must be {MIDI_MIN}-{MIDI_MAX}, got {velocity}")


def append_note_on(
    stream: EventStream, channel: int, time_ticks: float, pitch: int, velocity: int
) -> None:
    """Add a note-on message to the track numbered ``channel``."""
    _check(channel, pitch, velocity)
    stream.add_event(channel, time_ticks, (NOTE_ON | channel, pitch, velocity))


def append_note_off(
    stream: EventStream, channel: int, time_ticks: float, pitch: int, velocity: int
) -> None:
    """Add a note-off message to the track numbered ``channel``."""
    _check(channel, pitch, velocity)
    stream.add_event(channel, time_ticks, (NOTE_OFF | channel, pitch, velocity))


def add_note(stream: EventStream, channel: int, note: Note, time: float) -> None:
    """Add a note starting at ``time`` quarter notes."""
    append_note_on(stream, channel, time * EMISSION_TPQ, note.tone, note.velocity)
    append_note_off(
        stream, channel, (time + note.length) * EMISSION_TPQ, note.tone, note.velocity
    )


def add_notes(stream: EventStream, channel: int, notes: Iterable[Note], time: float) -> None:
    """Add notes that all start at ``time``."""
    for note in notes:
        add_note(stream, channel, note, time)


def add_consecutive_notes(
    stream: EventStream, channel: int, notes: Iterable[Note], init_time: float
) -> float:
    """
    Add notes one after another starting at ``init_time``.

    Returns:
        Time in quarter notes just after the last note
    """
    time = init_time
    for note in notes:
        add_note(stream, channel, note, time)
        time += note.length
    return time


def add_chord(stream: EventStream, channel: int, chord: Chord, time: float) -> None:
    add_notes(stream, channel, chord.notes, time)


def add_progression(
    stream: EventStream, channel: int, progression: ChordProgression, init_time: float
) -> float:
    """
    Add each chord of a progression after the previous one.

    Returns:
        Time in quarter notes just after the last chord
    """
    time = init_time
    for chord in progression.chords:
        add_chord(stream, channel, chord, time)
        time += chord.length
    return time
