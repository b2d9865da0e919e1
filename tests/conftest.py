"""Shared MIDI fixtures."""

import mido
import pytest


def make_midi(tracks, ticks_per_beat=480):
    """
    Build a MIDI file from per-track lists of (abs_tick, type, note, velocity).
    """
    midi = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
    for events in tracks:
        track = mido.MidiTrack()
        last = 0
        for tick, kind, note, velocity in sorted(events, key=lambda e: e[0]):
            track.append(mido.Message(kind, note=note, velocity=velocity, time=tick - last))
            last = tick
        track.append(mido.MetaMessage("end_of_track", time=0))
        midi.tracks.append(track)
    return midi


@pytest.fixture
def two_track_midi():
    """Melody in track 0 (C4, D4), a lower sustained note in track 1."""
    return make_midi(
        [
            [
                (0, "note_on", 60, 90),
                (480, "note_off", 60, 0),
                (960, "note_on", 62, 90),
                (1200, "note_on", 62, 0),
            ],
            [
                (0, "note_on", 48, 70),
                (1920, "note_off", 48, 0),
            ],
        ]
    )


@pytest.fixture
def two_track_file(tmp_path, two_track_midi):
    path = tmp_path / "song.mid"
    two_track_midi.save(str(path))
    return path
