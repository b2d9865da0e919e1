"""Tests for MIDI loading and the extraction pipeline."""

import logging

import pytest

from midi2melody.core import RawEvent
from midi2melody.input import MidiLoader, MidiLoadError
from midi2melody.pipeline import ExtractionConfig, extract_melody


class TestMidiLoader:
    """Tests for MidiLoader."""

    def test_track_count_and_resolution(self, two_track_file):
        loader = MidiLoader(two_track_file)
        assert loader.track_count == 2
        assert loader.ticks_per_quarter == 480

    def test_single_track_absolute_ticks(self, two_track_midi):
        loader = MidiLoader.from_midi_file(two_track_midi)
        events = loader.events(0)

        note_events = [e for e in events if e.command in (0x80, 0x90)]
        assert [e.tick for e in note_events] == [0, 480, 960, 1200]
        assert note_events[0] == RawEvent(tick=0, status=0x90, data=(60, 90))

    def test_merged_tracks_are_in_tick_order(self, two_track_midi):
        events = MidiLoader.from_midi_file(two_track_midi).events()

        ticks = [e.tick for e in events]
        assert ticks == sorted(ticks)
        pitches = {e.data[0] for e in events if e.command in (0x80, 0x90)}
        assert pitches == {48, 60, 62}

    def test_meta_events_keep_status(self, two_track_midi):
        events = MidiLoader.from_midi_file(two_track_midi).events(1)
        assert events[-1].status == 0xFF

    @pytest.mark.parametrize("track", [-1, 2, 99])
    def test_invalid_track_yields_no_events(self, two_track_midi, track, caplog):
        loader = MidiLoader.from_midi_file(two_track_midi)

        with caplog.at_level(logging.WARNING):
            assert loader.events(track) == []

        assert f"Invalid track: {track} Maximum track is: 1" in caplog.text
        assert not loader.is_valid_track(track)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="not found"):
            MidiLoader(tmp_path / "missing.mid")

    def test_malformed_file(self, tmp_path):
        bad = tmp_path / "bad.mid"
        bad.write_bytes(b"this is not a midi file")

        with pytest.raises(MidiLoadError) as info:
            MidiLoader(bad)

        assert info.value.path == bad
        assert isinstance(info.value, ValueError)


class TestExtractMelody:
    """Tests for the load -> reconstruct -> reduce pipeline."""

    def test_merged_tracks_default(self, two_track_file):
        result = extract_melody(two_track_file)

        # C4 and the bass start together; the top voice wins and the line
        # closes at the end of the last-starting note
        assert [(s.time, s.pitch) for s in result.line] == [
            (0, 60),
            (480, 0),
            (960, 62),
            (1200, 0),
        ]
        assert result.ticks_per_quarter == 480
        assert len(result.intervals) == 3

    def test_selected_track(self, two_track_file):
        result = extract_melody(two_track_file, ExtractionConfig(track=1))
        assert [(s.time, s.pitch) for s in result.line] == [(0, 48), (1920, 0)]

    def test_invalid_track_gives_empty_melody(self, two_track_midi):
        loader = MidiLoader.from_midi_file(two_track_midi)
        result = extract_melody(loader, ExtractionConfig(track=5))

        assert result.line == []
        assert result.intervals == []
        assert not result.valid_track

    def test_config_is_not_shared(self):
        assert ExtractionConfig().track is None
        assert ExtractionConfig(track=3).track == 3
