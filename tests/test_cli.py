"""Tests for the command-line interface."""

import subprocess
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from midi2melody.cli import app
from midi2melody.transcription import NoteReconstructor

runner = CliRunner()


class TestExtractCommand:
    """Tests for melody text output."""

    def test_merged_melody(self, two_track_file):
        result = runner.invoke(app, [str(two_track_file)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["0\t60", "1\t0", "2\t62", "2.5\t0"]

    def test_selected_track(self, two_track_file):
        result = runner.invoke(app, ["-t", "1", str(two_track_file)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["0\t48", "4\t0"]

    def test_invalid_track_is_not_fatal(self, two_track_file):
        result = runner.invoke(app, ["--track", "7", str(two_track_file)])

        assert result.exit_code == 0
        assert "Invalid track: 7 Maximum track is: 1" in result.stdout

    def test_invalid_track_reported_once(self, two_track_file):
        """The diagnostic goes to stdout only, not also to stderr via logging."""
        proc = subprocess.run(
            [sys.executable, "-m", "midi2melody", "-t", "7", str(two_track_file)],
            cwd=Path(__file__).parent.parent,
            capture_output=True,
            text=True,
        )

        assert proc.returncode == 0
        assert proc.stdout == "Invalid track: 7 Maximum track is: 1\n"
        assert "Invalid track" not in proc.stderr

    def test_pitches(self, two_track_file):
        result = runner.invoke(app, ["-p", str(two_track_file)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["60", "62"]

    def test_output_midi(self, two_track_file, tmp_path):
        out = tmp_path / "melody.mid"
        result = runner.invoke(app, ["-o", str(out), str(two_track_file)])

        assert result.exit_code == 0
        assert out.exists()


class TestTrackCount:
    """Tests for --track-count."""

    def test_prints_track_count(self, two_track_file):
        result = runner.invoke(app, ["-c", str(two_track_file)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "2"

    def test_skips_reconstruction(self, two_track_file, monkeypatch):
        def fail(self, events):
            raise AssertionError("reconstruct should not run")

        monkeypatch.setattr(NoteReconstructor, "reconstruct", fail)
        result = runner.invoke(app, ["--track-count", str(two_track_file)])

        assert result.exit_code == 0


class TestUsage:
    """Tests for informational flags and usage errors."""

    def test_missing_file_argument(self):
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Usage" in result.stdout

    def test_extra_argument(self, two_track_file):
        result = runner.invoke(app, [str(two_track_file), "extra.mid"])
        assert result.exit_code == 1

    def test_non_integer_track(self, two_track_file):
        result = runner.invoke(app, ["-t", "abc", str(two_track_file)])
        assert result.exit_code == 1

    def test_nonexistent_file(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "nope.mid")])

        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_malformed_file(self, tmp_path):
        bad = tmp_path / "bad.mid"
        bad.write_bytes(b"garbage bytes here")
        result = runner.invoke(app, [str(bad)])

        assert result.exit_code == 1
        assert "Cannot read MIDI file" in result.stdout

    @pytest.mark.parametrize("flag", ["--author", "--version", "--example", "--help", "-h"])
    def test_informational_flags_exit_zero(self, flag):
        result = runner.invoke(app, [flag])
        assert result.exit_code == 0
        assert result.stdout.strip()
