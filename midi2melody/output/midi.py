"""MIDI export of extracted melody lines."""

import pretty_midi
from pathlib import Path

from ..core import MelodyLine
from ..core.constants import DEFAULT_VELOCITY


class MelodyExporter:
    """Export a melody line to MIDI format."""

    def __init__(
        self,
        ticks_per_quarter: int,
        tempo: float = 120.0,
        velocity: int = DEFAULT_VELOCITY,
        instrument_name: str = "Melody",
        instrument_program: int = 0,
    ):
        """
        Initialize MelodyExporter.

        Args:
            ticks_per_quarter: Resolution the melody line's ticks are in
            tempo: Tempo in BPM
            velocity: Velocity given to every exported note
            instrument_name: MIDI instrument name
            instrument_program: MIDI program number (0-127)
        """
        self.ticks_per_quarter = ticks_per_quarter
        self.tempo = tempo
        self.velocity = velocity
        self.instrument_name = instrument_name
        self.instrument_program = instrument_program

    def melody_to_pretty_midi(self, line: MelodyLine) -> pretty_midi.PrettyMIDI:
        """Convert a melody line to a PrettyMIDI object without saving.

        Each pitched segment sounds until the next segment starts.
        """
        midi = pretty_midi.PrettyMIDI(
            resolution=self.ticks_per_quarter,
            initial_tempo=self.tempo,
        )

        instrument = pretty_midi.Instrument(
            program=self.instrument_program,
            name=self.instrument_name,
        )

        for segment, following in zip(line, line[1:]):
            if segment.is_rest:
                continue
            instrument.notes.append(
                pretty_midi.Note(
                    velocity=self.velocity,
                    pitch=segment.pitch,
                    start=midi.tick_to_time(int(segment.time)),
                    end=midi.tick_to_time(int(following.time)),
                )
            )

        midi.instruments.append(instrument)
        return midi

    def export(self, line: MelodyLine, output_path: str) -> None:
        """
        Export a melody line to a MIDI file.

        Args:
            line: Melody segments in ticks
            output_path: Path to output MIDI file
        """
        midi = self.melody_to_pretty_midi(line)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        midi.write(str(output_path))
