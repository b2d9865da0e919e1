"""Command-line interface for midi2melody.

Prints the melody of a MIDI file as ``time<TAB>pitch`` lines, where time
is in quarter notes and pitch 0 is a rest.
"""

import click
import typer
from pathlib import Path
from typing import List, Optional
from typer.core import TyperCommand
from rich.console import Console
from rich.markup import escape

from . import __version__

app = typer.Typer(
    name="midi2melody",
    help="Extract a monophonic melody line from a MIDI file",
    rich_markup_mode="markdown",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console(highlight=False)

AUTHOR = "Written by Craig Stuart Sapp, craig@ccrma.stanford.edu, 30 June 2001"

EXAMPLES = """\
Print the melody of all tracks merged:
    midi2melody song.mid

Print the melody of the second track only:
    midi2melody -t 1 song.mid

Count the tracks in a file:
    midi2melody -c song.mid

Print only the pitches, and also save the melody as MIDI:
    midi2melody -p -o melody.mid song.mid
"""


def _author_callback(value: bool) -> None:
    if value:
        console.print(AUTHOR)
        raise typer.Exit()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"midi2melody, version: {__version__}")
        raise typer.Exit()


def _example_callback(value: bool) -> None:
    if value:
        console.print(EXAMPLES, end="", markup=False)
        raise typer.Exit()


class ExtractCommand(TyperCommand):
    """Reports malformed or extra arguments with exit code 1."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@app.command(cls=ExtractCommand)
def extract(
    ctx: typer.Context,
    input_file: Optional[Path] = typer.Argument(None, help="Input MIDI file"),
    track: Optional[int] = typer.Option(
        None, "-t", "--track", help="Track from which to extract melody (default: all tracks merged)"
    ),
    track_count: bool = typer.Option(
        False, "-c", "--track-count", help="List number of tracks"
    ),
    pitches: bool = typer.Option(
        False, "-p", "--pitches", help="Print only the melody pitches, one per line"
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Also write the melody to this MIDI file"
    ),
    author: bool = typer.Option(
        False, "--author", help="Author of program", callback=_author_callback, is_eager=True
    ),
    version: bool = typer.Option(
        False, "--version", help="Version info", callback=_version_callback, is_eager=True
    ),
    example: bool = typer.Option(
        False, "--example", help="Example usages", callback=_example_callback, is_eager=True
    ),
):
    """Convert a single melody MIDI file or track into text with start time and pitch.

    **Examples:**

        midi2melody song.mid

        midi2melody -t 1 song.mid
    """
    from .input import MidiLoader, MidiLoadError
    from .pipeline import ExtractionConfig, extract_melody
    from .processing import pitch_sequence
    from .output import render, render_pitches, MelodyExporter

    if input_file is None:
        console.print(ctx.get_usage(), markup=False)
        raise typer.Exit(1)

    try:
        loader = MidiLoader(input_file)
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)
    except MidiLoadError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if track_count:
        console.print(loader.track_count)
        raise typer.Exit()

    if track is not None and not loader.is_valid_track(track):
        console.print(
            f"Invalid track: {track} Maximum track is: {loader.track_count - 1}"
        )

    result = extract_melody(loader, ExtractionConfig(track=track))

    if pitches:
        typer.echo(render_pitches(pitch_sequence(result.intervals)), nl=False)
    else:
        typer.echo(render(result.line, result.ticks_per_quarter), nl=False)

    if output is not None:
        MelodyExporter(ticks_per_quarter=result.ticks_per_quarter).export(
            result.line, str(output)
        )


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
