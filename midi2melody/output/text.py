"""Plain text rendering of melody lines."""

from typing import Iterable

from ..core import MelodyLine


def format_time(ticks: float, ticks_per_quarter: int) -> str:
    """Tick position as quarter notes, six significant digits."""
    return f"{ticks / ticks_per_quarter:g}"


def render(line: MelodyLine, ticks_per_quarter: int) -> str:
    """
    Render a melody line as ``time<TAB>pitch`` lines.

    Args:
        line: Melody segments
        ticks_per_quarter: Resolution used to convert ticks to quarter notes

    Returns:
        Text with one newline-terminated line per segment
    """
    if ticks_per_quarter <= 0:
        raise ValueError(f"ticks_per_quarter must be positive, got {ticks_per_quarter}")

    return "".join(
        f"{format_time(seg.time, ticks_per_quarter)}\t{seg.pitch}\n" for seg in line
    )


def render_pitches(pitches: Iterable[int]) -> str:
    return "".join(f"{p}\n" for p in pitches)
