"""Monophonic reduction - collapse note intervals into a single melody line."""

from typing import List, Sequence

from ..core import MelodyLine, NoteInterval, Segment
from ..core.constants import REST


def sort_intervals(intervals: Sequence[NoteInterval]) -> List[NoteInterval]:
    """
    Order intervals by onset, lowest pitch first among equal onsets.

    Within a group of simultaneous onsets only the last interval survives
    reduction, so this ordering keeps the highest pitch.
    """
    return sorted(intervals, key=lambda n: (n.onset, n.pitch))


def _with_sentinel(intervals: List[NoteInterval]) -> List[NoteInterval]:
    last = intervals[-1]
    return intervals + [NoteInterval(pitch=REST, onset=last.offset, duration=0)]


class MonophonicReducer:
    """
    Reduce possibly overlapping notes to one pitch-or-rest line.

    Only exact onset ties are resolved (top voice wins). Notes that start
    at different ticks but overlap are emitted back to back, so a segment
    may start before the previous note has ended.
    """

    def reduce(self, intervals: Sequence[NoteInterval]) -> MelodyLine:
        """
        Reduce intervals to a melody line.

        Args:
            intervals: Note intervals in any order

        Returns:
            Segments in time order; a rest (pitch 0) marks where a note
            ends before the next one starts, and a final rest closes the
            line. Empty input gives an empty line.
        """
        if not intervals:
            return []

        notes = _with_sentinel(sort_intervals(intervals))
        line: MelodyLine = []

        for current, following in zip(notes, notes[1:]):
            gap = following.onset - current.onset
            if gap == 0:
                continue

            line.append(Segment(time=current.onset, pitch=current.pitch))
            if gap > current.duration:
                line.append(Segment(time=current.offset, pitch=REST))

        line.append(Segment(time=notes[-1].onset, pitch=REST))
        return line

    def pitch_sequence(self, intervals: Sequence[NoteInterval]) -> List[int]:
        """
        Pitches of the notes that survive reduction, without timing.

        An empty input yields ``[0]``.
        """
        if not intervals:
            return [REST]

        notes = _with_sentinel(sort_intervals(intervals))
        return [
            current.pitch
            for current, following in zip(notes, notes[1:])
            if following.onset != current.onset
        ]


def reduce(intervals: Sequence[NoteInterval]) -> MelodyLine:
    return MonophonicReducer().reduce(intervals)


def pitch_sequence(intervals: Sequence[NoteInterval]) -> List[int]:
    return MonophonicReducer().pitch_sequence(intervals)
