"""Note reconstruction - pair note-on/note-off events into intervals."""

import logging
from typing import Iterable, List, Optional

from ..core import NoteInterval, NoteOff, NoteOn, RawEvent, classify
from ..core.constants import NUM_PITCHES

logger = logging.getLogger(__name__)


class NoteReconstructor:
    """
    Rebuilds (pitch, onset, duration) intervals from a raw event stream.

    One onset is remembered per pitch. Known quirks of the scan:
    - a repeated note-on for a sounding pitch replaces the stored onset,
      so the earlier note is lost
    - a note-off with no sounding note is ignored
    - notes still sounding at the end of the stream are dropped
    """

    def reconstruct(self, events: Iterable[RawEvent]) -> List[NoteInterval]:
        """
        Reconstruct note intervals from events.

        Args:
            events: Raw events in non-decreasing tick order

        Returns:
            One NoteInterval per matched note-on/note-off pair, in the
            order their note-offs were seen
        """
        active: List[Optional[int]] = [None] * NUM_PITCHES
        intervals: List[NoteInterval] = []
        dropped_offs = 0

        for event in events:
            note = classify(event)

            if isinstance(note, NoteOn):
                active[note.pitch] = event.tick

            elif isinstance(note, NoteOff):
                onset = active[note.pitch]
                if onset is None:
                    dropped_offs += 1
                    continue
                intervals.append(
                    NoteInterval(
                        pitch=note.pitch,
                        onset=onset,
                        duration=event.tick - onset,
                    )
                )
                active[note.pitch] = None

        hanging = sum(1 for onset in active if onset is not None)
        logger.debug(
            "Reconstructed %d notes (%d unmatched note-offs, %d unterminated)",
            len(intervals),
            dropped_offs,
            hanging,
        )
        return intervals


def reconstruct(events: Iterable[RawEvent]) -> List[NoteInterval]:
    """Reconstruct note intervals with a fresh NoteReconstructor."""
    return NoteReconstructor().reconstruct(events)
