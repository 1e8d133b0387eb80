"""Midpoint matching of tokens against time-ordered speaker intervals."""

from collections.abc import Sequence

from diarize_transcribe.core import SpeakerInterval


def find_speaker(
    intervals: Sequence[SpeakerInterval],
    index: int,
    midpoint: float,
) -> tuple[str | None, int]:
    """Scan forward from `index` for the interval containing `midpoint`.

    Bounds are inclusive. A midpoint before the interval at the cursor lies
    in a gap and matches nothing; a midpoint past it advances the cursor.
    Once the cursor runs off the end every later midpoint matches nothing.

    Returns:
        (speaker or None, cursor index after the scan)
    """
    while index < len(intervals):
        interval = intervals[index]
        if interval.start_time <= midpoint <= interval.end_time:
            return interval.speaker_id, index
        if midpoint < interval.start_time:
            return None, index
        index += 1
    return None, index


class IntervalCursor:
    """Forward-only position in a sorted interval sequence.

    The cursor is never rewound, so matching a time-ordered token stream is
    O(tokens + intervals) overall.
    """

    def __init__(self, intervals: Sequence[SpeakerInterval]):
        self._intervals = intervals
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self._intervals)

    def match(self, midpoint: float) -> str | None:
        """Return the speaker active at `midpoint`, advancing as needed."""
        speaker, self.index = find_speaker(self._intervals, self.index, midpoint)
        return speaker
