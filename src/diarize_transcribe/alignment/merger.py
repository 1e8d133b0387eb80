"""Merge speaker diarization with ASR token timings."""

import math
from collections.abc import Sequence

from diarize_transcribe.core import (
    OutputSegment,
    SpeakerInterval,
    Token,
    ValidationError,
)
from diarize_transcribe.alignment.accumulator import RunAccumulator
from diarize_transcribe.alignment.matcher import IntervalCursor


def validate_intervals(intervals: Sequence[SpeakerInterval]) -> None:
    """Check intervals are well-formed and sorted by start time.

    Raises:
        ValidationError: On a non-finite time, a negative duration or an
            out-of-order interval
    """
    previous_start = float("-inf")
    for i, interval in enumerate(intervals):
        if not (math.isfinite(interval.start_time) and math.isfinite(interval.end_time)):
            raise ValidationError(
                f"non-finite time range [{interval.start_time}, {interval.end_time}]",
                field="intervals",
                index=i,
            )
        if interval.end_time < interval.start_time:
            raise ValidationError(
                f"end_time {interval.end_time} precedes start_time {interval.start_time}",
                field="intervals",
                index=i,
            )
        if interval.start_time < previous_start:
            raise ValidationError(
                f"start_time {interval.start_time} is earlier than the previous interval",
                field="intervals",
                index=i,
            )
        previous_start = interval.start_time


def validate_tokens(tokens: Sequence[Token]) -> None:
    """Check tokens are well-formed and sorted by start time.

    Raises:
        ValidationError: On a non-finite time, a negative duration, an
            out-of-order token or a confidence outside [0, 1]
    """
    previous_start = float("-inf")
    for i, token in enumerate(tokens):
        if not (math.isfinite(token.start_time) and math.isfinite(token.end_time)):
            raise ValidationError(
                f"non-finite time range [{token.start_time}, {token.end_time}]",
                field="tokens",
                index=i,
            )
        if token.end_time < token.start_time:
            raise ValidationError(
                f"end_time {token.end_time} precedes start_time {token.start_time}",
                field="tokens",
                index=i,
            )
        if token.start_time < previous_start:
            raise ValidationError(
                f"start_time {token.start_time} is earlier than the previous token",
                field="tokens",
                index=i,
            )
        if not (math.isfinite(token.confidence) and 0.0 <= token.confidence <= 1.0):
            raise ValidationError(
                f"confidence {token.confidence} outside [0, 1]",
                field="tokens",
                index=i,
            )
        previous_start = token.start_time


def attribute_tokens(
    intervals: Sequence[SpeakerInterval],
    tokens: Sequence[Token],
) -> list[tuple[Token, str | None]]:
    """Pair each token with the speaker active at its midpoint (or None)."""
    cursor = IntervalCursor(intervals)
    return [(token, cursor.match(token.midpoint)) for token in tokens]


def merge_speaker_and_transcript(
    intervals: Sequence[SpeakerInterval],
    tokens: Sequence[Token] | None,
    include_word_timings: bool = True,
    utterance_confidence: float = 1.0,
    validate: bool = True,
) -> list[OutputSegment]:
    """Build speaker-attributed segments from diarization and token timings.

    Each token goes to the speaker whose interval contains the token's
    midpoint. Tokens in gaps, or after the last interval, are dropped
    without splitting the surrounding run. Consecutive tokens for the same
    speaker are concatenated into one segment.

    Without tokens, one empty-text segment is emitted per interval so the
    speaker activity timeline is still available.

    Args:
        intervals: Diarization intervals sorted by start time
        tokens: ASR tokens sorted by start time, or None when the recognizer
            produced no timings
        include_word_timings: Attach per-token WordTiming records
        utterance_confidence: Recognizer confidence copied onto every segment
        validate: Check ordering and timing preconditions first

    Returns:
        Segments in token order

    Raises:
        ValidationError: If `validate` is set and an input is malformed
    """
    if validate:
        if not (math.isfinite(utterance_confidence) and 0.0 <= utterance_confidence <= 1.0):
            raise ValidationError(
                f"{utterance_confidence} outside [0, 1]",
                field="utterance_confidence",
            )
        validate_intervals(intervals)
        if tokens:
            validate_tokens(tokens)

    if not tokens:
        return [
            OutputSegment(
                speaker=interval.speaker_id,
                text="",
                start_time=interval.start_time,
                end_time=interval.end_time,
                confidence=utterance_confidence,
                words=None,
            )
            for interval in intervals
        ]

    accumulator = RunAccumulator(include_word_timings, utterance_confidence)
    segments: list[OutputSegment] = []

    for token, speaker in attribute_tokens(intervals, tokens):
        if speaker is None:
            continue
        closed = accumulator.observe(token, speaker)
        if closed is not None:
            segments.append(closed)

    final = accumulator.finish()
    if final is not None:
        segments.append(final)

    return segments
