"""Transcript-diarization alignment module."""

from diarize_transcribe.alignment.matcher import IntervalCursor, find_speaker
from diarize_transcribe.alignment.accumulator import RunAccumulator
from diarize_transcribe.alignment.merger import (
    attribute_tokens,
    merge_speaker_and_transcript,
    validate_intervals,
    validate_tokens,
)

__all__ = [
    "IntervalCursor",
    "find_speaker",
    "RunAccumulator",
    "attribute_tokens",
    "merge_speaker_and_transcript",
    "validate_intervals",
    "validate_tokens",
]
