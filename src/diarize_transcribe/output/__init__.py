"""Transcript output formats."""

from diarize_transcribe.output.writer import (
    segment_to_dict,
    metadata_to_dict,
    transcript_to_dict,
    to_json,
    save_transcript,
    format_transcript,
)

__all__ = [
    "segment_to_dict",
    "metadata_to_dict",
    "transcript_to_dict",
    "to_json",
    "save_transcript",
    "format_transcript",
]
