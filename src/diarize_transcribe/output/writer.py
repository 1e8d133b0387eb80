"""Transcript serialization: JSON document and human-readable report."""

import json
from pathlib import Path
from typing import Any

from diarize_transcribe.core import (
    DiarizedTranscript,
    OutputError,
    OutputSegment,
    TranscriptMetadata,
    WordTiming,
)
from diarize_transcribe.utils import get_logger, logged

logger = get_logger(__name__)

RULE = "=" * 80


def _word_to_dict(word: WordTiming) -> dict[str, Any]:
    return {
        "word": word.word,
        "startTime": word.start_time,
        "endTime": word.end_time,
        "confidence": word.confidence,
    }


def segment_to_dict(segment: OutputSegment) -> dict[str, Any]:
    """Wire form of a segment; `words` is omitted when absent."""
    data: dict[str, Any] = {
        "speaker": segment.speaker,
        "text": segment.text,
        "startTime": segment.start_time,
        "endTime": segment.end_time,
        "confidence": segment.confidence,
    }
    if segment.words is not None:
        data["words"] = [_word_to_dict(w) for w in segment.words]
    return data


def metadata_to_dict(metadata: TranscriptMetadata) -> dict[str, Any]:
    return {
        "audioFile": metadata.audio_file,
        "durationSeconds": metadata.duration_seconds,
        "speakerCount": metadata.speaker_count,
        "speakers": list(metadata.speakers),
        "processingTime": metadata.processing_time,
        "diarizationTime": metadata.diarization_time,
        "transcriptionTime": metadata.transcription_time,
        "clusteringThreshold": metadata.clustering_threshold,
        "modelVersion": metadata.model_version,
    }


def transcript_to_dict(transcript: DiarizedTranscript) -> dict[str, Any]:
    return {
        "segments": [segment_to_dict(s) for s in transcript.segments],
        "metadata": metadata_to_dict(transcript.metadata),
    }


def to_json(transcript: DiarizedTranscript, indent: int | None = 2) -> str:
    """Serialize with sorted keys so output is byte-stable across runs."""
    return json.dumps(
        transcript_to_dict(transcript),
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )


@logged
def save_transcript(transcript: DiarizedTranscript, path: Path | str, indent: int | None = 2) -> Path:
    """Write the JSON document to `path` (`~` expanded, parents created).

    Raises:
        OutputError: If the file cannot be written
    """
    path = Path(path).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(to_json(transcript, indent=indent) + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write transcript to {path}: {e}", path=path) from e

    logger.info(f"Results saved to: {path}")
    return path


def _rtfx(metadata: TranscriptMetadata) -> float:
    if metadata.processing_time <= 0:
        return 0.0
    return metadata.duration_seconds / metadata.processing_time


def format_transcript(transcript: DiarizedTranscript) -> str:
    """Render a human-readable report of segments and run metadata."""
    lines = [RULE, "SPEAKER-DIARIZED TRANSCRIPT", RULE]

    for index, segment in enumerate(transcript.segments, 1):
        lines.append("")
        lines.append(
            f"[{index}] {segment.speaker} [{segment.start_time:.2f} - {segment.end_time:.2f}]"
        )
        lines.append(f"    {segment.text}")
        if segment.words:
            lines.append(f"    Words: {len(segment.words)}")

    meta = transcript.metadata
    lines.extend([
        "",
        RULE,
        "METADATA",
        RULE,
        f"Duration: {meta.duration_seconds:.2f}s",
        f"Speakers: {', '.join(meta.speakers)}",
        f"Total segments: {len(transcript.segments)}",
        f"Processing time: {meta.processing_time:.2f}s",
        f"RTFx: {_rtfx(meta):.2f}x",
    ])
    return "\n".join(lines)
