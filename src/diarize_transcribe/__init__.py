"""diarize-transcribe - speaker-attributed transcripts from diarization + ASR.

Usage:
    from diarize_transcribe import DiarizeTranscribePipeline, to_json

    with DiarizeTranscribePipeline.from_config(env="development") as pipeline:
        transcript = pipeline.process("podcast.mp3")
    print(to_json(transcript))

The merge step can be used on its own:

    from diarize_transcribe import merge_speaker_and_transcript
    segments = merge_speaker_and_transcript(intervals, tokens, utterance_confidence=0.93)
"""

from diarize_transcribe.alignment import merge_speaker_and_transcript
from diarize_transcribe.config import DiarizeTranscribeConfig, load_config
from diarize_transcribe.core import (
    SpeakerInterval,
    Token,
    WordTiming,
    OutputSegment,
    ASRResult,
    DiarizedTranscript,
    TranscriptMetadata,
)
from diarize_transcribe.output import format_transcript, save_transcript, to_json
from diarize_transcribe.pipeline import DiarizeTranscribePipeline

__version__ = "0.1.0"

__all__ = [
    "DiarizeTranscribePipeline",
    "DiarizeTranscribeConfig",
    "load_config",
    "merge_speaker_and_transcript",
    "SpeakerInterval",
    "Token",
    "WordTiming",
    "OutputSegment",
    "ASRResult",
    "DiarizedTranscript",
    "TranscriptMetadata",
    "format_transcript",
    "save_transcript",
    "to_json",
]
