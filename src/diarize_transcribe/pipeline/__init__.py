"""Pipeline orchestration."""

from diarize_transcribe.pipeline.orchestrator import DiarizeTranscribePipeline

__all__ = [
    "DiarizeTranscribePipeline",
]
