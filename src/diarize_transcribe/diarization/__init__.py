"""Speaker diarization module."""

from diarize_transcribe.diarization.base import DiarizationRegistry, relabel_speakers
from diarize_transcribe.diarization.pyannote import PyAnnoteDiarizer

__all__ = [
    "DiarizationRegistry",
    "PyAnnoteDiarizer",
    "relabel_speakers",
]
