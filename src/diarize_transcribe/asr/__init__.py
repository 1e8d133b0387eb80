"""ASR (Automatic Speech Recognition) module."""

from diarize_transcribe.asr.base import ASRRegistry
from diarize_transcribe.asr.whisper import FasterWhisperASR, utterance_confidence

__all__ = [
    "ASRRegistry",
    "FasterWhisperASR",
    "utterance_confidence",
]
