"""Audio validation and loading."""

from diarize_transcribe.audio.validation import AudioValidator, SUPPORTED_AUDIO_FORMATS
from diarize_transcribe.audio.loader import load_audio, TARGET_SAMPLE_RATE

__all__ = [
    "AudioValidator",
    "SUPPORTED_AUDIO_FORMATS",
    "load_audio",
    "TARGET_SAMPLE_RATE",
]
