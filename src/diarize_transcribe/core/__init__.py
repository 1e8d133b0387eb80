"""Core components: data model, base classes, registry, exceptions."""

from diarize_transcribe.core.registry import Registry
from diarize_transcribe.core.base import (
    SpeakerInterval,
    Token,
    WordTiming,
    OutputSegment,
    ASRResult,
    AudioData,
    TranscriptMetadata,
    DiarizedTranscript,
    BaseASR,
    BaseDiarizer,
)
from diarize_transcribe.core.exceptions import (
    DiarizeTranscribeError,
    ConfigError,
    RegistryError,
    InputError,
    ModelError,
    ASRError,
    DiarizationError,
    AlignmentError,
    ValidationError,
    OutputError,
)

__all__ = [
    # Registry
    "Registry",
    # Data classes
    "SpeakerInterval",
    "Token",
    "WordTiming",
    "OutputSegment",
    "ASRResult",
    "AudioData",
    "TranscriptMetadata",
    "DiarizedTranscript",
    # Base classes
    "BaseASR",
    "BaseDiarizer",
    # Exceptions
    "DiarizeTranscribeError",
    "ConfigError",
    "RegistryError",
    "InputError",
    "ModelError",
    "ASRError",
    "DiarizationError",
    "AlignmentError",
    "ValidationError",
    "OutputError",
]
