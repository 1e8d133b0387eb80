"""Configuration management."""

from diarize_transcribe.config.schema import (
    DiarizeTranscribeConfig,
    ASRConfig,
    DiarizationConfig,
    AudioConfig,
    OutputConfig,
)
from diarize_transcribe.config.loader import load_config, load_yaml, deep_merge, apply_env_overrides

__all__ = [
    # Main config
    "DiarizeTranscribeConfig",
    "load_config",
    # Sub-configs
    "ASRConfig",
    "DiarizationConfig",
    "AudioConfig",
    "OutputConfig",
    # Utilities
    "load_yaml",
    "deep_merge",
    "apply_env_overrides",
]
