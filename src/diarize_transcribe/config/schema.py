"""Pydantic configuration schemas with validation."""

from typing import Literal
from pydantic import BaseModel, Field


class ASRConfig(BaseModel):
    """ASR (Automatic Speech Recognition) configuration."""
    backend: Literal["faster-whisper"] = "faster-whisper"
    model_size: Literal[
        "tiny", "base", "small", "medium", "large-v2", "large-v3", "distil-large-v3", "turbo"
    ] = "large-v3"
    device: Literal["cuda", "cpu", "auto"] = "auto"
    compute_type: Literal["float16", "int8", "int8_float16", "float32"] = "float16"
    vad_filter: bool = True
    vad_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    beam_size: int = Field(default=5, ge=1)
    word_timestamps: bool = True  # False = no token timings, one empty segment per turn
    language: str | None = None  # None = auto-detect


class DiarizationConfig(BaseModel):
    """Speaker diarization configuration."""
    backend: Literal["pyannote"] = "pyannote"
    model: str = "pyannote/speaker-diarization-3.1"
    device: Literal["cuda", "cpu", "auto"] = "auto"
    clustering_threshold: float = Field(default=0.7, ge=0.0, le=2.0)
    min_speakers: int | None = Field(default=None, ge=1)
    max_speakers: int | None = Field(default=None, ge=1)
    speaker_label_prefix: str = "Speaker_"


class AudioConfig(BaseModel):
    """Audio decoding and input limits."""
    sample_rate: int = Field(default=16000, ge=8000, le=48000)
    max_file_size_mb: float = Field(default=2048.0, gt=0.0)
    max_duration_minutes: float = Field(default=600.0, gt=0.0)


class OutputConfig(BaseModel):
    """Transcript output configuration."""
    include_word_timings: bool = True
    format: Literal["json", "text"] = "text"  # stdout format; files are always JSON
    json_indent: int = Field(default=2, ge=0)


class DiarizeTranscribeConfig(BaseModel):
    """Root configuration."""
    asr: ASRConfig = Field(default_factory=ASRConfig)
    diarization: DiarizationConfig = Field(default_factory=DiarizationConfig)
    audio: AudioConfig = Field(default_factory=AudioConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # Global settings
    parallel_stages: bool = False  # Run diarization and ASR concurrently
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["simple", "detailed"] = "simple"
