"""Exception hierarchy for diarize-transcribe.

    DiarizeTranscribeError (base)
    ├── ConfigError          - configuration loading/validation
    ├── RegistryError        - unknown or duplicate backend key
    ├── InputError           - audio file missing, unsupported or undecodable
    ├── ModelError           - backend initialization or inference failure
    │   ├── ASRError
    │   └── DiarizationError
    ├── AlignmentError       - transcript-diarization merge error
    │   └── ValidationError  - merge inputs violate ordering/timing rules
    └── OutputError          - transcript could not be written
"""

from pathlib import Path


class DiarizeTranscribeError(Exception):
    """Base exception for all diarize-transcribe errors."""
    pass


class ConfigError(DiarizeTranscribeError):
    """Configuration loading or validation error."""
    pass


class RegistryError(DiarizeTranscribeError):
    """Component registry error."""
    pass


class InputError(DiarizeTranscribeError):
    """Audio input is missing, unsupported or cannot be decoded."""

    def __init__(
        self,
        message: str,
        audio_path: str | Path | None = None,
        reason: str = "invalid_input",
    ) -> None:
        self.message = message
        self.audio_path = str(audio_path) if audio_path is not None else None
        self.reason = reason
        if self.audio_path:
            message = f"{message}: {self.audio_path}"
        super().__init__(message)


class ModelError(DiarizeTranscribeError):
    """Model initialization or inference error."""
    pass


class ASRError(ModelError):
    """Speech recognition error."""
    pass


class DiarizationError(ModelError):
    """Speaker diarization error."""
    pass


class AlignmentError(DiarizeTranscribeError):
    """Transcript-diarization alignment error."""
    pass


class ValidationError(AlignmentError):
    """Merge input violates its ordering or timing preconditions."""

    def __init__(self, message: str, field: str, index: int | None = None) -> None:
        self.field = field
        self.index = index
        location = f"{field}[{index}]" if index is not None else field
        super().__init__(f"{location}: {message}")


class OutputError(DiarizeTranscribeError):
    """Transcript output could not be written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = str(path) if path is not None else None
        super().__init__(message)
