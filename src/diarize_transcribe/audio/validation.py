"""Audio file validation before decoding."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from diarize_transcribe.core.exceptions import InputError

logger = logging.getLogger(__name__)


# Formats librosa can decode via soundfile or audioread
SUPPORTED_AUDIO_FORMATS: set[str] = {
    ".mp3",
    ".wav",
    ".flac",
    ".ogg",
    ".m4a",
    ".aac",
    ".opus",
    ".webm",
    ".aiff",
    ".aif",
    ".caf",
    ".mp4",  # May contain audio
}

SUPPORTED_MIME_PREFIXES: tuple[str, ...] = ("audio/", "video/")


class AudioValidator:
    """Validates audio files before decoding.

    Checks:
    - File exists and is a regular file
    - File extension is supported
    - File is non-empty and within the size limit
    """

    def __init__(self, max_file_size_mb: float = 2048.0) -> None:
        self.max_file_size_bytes = int(max_file_size_mb * 1024 * 1024)

    def validate(self, audio_path: str | Path) -> Path:
        """Validate an audio file.

        Returns:
            The resolved path (with `~` expanded)

        Raises:
            InputError: If validation fails
        """
        path = Path(audio_path).expanduser()

        if not path.exists():
            raise InputError("Audio file does not exist", audio_path=path, reason="file_not_found")

        if not path.is_file():
            raise InputError("Path is not a file", audio_path=path, reason="not_a_file")

        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_AUDIO_FORMATS:
            raise InputError(
                f"Unsupported audio format: {suffix or '(none)'}",
                audio_path=path,
                reason="unsupported_format",
            )

        mime_type, _ = mimetypes.guess_type(str(path))
        if mime_type and not mime_type.startswith(SUPPORTED_MIME_PREFIXES):
            logger.warning(f"Unexpected MIME type {mime_type} for {path}, proceeding anyway")

        file_size = path.stat().st_size
        if file_size == 0:
            raise InputError("Audio file is empty", audio_path=path, reason="empty_file")

        if file_size > self.max_file_size_bytes:
            size_mb = file_size / (1024 * 1024)
            max_mb = self.max_file_size_bytes / (1024 * 1024)
            raise InputError(
                f"Audio file too large: {size_mb:.1f}MB (max: {max_mb:.1f}MB)",
                audio_path=path,
                reason="file_too_large",
            )

        return path
