"""Logging configuration."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["simple", "detailed"]

FORMATS: dict[str, str] = {
    "simple": "%(levelname)s | %(name)s | %(message)s",
    "detailed": "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
}

_configured = False


def setup_logging(level: LogLevel = "INFO", format_style: LogFormat = "simple") -> None:
    """Configure logging for the command line.

    Log records go to stderr so stdout stays free for the transcript.

    Args:
        level: Log level
        format_style: 'simple' for interactive use, 'detailed' for batch runs
    """
    global _configured

    if _configured:
        logging.getLogger().setLevel(getattr(logging, level))
        return

    logging.basicConfig(
        level=getattr(logging, level),
        format=FORMATS[format_style],
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Quiet noisy libraries
    for name in ("httpx", "urllib3", "filelock", "huggingface_hub", "faster_whisper", "numba"):
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically `get_logger(__name__)`)."""
    return logging.getLogger(name)
