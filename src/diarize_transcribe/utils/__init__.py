"""Utilities: logging, decorators, timing."""

from diarize_transcribe.utils.logging import setup_logging, get_logger
from diarize_transcribe.utils.device import resolve_device
from diarize_transcribe.utils.decorators import (
    timed,
    logged,
    require_loaded,
    stage_timer,
    StageTimer,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "timed",
    "logged",
    "require_loaded",
    "stage_timer",
    "StageTimer",
    "resolve_device",
]
