"""Resilience patterns for model loading."""

from diarize_transcribe.core.resilience.retry import (
    retry_with_backoff,
    retry_model_load,
    MODEL_LOAD_RETRY_EXCEPTIONS,
)

__all__ = [
    "retry_with_backoff",
    "retry_model_load",
    "MODEL_LOAD_RETRY_EXCEPTIONS",
]
