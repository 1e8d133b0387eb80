"""Retry logic with exponential backoff using tenacity."""

import logging
from typing import Type, Tuple

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential_jitter,
    retry_if_exception_type,
    before_log,
    after_log,
)

logger = logging.getLogger(__name__)

__all__ = [
    "retry_with_backoff",
    "retry_model_load",
    "MODEL_LOAD_RETRY_EXCEPTIONS",
]

# Hub downloads surface as connection, timeout or filesystem errors
MODEL_LOAD_RETRY_EXCEPTIONS: Tuple[Type[Exception], ...] = (
    ConnectionError,
    TimeoutError,
    OSError,
)


def retry_with_backoff(
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 30.0,
    exceptions: Tuple[Type[Exception], ...] = (Exception,),
    log_retries: bool = True,
):
    """
    Generic retry decorator with exponential backoff and jitter.

    Args:
        max_attempts: Maximum number of attempts
        min_wait: Minimum wait time between retries (seconds)
        max_wait: Maximum wait time between retries (seconds)
        exceptions: Tuple of exception types to retry on
        log_retries: Whether to log retry attempts

    The wrapped function exposes tenacity's `retry_with`, so callers can
    swap the wait strategy (tests use `wait_none()`).
    """
    retry_kwargs = {
        "stop": stop_after_attempt(max_attempts),
        "wait": wait_exponential_jitter(initial=min_wait, max=max_wait),
        "retry": retry_if_exception_type(exceptions),
        "reraise": True,
    }

    if log_retries:
        retry_kwargs["before"] = before_log(logger, logging.DEBUG)
        retry_kwargs["after"] = after_log(logger, logging.WARNING)

    return retry(**retry_kwargs)


# Model download/initialization: 2 attempts (models are expensive to
# retry), 5s - 60s backoff, download/IO errors only
retry_model_load = retry_with_backoff(
    max_attempts=2,
    min_wait=5.0,
    max_wait=60.0,
    exceptions=MODEL_LOAD_RETRY_EXCEPTIONS,
)
