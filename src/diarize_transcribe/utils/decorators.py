"""Reusable decorators and helpers for timing, logging and model loading."""

import functools
import time
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar, ParamSpec

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Log execution time of a function."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        logger.info(f"{func.__qualname__} completed in {elapsed:.2f}s")
        return result
    return wrapper


def logged(func: Callable[P, R]) -> Callable[P, R]:
    """Log function entry and exit."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        logger.debug(f"{func.__qualname__} called")
        try:
            result = func(*args, **kwargs)
            logger.debug(f"{func.__qualname__} succeeded")
            return result
        except Exception as e:
            logger.error(f"{func.__qualname__} failed: {e}")
            raise
    return wrapper


def require_loaded(func: Callable[P, R]) -> Callable[P, R]:
    """Ensure model is loaded before method execution.

    For use with classes that have `is_loaded` property and `load()` method.
    """
    @functools.wraps(func)
    def wrapper(self, *args: P.args, **kwargs: P.kwargs) -> R:
        if not self.is_loaded:
            logger.info(f"{self.__class__.__name__}: Auto-loading model")
            self.load()
        return func(self, *args, **kwargs)
    return wrapper


@dataclass
class StageTimer:
    """Wall-clock duration of a pipeline stage."""
    name: str
    started: float = 0.0
    elapsed: float = 0.0


@contextmanager
def stage_timer(name: str) -> Iterator[StageTimer]:
    """Measure a block; `elapsed` is filled in even when the block raises.

    Usage:
        with stage_timer("diarization") as t:
            diarizer.diarize(audio)
        metadata_time = t.elapsed
    """
    timer = StageTimer(name=name, started=time.perf_counter())
    try:
        yield timer
    finally:
        timer.elapsed = time.perf_counter() - timer.started
        logger.debug(f"Stage {name} took {timer.elapsed:.2f}s")
