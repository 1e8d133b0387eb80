"""Tests for retry patterns."""

import pytest
from tenacity import wait_none

from diarize_transcribe.asr import FasterWhisperASR
from diarize_transcribe.config import ASRConfig, DiarizationConfig
from diarize_transcribe.core.resilience import (
    MODEL_LOAD_RETRY_EXCEPTIONS,
    retry_with_backoff,
)
from diarize_transcribe.diarization import PyAnnoteDiarizer


def flaky(result, failures):
    """Build a callable raising each of `failures` in turn, then returning `result`."""
    calls = []

    def build():
        calls.append(1)
        if len(calls) <= len(failures):
            raise failures[len(calls) - 1]
        return result

    return build, calls


class TestRetryModelLoad:
    def test_whisper_download_retried_once(self, monkeypatch):
        asr = FasterWhisperASR(ASRConfig(device="cpu"))
        model = object()
        build, calls = flaky(model, [OSError("connection reset during download")])
        monkeypatch.setattr(asr, "_build_model", build)

        create = FasterWhisperASR._create_model.retry_with(wait=wait_none())
        assert create(asr) is model
        assert len(calls) == 2

    def test_whisper_gives_up_after_two_attempts(self, monkeypatch):
        asr = FasterWhisperASR(ASRConfig(device="cpu"))
        build, calls = flaky(None, [TimeoutError("hub"), TimeoutError("hub"), TimeoutError("hub")])
        monkeypatch.setattr(asr, "_build_model", build)

        create = FasterWhisperASR._create_model.retry_with(wait=wait_none())
        with pytest.raises(TimeoutError):
            create(asr)
        assert len(calls) == 2

    def test_bad_model_argument_not_retried(self, monkeypatch):
        asr = FasterWhisperASR(ASRConfig(device="cpu"))
        build, calls = flaky(None, [ValueError("invalid model size")])
        monkeypatch.setattr(asr, "_build_model", build)

        create = FasterWhisperASR._create_model.retry_with(wait=wait_none())
        with pytest.raises(ValueError):
            create(asr)
        assert len(calls) == 1

    def test_pyannote_pipeline_retried_once(self, monkeypatch):
        diarizer = PyAnnoteDiarizer(DiarizationConfig(device="cpu"))
        pipeline = object()
        build, calls = flaky(pipeline, [ConnectionError("hub unreachable")])
        monkeypatch.setattr(diarizer, "_build_pipeline", build)

        create = PyAnnoteDiarizer._create_pipeline.retry_with(wait=wait_none())
        assert create(diarizer) is pipeline
        assert len(calls) == 2

    def test_model_load_exceptions_cover_network_errors(self):
        assert issubclass(ConnectionError, MODEL_LOAD_RETRY_EXCEPTIONS)
        assert issubclass(TimeoutError, MODEL_LOAD_RETRY_EXCEPTIONS)
        assert not issubclass(ValueError, MODEL_LOAD_RETRY_EXCEPTIONS)


class TestRetryWithBackoff:
    def test_custom_policy_stops_at_max_attempts(self):
        build, calls = flaky(None, [OSError("disk"), OSError("disk"), OSError("disk")])
        wrapped = retry_with_backoff(max_attempts=3, min_wait=0.0, max_wait=0.0, log_retries=False)(build)
        with pytest.raises(OSError):
            wrapped()
        assert len(calls) == 3
