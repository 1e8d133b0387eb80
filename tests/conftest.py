"""Shared test fixtures."""

import numpy as np
import pytest

from diarize_transcribe.config import DiarizeTranscribeConfig
from diarize_transcribe.core import (
    ASRResult,
    AudioData,
    BaseASR,
    BaseDiarizer,
    SpeakerInterval,
    Token,
)


class FakeASR(BaseASR):
    """In-memory ASR returning a fixed result."""

    def __init__(self, result: ASRResult, model_version: str = "fake-v1"):
        self.result = result
        self._model_version = model_version
        self._loaded = False
        self.calls = 0

    def transcribe(self, audio, language=None):
        self.calls += 1
        self._loaded = True
        return self.result

    def load(self):
        self._loaded = True

    def unload(self):
        self._loaded = False

    @property
    def is_loaded(self):
        return self._loaded

    @property
    def model_version(self):
        return self._model_version


class FakeDiarizer(BaseDiarizer):
    """In-memory diarizer returning fixed intervals."""

    def __init__(self, intervals: list[SpeakerInterval], threshold: float = 0.7):
        self.intervals = intervals
        self.threshold = threshold
        self._loaded = False
        self.calls = 0

    def diarize(self, audio, min_speakers=None, max_speakers=None):
        self.calls += 1
        self._loaded = True
        return list(self.intervals)

    def load(self):
        self._loaded = True

    def unload(self):
        self._loaded = False

    @property
    def is_loaded(self):
        return self._loaded

    @property
    def clustering_threshold(self):
        return self.threshold


@pytest.fixture
def two_speaker_intervals():
    return [
        SpeakerInterval("A", 0.0, 5.0),
        SpeakerInterval("B", 5.0, 10.0),
    ]


@pytest.fixture
def greeting_tokens():
    return [
        Token("Hi", 0.0, 0.5, 0.9),
        Token(" there", 0.5, 1.0, 0.8),
        Token(" bye", 5.2, 5.6, 0.7),
    ]


@pytest.fixture
def asr_result(greeting_tokens):
    return ASRResult(text="Hi there bye", confidence=0.85, tokens=tuple(greeting_tokens), language="en")


@pytest.fixture
def fake_asr(asr_result):
    return FakeASR(asr_result)


@pytest.fixture
def fake_diarizer(two_speaker_intervals):
    return FakeDiarizer(two_speaker_intervals)


@pytest.fixture
def config():
    return DiarizeTranscribeConfig()


@pytest.fixture
def sample_audio_path(tmp_path):
    """Create a sample audio file for testing."""
    audio_file = tmp_path / "test_audio.wav"
    audio_file.write_bytes(b"RIFF" + b"\x00" * 100)
    return audio_file


@pytest.fixture
def ten_second_audio():
    return AudioData(samples=np.zeros(160000, dtype=np.float32), sample_rate=16000, source="test_audio.wav")


@pytest.fixture
def patch_load_audio(monkeypatch, ten_second_audio):
    """Skip decoding in the pipeline; every file decodes to 10s of silence."""
    calls = []

    def fake_load_audio(path, sample_rate=16000, max_duration_seconds=None):
        calls.append(path)
        return ten_second_audio

    monkeypatch.setattr("diarize_transcribe.pipeline.orchestrator.load_audio", fake_load_audio)
    return calls


@pytest.fixture
def fake_asr_cls():
    return FakeASR


@pytest.fixture
def fake_diarizer_cls():
    return FakeDiarizer
