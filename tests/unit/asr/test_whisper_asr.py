"""Tests for the faster-whisper adapter with a stubbed model."""

import math
from types import SimpleNamespace

import numpy as np
import pytest

from diarize_transcribe.asr import FasterWhisperASR, utterance_confidence
from diarize_transcribe.config import ASRConfig
from diarize_transcribe.core import ASRError, AudioData


def _word(word, start, end, probability):
    return SimpleNamespace(word=word, start=start, end=end, probability=probability)


class StubWhisperModel:
    def __init__(self, segments, language="en"):
        self.segments = segments
        self.language = language
        self.kwargs = None
        self.audio = None

    def transcribe(self, audio, **kwargs):
        self.audio = audio
        self.kwargs = kwargs
        info = SimpleNamespace(language=self.language, language_probability=0.99)
        return iter(self.segments), info


@pytest.fixture
def segments():
    return [
        SimpleNamespace(
            text=" Hi there",
            avg_logprob=-0.1,
            words=[_word(" Hi", 0.0, 0.5, 0.9), _word(" there", 0.5, 1.0, 0.7)],
        ),
        SimpleNamespace(text=" bye", avg_logprob=-0.2, words=[_word(" bye", 5.2, 5.6, 0.8)]),
    ]


def make_asr(segments, **config):
    asr = FasterWhisperASR(ASRConfig(device="cpu", **config))
    asr._model = StubWhisperModel(segments)
    return asr


class TestUtteranceConfidence:
    def test_mean_word_probability(self):
        assert utterance_confidence([0.5, 1.0], [-3.0]) == pytest.approx(0.75)

    def test_falls_back_to_logprob(self):
        assert utterance_confidence([], [-0.5, -0.5]) == pytest.approx(math.exp(-0.5))

    def test_empty(self):
        assert utterance_confidence([], []) == 0.0

    def test_clamped(self):
        assert utterance_confidence([], [0.3]) == 1.0


class TestFasterWhisperASR:
    def test_cpu_forces_int8(self):
        asr = FasterWhisperASR(ASRConfig(device="cpu", compute_type="float16"))
        assert asr._compute_type == "int8"

    def test_words_become_tokens(self, segments, ten_second_audio):
        asr = make_asr(segments)
        result = asr.transcribe(ten_second_audio)

        assert result.text == "Hi there bye"
        assert [t.text for t in result.tokens] == [" Hi", " there", " bye"]
        assert result.tokens[2].start_time == 5.2
        assert result.confidence == pytest.approx(0.8)
        assert result.language == "en"
        assert asr._model.kwargs["word_timestamps"] is True

    def test_no_word_timestamps_gives_no_tokens(self, ten_second_audio):
        segments = [SimpleNamespace(text=" hello", avg_logprob=-0.1, words=None)]
        asr = make_asr(segments, word_timestamps=False)
        result = asr.transcribe(ten_second_audio)

        assert result.tokens is None
        assert result.text == "hello"
        assert result.confidence == pytest.approx(math.exp(-0.1))
        assert asr._model.kwargs["word_timestamps"] is False

    def test_language_argument_wins(self, segments, ten_second_audio):
        asr = make_asr(segments, language="de")
        asr.transcribe(ten_second_audio, language="fr")
        assert asr._model.kwargs["language"] == "fr"

    def test_16khz_audio_is_passed_through(self, segments, ten_second_audio):
        asr = make_asr(segments)
        asr.transcribe(ten_second_audio)
        assert asr._model.audio is ten_second_audio.samples

    def test_other_sample_rates_are_resampled_to_16khz(self, segments):
        audio = AudioData(samples=np.zeros(8000, dtype=np.float32), sample_rate=8000, source="phone.wav")
        asr = make_asr(segments)
        asr.transcribe(audio)
        assert len(asr._model.audio) == 16000

    def test_inference_failure_raises_asr_error(self, ten_second_audio):
        asr = FasterWhisperASR(ASRConfig(device="cpu"))
        asr._model = SimpleNamespace(transcribe=lambda *a, **k: (_ for _ in ()).throw(RuntimeError("cuda oom")))
        with pytest.raises(ASRError):
            asr.transcribe(ten_second_audio)

    def test_load_failure_raises_asr_error(self, monkeypatch):
        asr = FasterWhisperASR(ASRConfig(device="cpu"))

        def broken():
            raise ValueError("invalid model size")

        monkeypatch.setattr(asr, "_create_model", broken)
        with pytest.raises(ASRError):
            asr.load()
        assert not asr.is_loaded

    def test_model_version_and_unload(self, segments):
        asr = make_asr(segments, model_size="small")
        assert asr.model_version == "small"
        assert asr.is_loaded
        asr.unload()
        assert not asr.is_loaded
