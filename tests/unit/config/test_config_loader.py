"""Tests for configuration loading."""

import pydantic
import pytest

from diarize_transcribe.config import (
    DiarizeTranscribeConfig,
    apply_env_overrides,
    deep_merge,
    load_config,
    load_yaml,
)
from diarize_transcribe.core import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    import os

    for key in list(os.environ):
        if key.startswith("DIARIZE_TRANSCRIBE__"):
            monkeypatch.delenv(key)


class TestDefaults:
    def test_defaults(self):
        config = DiarizeTranscribeConfig()
        assert config.diarization.clustering_threshold == 0.7
        assert config.asr.model_size == "large-v3"
        assert config.asr.word_timestamps is True
        assert config.output.include_word_timings is True
        assert config.audio.sample_rate == 16000
        assert config.parallel_stages is False

    def test_threshold_bounds(self):
        with pytest.raises(pydantic.ValidationError):
            DiarizeTranscribeConfig(diarization={"clustering_threshold": -0.1})


class TestDeepMerge:
    def test_nested_override(self):
        base = {"asr": {"model_size": "small", "device": "cpu"}, "log_level": "INFO"}
        merged = deep_merge(base, {"asr": {"model_size": "medium"}})
        assert merged == {"asr": {"model_size": "medium", "device": "cpu"}, "log_level": "INFO"}
        assert base["asr"]["model_size"] == "small"


class TestLoadYaml:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("asr: [unclosed")
        with pytest.raises(ConfigError):
            load_yaml(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_yaml(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}


class TestEnvOverrides:
    def test_nested_key(self):
        result = apply_env_overrides(
            {"diarization": {"model": "x"}},
            environ={"DIARIZE_TRANSCRIBE__DIARIZATION__CLUSTERING_THRESHOLD": "0.8"},
        )
        assert result == {"diarization": {"model": "x", "clustering_threshold": 0.8}}

    def test_value_conversion(self):
        result = apply_env_overrides(
            {},
            environ={
                "DIARIZE_TRANSCRIBE__PARALLEL_STAGES": "true",
                "DIARIZE_TRANSCRIBE__DIARIZATION__MAX_SPEAKERS": "3",
                "DIARIZE_TRANSCRIBE__ASR__LANGUAGE": "none",
                "OTHER__ASR__LANGUAGE": "de",
            },
        )
        assert result == {
            "parallel_stages": True,
            "diarization": {"max_speakers": 3},
            "asr": {"language": None},
        }


class TestLoadConfig:
    def test_layering(self, tmp_path, monkeypatch):
        (tmp_path / "base.yaml").write_text("asr:\n  model_size: medium\nlog_level: INFO\n")
        (tmp_path / "development.yaml").write_text("asr:\n  device: cpu\nlog_level: DEBUG\n")
        extra = tmp_path / "extra.yaml"
        extra.write_text("diarization:\n  clustering_threshold: 0.6\n")
        monkeypatch.setenv("DIARIZE_TRANSCRIBE__DIARIZATION__CLUSTERING_THRESHOLD", "0.65")

        config = load_config(
            config_path=extra,
            env="development",
            config_dir=tmp_path,
            overrides={"output": {"include_word_timings": False}},
        )

        assert config.asr.model_size == "medium"
        assert config.asr.device == "cpu"
        assert config.log_level == "DEBUG"
        assert config.diarization.clustering_threshold == 0.65
        assert config.output.include_word_timings is False

    def test_overrides_win_over_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DIARIZE_TRANSCRIBE__ASR__MODEL_SIZE", "small")
        config = load_config(config_dir=tmp_path, overrides={"asr": {"model_size": "tiny"}})
        assert config.asr.model_size == "tiny"

    def test_missing_config_dir_uses_defaults(self, tmp_path):
        config = load_config(config_dir=tmp_path / "nope")
        assert config == DiarizeTranscribeConfig()

    def test_invalid_values_raise_config_error(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(config_dir=tmp_path, overrides={"asr": {"model_size": "gigantic"}})

    def test_repository_configs_are_valid(self):
        from pathlib import Path

        config_dir = Path(__file__).resolve().parents[3] / "configs"
        config = load_config(env="development", config_dir=config_dir)
        assert config.asr.device == "cpu"
