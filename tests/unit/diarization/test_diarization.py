"""Tests for diarization helpers and the pyannote adapter's pure parts."""

from diarize_transcribe.config import DiarizationConfig
from diarize_transcribe.core import SpeakerInterval
from diarize_transcribe.diarization import PyAnnoteDiarizer, relabel_speakers


class TestRelabelSpeakers:
    def test_labels_follow_first_appearance(self):
        turns = [
            (4.0, 5.0, "SPEAKER_00"),
            (0.0, 1.5, "SPEAKER_03"),
            (2.0, 3.0, "SPEAKER_00"),
        ]
        assert relabel_speakers(turns) == [
            SpeakerInterval("Speaker_01", 0.0, 1.5),
            SpeakerInterval("Speaker_02", 2.0, 3.0),
            SpeakerInterval("Speaker_02", 4.0, 5.0),
        ]

    def test_custom_prefix(self):
        assert relabel_speakers([(0.0, 1.0, "x")], prefix="S")[0].speaker_id == "S01"

    def test_empty(self):
        assert relabel_speakers([]) == []


class TestPyAnnoteDiarizer:
    def test_threshold_from_config(self):
        diarizer = PyAnnoteDiarizer(DiarizationConfig(device="cpu", clustering_threshold=0.55))
        assert diarizer.clustering_threshold == 0.55
        assert not diarizer.is_loaded

    def test_unload_without_load(self):
        diarizer = PyAnnoteDiarizer(DiarizationConfig(device="cpu"))
        diarizer.unload()
        assert not diarizer.is_loaded
