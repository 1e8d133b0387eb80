"""Data model and abstract collaborator interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class SpeakerInterval:
    """A contiguous time range attributed to one speaker."""
    speaker_id: str
    start_time: float  # seconds
    end_time: float  # seconds


@dataclass(frozen=True)
class Token:
    """A recognized sub-word unit with timing and confidence.

    Text carries its own spacing (e.g. " there"), so consecutive tokens
    are concatenated without a separator.
    """
    text: str
    start_time: float
    end_time: float
    confidence: float = 1.0

    @property
    def midpoint(self) -> float:
        return (self.start_time + self.end_time) / 2


@dataclass(frozen=True)
class WordTiming:
    """Timing detail for one token inside an output segment."""
    word: str
    start_time: float
    end_time: float
    confidence: float


@dataclass(frozen=True)
class OutputSegment:
    """A speaker-attributed run of tokens."""
    speaker: str
    text: str
    start_time: float
    end_time: float
    confidence: float
    words: tuple[WordTiming, ...] | None = None


@dataclass(frozen=True)
class ASRResult:
    """Output of a speech recognition backend."""
    text: str
    confidence: float
    tokens: tuple[Token, ...] | None = None  # None = no timing information
    language: str | None = None


@dataclass(frozen=True, eq=False)
class AudioData:
    """Decoded mono audio shared by the diarizer and the ASR backend."""
    samples: np.ndarray
    sample_rate: int
    source: str

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        if self.sample_rate <= 0:
            return 0.0
        return len(self.samples) / self.sample_rate


@dataclass(frozen=True)
class TranscriptMetadata:
    """Run information serialized next to the segments."""
    audio_file: str
    duration_seconds: float
    speaker_count: int
    speakers: tuple[str, ...]
    processing_time: float
    diarization_time: float
    transcription_time: float
    clustering_threshold: float
    model_version: str


@dataclass(frozen=True)
class DiarizedTranscript:
    """Speaker-attributed transcript with its metadata."""
    segments: tuple[OutputSegment, ...]
    metadata: TranscriptMetadata
    language: str | None = field(default=None, compare=False)


class BaseASR(ABC):
    """Abstract base class for ASR (Automatic Speech Recognition) backends."""

    @abstractmethod
    def transcribe(self, audio: AudioData, language: str | None = None) -> ASRResult:
        """Transcribe decoded audio."""
        pass

    @abstractmethod
    def load(self) -> None:
        """Load model into memory."""
        pass

    @abstractmethod
    def unload(self) -> None:
        """Unload model from memory."""
        pass

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if model is loaded."""
        pass

    @property
    @abstractmethod
    def model_version(self) -> str:
        """Identifier of the recognition model in use."""
        pass


class BaseDiarizer(ABC):
    """Abstract base class for speaker diarization backends."""

    @abstractmethod
    def diarize(
        self,
        audio: AudioData,
        min_speakers: int | None = None,
        max_speakers: int | None = None,
    ) -> list[SpeakerInterval]:
        """Identify speaker intervals, sorted by start time."""
        pass

    @abstractmethod
    def load(self) -> None:
        """Load model into memory."""
        pass

    @abstractmethod
    def unload(self) -> None:
        """Unload model from memory."""
        pass

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if model is loaded."""
        pass

    @property
    @abstractmethod
    def clustering_threshold(self) -> float:
        """Clustering threshold applied to speaker separation."""
        pass
