"""Faster Whisper ASR implementation."""

import gc
import math

import librosa

from diarize_transcribe.asr.base import ASRRegistry
from diarize_transcribe.core import BaseASR, ASRResult, AudioData, Token, ASRError
from diarize_transcribe.core.resilience import retry_model_load
from diarize_transcribe.config import ASRConfig
from diarize_transcribe.utils import get_logger, timed, require_loaded, resolve_device

logger = get_logger(__name__)

# faster-whisper treats raw sample arrays as 16 kHz
WHISPER_SAMPLE_RATE = 16000


def utterance_confidence(word_probabilities: list[float], avg_logprobs: list[float]) -> float:
    """Single confidence value for a whole recognition result.

    Mean word probability when word timings exist, otherwise the geometric
    mean token probability exp(mean avg_logprob). Clamped to [0, 1].
    """
    if word_probabilities:
        value = sum(word_probabilities) / len(word_probabilities)
    elif avg_logprobs:
        value = math.exp(sum(avg_logprobs) / len(avg_logprobs))
    else:
        return 0.0
    return min(1.0, max(0.0, value))


@ASRRegistry.register("faster-whisper")
class FasterWhisperASR(BaseASR):
    """Faster Whisper ASR backend using CTranslate2."""

    def __init__(self, config: ASRConfig):
        self.config = config
        self._model = None
        self._device = resolve_device(config.device)
        self._compute_type = config.compute_type
        if self._device == "cpu" and config.compute_type == "float16":
            # CTranslate2 has no float16 kernels on CPU
            self._compute_type = "int8"
        logger.info(
            f"FasterWhisperASR initialized: model={config.model_size}, "
            f"device={self._device}, compute={self._compute_type}"
        )

    def _build_model(self):
        from faster_whisper import WhisperModel

        return WhisperModel(
            self.config.model_size,
            device=self._device,
            compute_type=self._compute_type,
        )

    @retry_model_load
    def _create_model(self):
        return self._build_model()

    def load(self) -> None:
        """Download (if needed) and load the Whisper model."""
        if self._model is not None:
            logger.debug("Model already loaded")
            return

        try:
            logger.info(f"Loading Whisper {self.config.model_size} on {self._device}...")
            self._model = self._create_model()
            logger.info("Whisper model loaded successfully")
        except Exception as e:
            raise ASRError(f"Failed to load Whisper model: {e}") from e

    def unload(self) -> None:
        """Unload model and free memory."""
        if self._model is None:
            return

        logger.info("Unloading Whisper model...")
        del self._model
        self._model = None
        gc.collect()

        try:
            import torch
            if torch.cuda.is_available():
                torch.cuda.empty_cache()
        except ImportError:
            pass

        logger.info("Whisper model unloaded")

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    @property
    def model_version(self) -> str:
        return self.config.model_size

    @timed
    @require_loaded
    def transcribe(self, audio: AudioData, language: str | None = None) -> ASRResult:
        """Transcribe decoded audio, resampling to 16 kHz when needed.

        Each recognized word becomes a Token whose text keeps Whisper's
        leading space, so tokens concatenate back into the transcript.
        With word timestamps disabled the result carries no tokens.
        """
        lang = language or self.config.language
        samples = audio.samples
        if audio.sample_rate != WHISPER_SAMPLE_RATE:
            logger.warning(
                f"Resampling {audio.sample_rate} Hz audio to {WHISPER_SAMPLE_RATE} Hz for Whisper"
            )
            samples = librosa.resample(samples, orig_sr=audio.sample_rate, target_sr=WHISPER_SAMPLE_RATE)

        try:
            segments_iter, info = self._model.transcribe(
                samples,
                language=lang,
                beam_size=self.config.beam_size,
                vad_filter=self.config.vad_filter,
                vad_parameters={"threshold": self.config.vad_threshold},
                word_timestamps=self.config.word_timestamps,
            )

            texts: list[str] = []
            avg_logprobs: list[float] = []
            tokens: list[Token] = []

            for seg in segments_iter:
                texts.append(seg.text)
                avg_logprobs.append(seg.avg_logprob)
                for word in seg.words or []:
                    tokens.append(
                        Token(
                            text=word.word,
                            start_time=float(word.start),
                            end_time=float(max(word.start, word.end)),
                            confidence=min(1.0, max(0.0, float(word.probability))),
                        )
                    )
        except Exception as e:
            raise ASRError(f"Transcription failed: {e}") from e

        # Segment-local word times can regress slightly at segment borders
        tokens.sort(key=lambda t: t.start_time)

        logger.info(
            f"Transcribed {len(texts)} segments, {len(tokens)} words "
            f"(language={info.language}, prob={info.language_probability:.2f})"
        )

        return ASRResult(
            text="".join(texts).strip(),
            confidence=utterance_confidence([t.confidence for t in tokens], avg_logprobs),
            tokens=tuple(tokens) if self.config.word_timestamps else None,
            language=info.language,
        )
