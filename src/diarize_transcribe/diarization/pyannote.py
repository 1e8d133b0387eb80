"""PyAnnote speaker diarization implementation."""

import gc
import os

from diarize_transcribe.diarization.base import DiarizationRegistry, relabel_speakers
from diarize_transcribe.core import BaseDiarizer, AudioData, SpeakerInterval, DiarizationError
from diarize_transcribe.core.resilience import retry_model_load
from diarize_transcribe.config import DiarizationConfig
from diarize_transcribe.utils import get_logger, timed, require_loaded, resolve_device

logger = get_logger(__name__)


@DiarizationRegistry.register("pyannote")
class PyAnnoteDiarizer(BaseDiarizer):
    """PyAnnote speaker diarization backend."""

    def __init__(self, config: DiarizationConfig):
        self.config = config
        self._pipeline = None
        self._device = resolve_device(config.device)
        logger.info(
            f"PyAnnoteDiarizer initialized: model={config.model}, device={self._device}, "
            f"threshold={config.clustering_threshold}"
        )

    def _get_hf_token(self) -> str | None:
        """Get HuggingFace token from environment."""
        token = os.environ.get("HF_TOKEN") or os.environ.get("HUGGINGFACE_TOKEN")
        if not token:
            logger.warning(
                "No HuggingFace token found. Set HF_TOKEN environment variable. "
                "PyAnnote models require accepting license at huggingface.co"
            )
        return token

    def _build_pipeline(self):
        from pyannote.audio import Pipeline

        return Pipeline.from_pretrained(self.config.model, token=self._get_hf_token())

    @retry_model_load
    def _create_pipeline(self):
        return self._build_pipeline()

    def load(self) -> None:
        """Load the diarization pipeline and apply the clustering threshold."""
        if self._pipeline is not None:
            logger.debug("Pipeline already loaded")
            return

        try:
            import torch

            logger.info(f"Loading PyAnnote pipeline: {self.config.model}...")
            pipeline = self._create_pipeline()
            if pipeline is None:
                raise DiarizationError(f"Pipeline {self.config.model} unavailable (gated model?)")

            params = pipeline.parameters(instantiated=True)
            params["clustering"]["threshold"] = self.config.clustering_threshold
            pipeline.instantiate(params)

            if self._device == "cuda" and torch.cuda.is_available():
                pipeline = pipeline.to(torch.device("cuda"))

            self._pipeline = pipeline
            logger.info("PyAnnote pipeline loaded successfully")

        except DiarizationError:
            raise
        except Exception as e:
            raise DiarizationError(f"Failed to load PyAnnote pipeline: {e}") from e

    def unload(self) -> None:
        """Unload pipeline and free memory."""
        if self._pipeline is None:
            return

        logger.info("Unloading PyAnnote pipeline...")
        del self._pipeline
        self._pipeline = None
        gc.collect()

        try:
            import torch
            if torch.cuda.is_available():
                torch.cuda.empty_cache()
        except ImportError:
            pass

        logger.info("PyAnnote pipeline unloaded")

    @property
    def is_loaded(self) -> bool:
        return self._pipeline is not None

    @property
    def clustering_threshold(self) -> float:
        return self.config.clustering_threshold

    @timed
    @require_loaded
    def diarize(
        self,
        audio: AudioData,
        min_speakers: int | None = None,
        max_speakers: int | None = None,
    ) -> list[SpeakerInterval]:
        """Identify speaker intervals in decoded audio.

        Returns:
            Intervals sorted by start time, labelled Speaker_01, Speaker_02, ...
        """
        min_spk = min_speakers or self.config.min_speakers
        max_spk = max_speakers or self.config.max_speakers

        params = {}
        if min_spk is not None:
            params["min_speakers"] = min_spk
        if max_spk is not None:
            params["max_speakers"] = max_spk

        try:
            import torch

            waveform = torch.from_numpy(audio.samples).unsqueeze(0)
            output = self._pipeline(
                {"waveform": waveform, "sample_rate": audio.sample_rate},
                **params,
            )
            # pyannote 4 wraps the annotation, 3.x returns it directly
            annotation = getattr(output, "speaker_diarization", output)
            turns = [
                (turn.start, turn.end, speaker)
                for turn, _, speaker in annotation.itertracks(yield_label=True)
            ]
        except Exception as e:
            raise DiarizationError(f"Diarization failed: {e}") from e

        intervals = relabel_speakers(turns, prefix=self.config.speaker_label_prefix)
        speakers = {i.speaker_id for i in intervals}
        logger.info(f"Diarization complete: {len(intervals)} turns, {len(speakers)} speakers")
        return intervals
