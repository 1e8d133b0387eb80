"""Diarize + transcribe pipeline: Audio → Speakers + Tokens → Segments."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from diarize_transcribe.alignment import merge_speaker_and_transcript
from diarize_transcribe.asr import ASRRegistry
from diarize_transcribe.audio import AudioValidator, load_audio
from diarize_transcribe.config import DiarizeTranscribeConfig, load_config
from diarize_transcribe.core import (
    ASRResult,
    AudioData,
    BaseASR,
    BaseDiarizer,
    DiarizedTranscript,
    SpeakerInterval,
    TranscriptMetadata,
)
from diarize_transcribe.diarization import DiarizationRegistry
from diarize_transcribe.utils import get_logger, stage_timer

logger = get_logger(__name__)


class DiarizeTranscribePipeline:
    """Runs speaker diarization and speech recognition on one audio file
    and merges them into a speaker-attributed transcript.

    Usage:
        with DiarizeTranscribePipeline.from_config(env="development") as pipeline:
            transcript = pipeline.process("podcast.mp3")
    """

    def __init__(
        self,
        config: DiarizeTranscribeConfig,
        asr: BaseASR | None = None,
        diarizer: BaseDiarizer | None = None,
    ):
        self.config = config
        self.validator = AudioValidator(max_file_size_mb=config.audio.max_file_size_mb)

        # Lazy-created unless injected
        self._asr = asr
        self._diarizer = diarizer

        logger.info("DiarizeTranscribePipeline initialized")

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        env: str | None = None,
        config_dir: Path | str = "configs",
    ) -> "DiarizeTranscribePipeline":
        """Create a pipeline from configuration files."""
        return cls(load_config(config_path=config_path, env=env, config_dir=config_dir))

    @property
    def asr(self) -> BaseASR:
        if self._asr is None:
            self._asr = ASRRegistry.create(self.config.asr.backend, config=self.config.asr)
        return self._asr

    @property
    def diarizer(self) -> BaseDiarizer:
        if self._diarizer is None:
            self._diarizer = DiarizationRegistry.create(
                self.config.diarization.backend,
                config=self.config.diarization,
            )
        return self._diarizer

    def _diarize(self, audio: AudioData) -> tuple[list[SpeakerInterval], float]:
        with stage_timer("diarization") as timer:
            intervals = self.diarizer.diarize(audio)
        speakers = {i.speaker_id for i in intervals}
        logger.info(f"   Found {len(intervals)} segments from {len(speakers)} speakers")
        logger.info(f"   Diarization time: {timer.elapsed:.2f}s")
        return intervals, timer.elapsed

    def _transcribe(self, audio: AudioData, language: str | None) -> tuple[ASRResult, float]:
        with stage_timer("transcription") as timer:
            result = self.asr.transcribe(audio, language=language)
        logger.info(f"   Transcription complete: {result.text[:100]}...")
        logger.info(f"   Transcription time: {timer.elapsed:.2f}s")
        return result, timer.elapsed

    def process(
        self,
        audio_path: Path | str,
        include_word_timings: bool | None = None,
        language: str | None = None,
    ) -> DiarizedTranscript:
        """Diarize, transcribe and merge one audio file.

        Args:
            audio_path: Path to the audio file
            include_word_timings: Attach word timings (default from config)
            language: Language code for ASR (default from config)

        Raises:
            InputError: Audio missing, unsupported or undecodable
            ModelError: A backend failed to load or run
            ValidationError: Backend output violated merge preconditions
        """
        if include_word_timings is None:
            include_word_timings = self.config.output.include_word_timings

        with stage_timer("total") as total:
            path = self.validator.validate(audio_path)

            logger.info("Loading audio file...")
            audio = load_audio(
                path,
                sample_rate=self.config.audio.sample_rate,
                max_duration_seconds=self.config.audio.max_duration_minutes * 60,
            )

            if self.config.parallel_stages:
                logger.info("Steps 1-2/3: Running diarization and speech recognition concurrently...")
                with ThreadPoolExecutor(max_workers=2, thread_name_prefix="stage") as pool:
                    diarization_future = pool.submit(self._diarize, audio)
                    transcription_future = pool.submit(self._transcribe, audio, language)
                    intervals, diarization_time = diarization_future.result()
                    asr_result, transcription_time = transcription_future.result()
            else:
                logger.info("Step 1/3: Running speaker diarization...")
                intervals, diarization_time = self._diarize(audio)
                logger.info("Step 2/3: Running speech recognition...")
                asr_result, transcription_time = self._transcribe(audio, language)

            logger.info("Step 3/3: Merging speaker labels with transcript...")
            if not asr_result.tokens:
                logger.warning("No token timings from ASR, emitting one empty segment per speaker turn")
            segments = merge_speaker_and_transcript(
                intervals,
                asr_result.tokens,
                include_word_timings=include_word_timings,
                utterance_confidence=asr_result.confidence,
            )
            logger.info(f"   Created {len(segments)} speaker-attributed segments")

        rtfx = audio.duration / total.elapsed if total.elapsed > 0 else 0.0
        logger.info(f"Total processing time: {total.elapsed:.2f}s (RTFx: {rtfx:.2f}x)")

        speakers = tuple(sorted({i.speaker_id for i in intervals}))
        metadata = TranscriptMetadata(
            audio_file=str(audio_path),
            duration_seconds=audio.duration,
            speaker_count=len(speakers),
            speakers=speakers,
            processing_time=total.elapsed,
            diarization_time=diarization_time,
            transcription_time=transcription_time,
            clustering_threshold=self.diarizer.clustering_threshold,
            model_version=self.asr.model_version,
        )

        return DiarizedTranscript(
            segments=tuple(segments),
            metadata=metadata,
            language=asr_result.language,
        )

    def unload_all(self) -> None:
        """Unload both models to free memory."""
        if self._asr and self._asr.is_loaded:
            self._asr.unload()
        if self._diarizer and self._diarizer.is_loaded:
            self._diarizer.unload()
        logger.info("All pipeline models unloaded")

    def __enter__(self) -> "DiarizeTranscribePipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unload_all()
