"""Audio decoding and resampling."""

from pathlib import Path

import librosa
import numpy as np

from diarize_transcribe.core import AudioData, InputError
from diarize_transcribe.utils import get_logger, timed

logger = get_logger(__name__)

TARGET_SAMPLE_RATE = 16000


@timed
def load_audio(
    audio_path: Path | str,
    sample_rate: int = TARGET_SAMPLE_RATE,
    max_duration_seconds: float | None = None,
) -> AudioData:
    """Decode an audio file to mono float32 samples at `sample_rate`.

    Raises:
        InputError: If decoding fails, the file has no samples, or it
            exceeds `max_duration_seconds`
    """
    audio_path = Path(audio_path)
    logger.info(f"Loading audio file: {audio_path}")

    try:
        samples, sr = librosa.load(str(audio_path), sr=sample_rate, mono=True)
    except Exception as e:
        raise InputError(f"Failed to decode audio ({e})", audio_path=audio_path, reason="decode_failed") from e

    if samples.size == 0:
        raise InputError("Audio file contains no samples", audio_path=audio_path, reason="no_samples")

    audio = AudioData(
        samples=np.asarray(samples, dtype=np.float32),
        sample_rate=int(sr),
        source=str(audio_path),
    )

    if max_duration_seconds is not None and audio.duration > max_duration_seconds:
        raise InputError(
            f"Audio too long: {audio.duration:.1f}s (max: {max_duration_seconds:.1f}s)",
            audio_path=audio_path,
            reason="too_long",
        )

    logger.info(f"Loaded {len(audio.samples)} samples ({audio.duration:.2f}s)")
    return audio
