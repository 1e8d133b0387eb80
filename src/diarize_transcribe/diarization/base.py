"""Diarization registry and shared helpers."""

from collections.abc import Iterable

from diarize_transcribe.core import Registry, BaseDiarizer, SpeakerInterval

# Diarization Registry - all diarization backends register here
DiarizationRegistry = Registry[BaseDiarizer]("diarization")


def relabel_speakers(
    turns: Iterable[tuple[float, float, str]],
    prefix: str = "Speaker_",
) -> list[SpeakerInterval]:
    """Sort raw (start, end, label) turns and give labels stable names.

    Backend labels (SPEAKER_00, ...) are replaced by `{prefix}01`,
    `{prefix}02`, ... in order of first appearance on the timeline.
    """
    ordered = sorted(turns, key=lambda t: (t[0], t[1]))
    names: dict[str, str] = {}
    intervals = []
    for start, end, label in ordered:
        if label not in names:
            names[label] = f"{prefix}{len(names) + 1:02d}"
        intervals.append(
            SpeakerInterval(speaker_id=names[label], start_time=float(start), end_time=float(end))
        )
    return intervals
