"""Accumulates speaker-attributed tokens into output segments."""

import re
from dataclasses import dataclass, field

from diarize_transcribe.core import OutputSegment, Token, WordTiming

# Spaces and tabs at either end; line breaks are kept
_EDGE_BLANKS = re.compile(r"\A[^\S\r\n]+|[^\S\r\n]+\Z")


@dataclass
class _Run:
    speaker: str
    start_time: float
    end_time: float
    text_parts: list[str] = field(default_factory=list)
    words: list[WordTiming] = field(default_factory=list)


class RunAccumulator:
    """Two-state machine turning attributed tokens into segments.

    With no open run, the first observed token opens one. A token for the
    open run's speaker extends it; a token for another speaker closes it and
    opens a new run. Closed runs whose text is empty are discarded.
    """

    def __init__(self, include_word_timings: bool, confidence: float):
        self.include_word_timings = include_word_timings
        self.confidence = confidence
        self._run: _Run | None = None

    @property
    def has_open_run(self) -> bool:
        return self._run is not None

    @property
    def current_speaker(self) -> str | None:
        return self._run.speaker if self._run else None

    def observe(self, token: Token, speaker: str) -> OutputSegment | None:
        """Add a token attributed to `speaker`.

        Returns:
            The segment closed by a speaker change, if it had text
        """
        if self._run is not None and self._run.speaker == speaker:
            self._append(self._run, token)
            return None

        closed = self._close()
        self._run = _Run(speaker=speaker, start_time=token.start_time, end_time=token.end_time)
        self._append(self._run, token)
        return closed

    def finish(self) -> OutputSegment | None:
        """Close the open run at end of input."""
        return self._close()

    def _append(self, run: _Run, token: Token) -> None:
        run.text_parts.append(token.text)
        run.end_time = token.end_time
        if self.include_word_timings:
            run.words.append(
                WordTiming(
                    word=token.text,
                    start_time=token.start_time,
                    end_time=token.end_time,
                    confidence=token.confidence,
                )
            )

    def _close(self) -> OutputSegment | None:
        run, self._run = self._run, None
        if run is None:
            return None

        # Emptiness is judged before trimming, so a whitespace-only run survives
        text = "".join(run.text_parts)
        if not text:
            return None

        return OutputSegment(
            speaker=run.speaker,
            text=_EDGE_BLANKS.sub("", text),
            start_time=run.start_time,
            end_time=run.end_time,
            confidence=self.confidence,
            words=tuple(run.words) if self.include_word_timings else None,
        )
