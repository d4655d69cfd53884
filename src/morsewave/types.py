"""Core data types for morsewave."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class TranscriptionResult:
    """Output of one transcoding call."""
    output: str
    unmatched: tuple[str, ...] = field(default_factory=tuple)  # first-seen order

    @property
    def ok(self) -> bool:
        return not self.unmatched


@dataclass(frozen=True)
class TimedSegment:
    """A stretch of constant amplitude: tone at `amplitude`, or silence at 0."""
    amplitude: float
    duration: float     # seconds

    @property
    def is_on(self) -> bool:
        return self.amplitude != 0


class PlaybackState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    STOPPED = "stopped"
