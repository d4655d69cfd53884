"""Render Morse code strings to a sampled sine tone.

A code string is first expanded into timed on/off segments, then the
segments are sampled at SAMPLE_RATE. The tone phase is referenced to the
start of the buffer, not reset per segment.
"""

import logging

import numpy as np

from morsewave.table import duration_units
from morsewave.types import TimedSegment

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
TONE_FREQUENCY_HZ = 600
PEAK_AMPLITUDE = 0.2  # headroom below full scale
TIME_UNIT_MS = 100
TIME_UNIT_SECONDS = TIME_UNIT_MS / 1000

TONE_SYMBOLS = (".", "-")


def render_segments(code: str) -> list[TimedSegment]:
    """Expand a code string into timed segments, one symbol at a time.

    Each symbol becomes a tone (dot/dash) or silence of its own duration,
    always followed by one time unit of silence. Unknown symbols yield a
    zero-length segment.
    """
    segments: list[TimedSegment] = []
    gap = TimedSegment(amplitude=0.0, duration=TIME_UNIT_SECONDS)

    for symbol in code:
        amplitude = PEAK_AMPLITUDE if symbol in TONE_SYMBOLS else 0.0
        duration = duration_units(symbol) * TIME_UNIT_SECONDS
        segments.append(TimedSegment(amplitude=amplitude, duration=duration))
        segments.append(gap)

    return segments


def render(segments: list[TimedSegment]) -> np.ndarray:
    """Sample segments into a read-only float64 buffer at SAMPLE_RATE."""
    total_duration = sum(seg.duration for seg in segments)
    total_samples = round(SAMPLE_RATE * total_duration)
    samples = np.zeros(total_samples, dtype=np.float64)

    index = 0
    for seg in segments:
        n = round(SAMPLE_RATE * seg.duration)
        end = min(index + n, total_samples)
        if seg.is_on and end > index:
            t = np.arange(index, end) / SAMPLE_RATE
            samples[index:end] = seg.amplitude * np.sin(2 * np.pi * TONE_FREQUENCY_HZ * t)
        index += n

    samples.flags.writeable = False
    return samples


def synthesize(code: str) -> np.ndarray:
    """Render a code string straight to samples."""
    segments = render_segments(code)
    samples = render(segments)
    logger.info(
        f"Synthesized {len(segments)} segments: "
        f"{len(samples) / SAMPLE_RATE:.1f}s ({len(samples)} samples)"
    )
    return samples
