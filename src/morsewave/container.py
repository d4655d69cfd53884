"""RIFF/WAVE container encoding for synthesized Morse audio.

Samples are float64 in [-1, 1] (see morsewave.synthesize). The container is
always mono, 16-bit little-endian PCM at SAMPLE_RATE with the canonical
44-byte header, written through scipy.io.wavfile.
"""

import io
import logging
from pathlib import Path

import numpy as np
import scipy.io.wavfile as wavfile

from morsewave.synthesize import SAMPLE_RATE

logger = logging.getLogger(__name__)

HEADER_SIZE = 44
BYTES_PER_SAMPLE = 2


def quantize(samples: np.ndarray) -> np.ndarray:
    """Convert float samples to int16 PCM.

    - NaN becomes silence, values are clipped to [-1, 1]
    - Negative values scale by 32768, non-negative by 32767, so -1.0 and 1.0
      land exactly on the int16 limits
    """
    samples = np.nan_to_num(np.ravel(np.asarray(samples, dtype=np.float64)), nan=0.0)
    clipped = np.clip(samples, -1.0, 1.0)
    scaled = np.where(clipped < 0, clipped * 32768, clipped * 32767)
    return scaled.astype(np.int16)


def encode_container(samples: np.ndarray) -> bytes:
    """Encode samples as the bytes of a mono 16-bit PCM WAV file."""
    pcm = quantize(samples)
    buf = io.BytesIO()
    wavfile.write(buf, SAMPLE_RATE, pcm)
    data = buf.getvalue()
    logger.info(f"Encoded {len(pcm)} samples into {len(data)} bytes")
    return data


def save_container(path: str | Path, data: bytes) -> Path:
    """Write container bytes to a file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info(f"Wrote {path} ({len(data)} bytes)")
    return path
