"""wavetext - WAV decoding into normalized float samples.

Reads RIFF/WAVE PCM files with the stdlib wave module and converts the
frames to float64 with numpy. Supported sample widths: 8, 16, 24 and
32 bits. Multi-channel audio is mixed down to mono by averaging, so a
file with N frames always yields N samples.

Error codes:
- INPUT_NOT_FOUND: the input path does not exist
- FILE_CORRUPT: not a RIFF/WAVE container, or the header is truncated
- CODEC_UNSUPPORTED: non-PCM encoding or unsupported sample width
"""

from __future__ import annotations

import logging
import wave
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from wavetext.config import PCM_8BIT_OFFSET, PCM_FULL_SCALE

logger = logging.getLogger(__name__)


class DecodeErrorCode:
    """Error codes for WAV decoding."""

    CODEC_UNSUPPORTED = "CODEC_UNSUPPORTED"
    FILE_CORRUPT = "FILE_CORRUPT"
    INPUT_NOT_FOUND = "INPUT_NOT_FOUND"


class WaveDecodeError(OSError):
    """Raised when a WAV file cannot be decoded.

    Attributes:
        code: One of the DecodeErrorCode constants.
        path: The path that failed to decode.
    """

    def __init__(self, code: str, message: str, path: str | Path | None = None):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.path = str(path) if path is not None else None


@dataclass(frozen=True)
class WaveInfo:
    """Container parameters of a decoded WAV file."""

    sample_rate: int
    channels: int
    sample_width: int
    frame_count: int

    @property
    def duration_sec(self) -> float:
        return self.frame_count / self.sample_rate if self.sample_rate > 0 else 0.0


def read_wave_samples(path: str | Path) -> tuple[np.ndarray, WaveInfo]:
    """Decode a WAV file into a read-only float64 sample array.

    Args:
        path: Path to the WAV file.

    Returns:
        Tuple of (samples, info). Samples are in temporal order, one per
        frame, normalized to [-1.0, 1.0).

    Raises:
        WaveDecodeError: If the file is missing, corrupt, or not PCM.
        OSError: If the file exists but cannot be read.
    """
    path = Path(path)
    if not path.exists():
        raise WaveDecodeError(
            DecodeErrorCode.INPUT_NOT_FOUND, f"Input file not found: {path}", path
        )

    try:
        with wave.open(str(path), "rb") as wf:
            info = WaveInfo(
                sample_rate=wf.getframerate(),
                channels=wf.getnchannels(),
                sample_width=wf.getsampwidth(),
                frame_count=wf.getnframes(),
            )
            if info.sample_width not in PCM_FULL_SCALE:
                raise WaveDecodeError(
                    DecodeErrorCode.CODEC_UNSUPPORTED,
                    f"Unsupported sample width: {info.sample_width * 8} bits",
                    path,
                )
            frames = wf.readframes(info.frame_count)
    except wave.Error as e:
        # The wave module reports non-PCM encodings as "unknown format"
        if "unknown format" in str(e):
            raise WaveDecodeError(DecodeErrorCode.CODEC_UNSUPPORTED, str(e), path) from e
        raise WaveDecodeError(DecodeErrorCode.FILE_CORRUPT, str(e), path) from e
    except EOFError as e:
        raise WaveDecodeError(
            DecodeErrorCode.FILE_CORRUPT, "Truncated RIFF header", path
        ) from e

    samples = _frames_to_samples(frames, info.sample_width, info.channels)
    if len(samples) != info.frame_count:
        logger.warning(
            "Header declares %d frames but %d were read from %s",
            info.frame_count,
            len(samples),
            path,
        )
    samples.setflags(write=False)

    logger.debug(
        "Decoded %s: %d samples, %d Hz, %d channel(s), %d-bit",
        path,
        len(samples),
        info.sample_rate,
        info.channels,
        info.sample_width * 8,
    )
    return samples, info


def _frames_to_samples(frames: bytes, sample_width: int, channels: int) -> np.ndarray:
    """Convert raw little-endian PCM frames to mono float64 samples.

    Trailing bytes that do not fill a whole frame are dropped.

    Args:
        frames: Raw frame bytes as returned by wave.readframes().
        sample_width: Bytes per sample (1-4).
        channels: Interleaved channel count.

    Returns:
        Float64 array with one sample per frame.
    """
    frame_size = sample_width * channels
    usable = len(frames) - len(frames) % frame_size
    frames = frames[:usable]

    if sample_width == 1:
        data = np.frombuffer(frames, dtype=np.uint8).astype(np.float64) - PCM_8BIT_OFFSET
    elif sample_width == 2:
        data = np.frombuffer(frames, dtype="<i2").astype(np.float64)
    elif sample_width == 3:
        raw = np.frombuffer(frames, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
        ints = raw[:, 0] | (raw[:, 1] << 8) | (raw[:, 2] << 16)
        # Sign-extend from 24 bits
        ints = np.where(ints >= 1 << 23, ints - (1 << 24), ints)
        data = ints.astype(np.float64)
    else:
        data = np.frombuffer(frames, dtype="<i4").astype(np.float64)

    data /= PCM_FULL_SCALE[sample_width]

    if channels > 1:
        data = data.reshape(-1, channels).mean(axis=1)

    return data


__all__ = [
    "DecodeErrorCode",
    "WaveDecodeError",
    "WaveInfo",
    "read_wave_samples",
]
