"""Shared pytest fixtures for wavetext tests."""

import tempfile
import wave
from pathlib import Path

import numpy as np
import pytest


def write_pcm_wav(
    path: Path,
    frames: bytes,
    channels: int = 1,
    sample_width: int = 2,
    sample_rate: int = 44100,
) -> Path:
    """Write raw little-endian PCM frames into a WAV container.

    Args:
        path: Output path for the WAV file.
        frames: Interleaved PCM frame bytes.
        channels: Channel count.
        sample_width: Bytes per sample.
        sample_rate: Sample rate in Hz.

    Returns:
        The path written.
    """
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(sample_width)
        wf.setframerate(sample_rate)
        wf.writeframes(frames)
    return path


def int16_frames(values) -> bytes:
    """Pack signed 16-bit sample values as little-endian bytes."""
    return np.asarray(values, dtype="<i2").tobytes()


@pytest.fixture
def tmpdir_path():
    """Temporary directory as a Path, removed after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_wave_file(tmpdir_path):
    """A short mono 16-bit WAV with known sample values.

    Yields:
        tuple: (path, expected float samples)
    """
    values = [0, 512, -512, 16384, -32768, 32767, 1, -1]
    path = write_pcm_wav(tmpdir_path / "input.wav", int16_frames(values))
    expected = [v / 32768.0 for v in values]
    yield path, expected


@pytest.fixture
def empty_wave_file(tmpdir_path):
    """A valid WAV with zero frames."""
    yield write_pcm_wav(tmpdir_path / "empty.wav", b"")
