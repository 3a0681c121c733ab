"""wavetext - Utility modules."""

from wavetext.utils.sample_text import format_sample, read_samples_text, write_samples_text
from wavetext.utils.text_output import write_lines
from wavetext.utils.wave_samples import (
    DecodeErrorCode,
    WaveDecodeError,
    WaveInfo,
    read_wave_samples,
)

__all__ = [
    # sample_text
    "format_sample",
    "read_samples_text",
    "write_samples_text",
    # text_output
    "write_lines",
    # wave_samples
    "DecodeErrorCode",
    "WaveDecodeError",
    "WaveInfo",
    "read_wave_samples",
]
