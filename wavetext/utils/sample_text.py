"""wavetext - Sample text serialization.

Output format: one sample per line, rendered with Python's default float
repr (shortest round-tripping decimal, e.g. "0.015625", "3.0517578125e-05"),
newline-terminated, no header.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import numpy as np

from wavetext.config import TEXT_ENCODING
from wavetext.utils.text_output import write_lines


def format_sample(sample: float) -> str:
    """Render a sample as its default decimal text."""
    return repr(float(sample))


def _sample_lines(samples: Iterable[float]) -> Iterator[str]:
    if isinstance(samples, np.ndarray):
        # tolist() yields Python floats, whose repr has no numpy wrapper
        samples = samples.tolist()
    for sample in samples:
        yield f"{format_sample(sample)}\n"


def write_samples_text(path: str | Path, samples: Iterable[float]) -> int:
    """Write samples to a text file, one per line.

    The file is created, or truncated and rewritten in place; see write_lines.

    Args:
        path: Destination text file.
        samples: Samples in the order they should appear.

    Returns:
        Number of lines written.

    Raises:
        OSError: If the destination cannot be created or written.
    """
    return write_lines(path, _sample_lines(samples))


def read_samples_text(path: str | Path) -> np.ndarray:
    """Read whitespace-separated float samples from a text file.

    Args:
        path: Text file produced by write_samples_text (or any file of
            whitespace-separated decimal numbers).

    Returns:
        Float64 array of the parsed samples, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a token is not a valid float.
    """
    text = Path(path).read_text(encoding=TEXT_ENCODING)
    return np.array([float(token) for token in text.split()], dtype=np.float64)
