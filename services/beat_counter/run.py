"""wavetext - Beat counter.

Estimates beats per minute from a sample text file (one float per line,
as written by the wave-to-text converter).

Algorithm, for each complete one-second window of 44100 samples:
1. Instantaneous energy per sample: 2 * x^2
2. Block energy E_j: sum over 43 blocks of 1024 samples
   (the last 68 samples of the window are not used)
3. Window average avg(E) and variance var(E) of the block energies
4. Sensitivity C = -0.0000015 * var(E) + 1.5142857
5. A block with E_j > C * avg(E) extends the current peak run; any
   other block resets it. A run of 4 counts one beat and restarts.
   The run carries over from one window to the next.

BPM = beats * 44100 * 60 // total_samples. Trailing samples that do not
fill a window count toward total_samples but are not analysed.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from wavetext.config import (
    BEAT_BLOCKS_PER_WINDOW,
    BEAT_PEAK_RUN,
    BEAT_SAMPLES_PER_BLOCK,
    BEAT_SAMPLES_PER_SECOND,
    BEAT_SENSITIVITY_INTERCEPT,
    BEAT_SENSITIVITY_SLOPE,
    LOG_LEVEL,
)
from wavetext.utils.sample_text import read_samples_text

logger = logging.getLogger(__name__)


@dataclass
class BeatResult:
    """Result of beat counting."""

    bpm: int
    beats: int
    total_samples: int
    windows: int
    elapsed_ms: int = 0


def block_energies(window: np.ndarray) -> np.ndarray:
    """Sum the instantaneous energy 2 * x^2 over each block of a window.

    Args:
        window: One second of samples (at least blocks * block size).

    Returns:
        Array of BEAT_BLOCKS_PER_WINDOW block energies.
    """
    used = window[: BEAT_BLOCKS_PER_WINDOW * BEAT_SAMPLES_PER_BLOCK]
    energy = 2.0 * used * used
    return energy.reshape(BEAT_BLOCKS_PER_WINDOW, BEAT_SAMPLES_PER_BLOCK).sum(axis=1)


def sensitivity(variance: float) -> float:
    """Threshold multiplier for a window with the given energy variance."""
    return BEAT_SENSITIVITY_SLOPE * variance + BEAT_SENSITIVITY_INTERCEPT


def count_beats(samples: np.ndarray) -> BeatResult:
    """Count beats in a sample sequence.

    Args:
        samples: Float samples at 44100 Hz.

    Returns:
        BeatResult with the estimated BPM. An empty sequence gives 0.
    """
    start = time.monotonic()
    samples = np.asarray(samples, dtype=np.float64)
    total_samples = len(samples)
    windows = total_samples // BEAT_SAMPLES_PER_SECOND

    beats = 0
    peak = 0
    for w in range(windows):
        offset = w * BEAT_SAMPLES_PER_SECOND
        ej = block_energies(samples[offset : offset + BEAT_SAMPLES_PER_SECOND])
        avg = float(ej.mean())
        variance = float(np.mean((avg - ej) ** 2))
        threshold = sensitivity(variance) * avg

        for above in ej > threshold:
            if above:
                peak += 1
                if peak == BEAT_PEAK_RUN:
                    beats += 1
                    peak = 0
            else:
                peak = 0

        logger.debug(
            "Window %d: avg=%.4f var=%.4f threshold=%.4f beats=%d",
            w,
            avg,
            variance,
            threshold,
            beats,
        )

    bpm = beats * BEAT_SAMPLES_PER_SECOND * 60 // total_samples if total_samples else 0
    elapsed_ms = int((time.monotonic() - start) * 1000)

    return BeatResult(
        bpm=bpm,
        beats=beats,
        total_samples=total_samples,
        windows=windows,
        elapsed_ms=elapsed_ms,
    )


def run_beat_counter(path: str | Path) -> BeatResult:
    """Read a sample text file and count its beats.

    Args:
        path: Sample text file.

    Returns:
        BeatResult; elapsed_ms includes reading the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file holds a token that is not a float.
    """
    start = time.monotonic()
    samples = read_samples_text(path)
    result = count_beats(samples)
    result.elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "Counted %d beats over %d windows in %s: %d BPM",
        result.beats,
        result.windows,
        path,
        result.bpm,
    )
    return result


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL)

    if len(argv) != 1:
        print("Usage: wavetext-bpm <samples.txt>")
        return 1

    print("Starting")
    result = run_beat_counter(argv[0])
    print(f"BPM = {result.bpm}")
    print(f"Time taken {result.elapsed_ms // 1000} seconds {result.elapsed_ms % 1000} milliseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
