"""wavetext - Configuration constants.

Flat module of constants. No external config libraries.
The log level can be overridden through WAVETEXT_LOG_LEVEL;
an invalid override falls back to the default.
"""

import logging
import os

# Prompts printed to stdout before each token read
PROMPT_WAVE_FILE = "Input the name of the wave file."
PROMPT_OUTPUT_FILE = "Input the name of the output file."

# Encoding of the sample text files
TEXT_ENCODING = "utf-8"

# PCM normalization: divisor per sample width in bytes.
# 8-bit WAV data is unsigned and is re-centred by PCM_8BIT_OFFSET first.
PCM_FULL_SCALE = {
    1: 128.0,
    2: 32768.0,
    3: 8388608.0,
    4: 2147483648.0,
}
PCM_8BIT_OFFSET = 128

DEFAULT_LOG_LEVEL = logging.WARNING


def _get_log_level() -> int:
    """Get log level from environment or use default.

    Environment variable WAVETEXT_LOG_LEVEL accepts a level name
    (e.g. "INFO", "debug"). Default is WARNING so that stdout only
    carries the prompts.

    Returns:
        Numeric logging level.
    """
    env_val = os.environ.get("WAVETEXT_LOG_LEVEL")
    if env_val:
        level = logging.getLevelNamesMapping().get(env_val.strip().upper())
        if level is not None:
            return level
    return DEFAULT_LOG_LEVEL


LOG_LEVEL = _get_log_level()

# Beat counter (energy comparison over one-second windows)
BEAT_SAMPLES_PER_SECOND = 44100
BEAT_SAMPLES_PER_BLOCK = 1024
BEAT_BLOCKS_PER_WINDOW = 43
# Consecutive above-threshold blocks that make one beat
BEAT_PEAK_RUN = 4
# Sensitivity C = slope * variance + intercept
BEAT_SENSITIVITY_SLOPE = -0.0000015
BEAT_SENSITIVITY_INTERCEPT = 1.5142857
assert BEAT_SAMPLES_PER_BLOCK * BEAT_BLOCKS_PER_WINDOW <= BEAT_SAMPLES_PER_SECOND
