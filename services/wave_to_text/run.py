"""wavetext - Wave-to-text converter.

Prompts for a WAV file path and an output path on stdin, decodes the
WAV samples and writes each one as a decimal text line.

Protocol:
- stdout: "Input the name of the wave file." then
  "Input the name of the output file.", each before its read
- stdin: two whitespace-delimited tokens, input path then output path

Order of operations:
1. Read both paths
2. Decode the input (a failure here never touches the output)
3. Create or truncate the output and write it in place (a file this run
   created is removed again if the write fails)

Errors are not caught: EOFError, WaveDecodeError and OSError propagate to
the process boundary.
"""

from __future__ import annotations

import logging
import sys
import time
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from wavetext.config import LOG_LEVEL, PROMPT_OUTPUT_FILE, PROMPT_WAVE_FILE
from wavetext.utils.sample_text import write_samples_text
from wavetext.utils.wave_samples import WaveInfo, read_wave_samples

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Result of one wave-to-text conversion."""

    input_path: str
    output_path: str
    sample_count: int
    info: WaveInfo
    elapsed_ms: int = 0


class TokenReader:
    """Reads whitespace-delimited tokens from a text stream.

    Lines are pulled from the stream only when no buffered token is left,
    so several tokens may share a line and blank lines are skipped.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending: deque[str] = deque()

    def next_token(self) -> str:
        """Return the next token.

        Raises:
            EOFError: If the stream ends before a token is found.
        """
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("Input ended before a token was read")
            self._pending.extend(line.split())
        return self._pending.popleft()


def prompt_for_paths(
    reader: TokenReader,
    out: TextIO | None = None,
) -> tuple[str, str]:
    """Prompt for and read the input WAV path and the output text path.

    Args:
        reader: Token source, normally wrapping stdin.
        out: Stream for the prompts (default: sys.stdout).

    Returns:
        Tuple of (input_path, output_path).

    Raises:
        EOFError: If fewer than two tokens are available.
    """
    out = out if out is not None else sys.stdout

    print(PROMPT_WAVE_FILE, file=out, flush=True)
    input_path = reader.next_token()

    print(PROMPT_OUTPUT_FILE, file=out, flush=True)
    output_path = reader.next_token()

    return input_path, output_path


def convert_wave_to_text(input_path: str | Path, output_path: str | Path) -> ConversionResult:
    """Decode a WAV file and write its samples as text lines.

    Args:
        input_path: Source WAV file.
        output_path: Destination text file, created or truncated.

    Returns:
        ConversionResult with the sample count and WAV parameters.

    Raises:
        WaveDecodeError: If the input cannot be decoded.
        OSError: If the output cannot be written.
    """
    start = time.monotonic()
    input_path = Path(input_path)
    output_path = Path(output_path)

    samples, info = read_wave_samples(input_path)

    count = write_samples_text(output_path, samples)
    elapsed_ms = int((time.monotonic() - start) * 1000)

    logger.info(
        "Wrote %d samples from %s to %s (%d Hz, %d channel(s), %.2fs) in %dms",
        count,
        input_path,
        output_path,
        info.sample_rate,
        info.channels,
        info.duration_sec,
        elapsed_ms,
    )

    return ConversionResult(
        input_path=str(input_path),
        output_path=str(output_path),
        sample_count=count,
        info=info,
        elapsed_ms=elapsed_ms,
    )


def run_wave_to_text(stdin: TextIO | None = None, stdout: TextIO | None = None) -> ConversionResult:
    """Run the prompt/decode/write sequence once.

    Args:
        stdin: Token source (default: sys.stdin).
        stdout: Prompt destination (default: sys.stdout).

    Returns:
        ConversionResult of the conversion.
    """
    reader = TokenReader(stdin if stdin is not None else sys.stdin)
    input_path, output_path = prompt_for_paths(reader, stdout)
    return convert_wave_to_text(input_path, output_path)


def main() -> int:
    """Console entry point."""
    logging.basicConfig(level=LOG_LEVEL)
    run_wave_to_text()
    return 0


if __name__ == "__main__":
    sys.exit(main())
