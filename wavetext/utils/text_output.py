"""wavetext - Text output.

Writes lines straight to the destination path: the file is created if
absent, otherwise truncated and rewritten in place. Symlinks are followed
and device nodes are written to, never replaced.

If the write fails and this call created the file, the partial file is
removed. A file that already existed is left truncated and partially
written; nothing else in its directory is touched.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from wavetext.config import TEXT_ENCODING

logger = logging.getLogger(__name__)


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Failed to remove partial output %s: %s", path, e)


def write_lines(
    path: str | Path,
    lines: Iterable[str],
    encoding: str = TEXT_ENCODING,
) -> int:
    """Write an iterable of text lines to a file, truncating it first.

    Lines are written as given; callers supply their own terminators.
    The parent directory is not created: a missing directory is a write
    failure.

    Args:
        path: The destination file.
        lines: Text lines to write, consumed lazily.
        encoding: Text encoding (default: utf-8).

    Returns:
        Number of lines written.

    Raises:
        OSError: If the file cannot be opened or written. A file created
            by this call is removed before re-raising.
    """
    path = Path(path)
    created = not os.path.lexists(path)

    count = 0
    try:
        # newline="\n" keeps the output identical across platforms
        with open(path, "w", encoding=encoding, newline="\n") as f:
            for line in lines:
                f.write(line)
                count += 1
    except BaseException:
        if created:
            _remove_quietly(path)
        raise

    return count
