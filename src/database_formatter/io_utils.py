"""I/O helpers.

Directory walking, binary/FASTA sniffing and bounded reads of candidate files.
"""

from __future__ import annotations
import logging, os
from typing import Iterator

logger = logging.getLogger("database_formatter")

# Control bytes that still occur in plain text files.
_TEXT_CONTROLS = {7, 8, 9, 10, 12, 13, 27}
BINARY_THRESHOLD = 0.30


def normalize_path(path: str) -> str:
    return os.path.normpath(os.path.abspath(path))


def iter_files(root: str) -> Iterator[str]:
    """Yield every regular file under root, depth-first, siblings sorted by name.

    Symlinked directories are skipped, not followed. FIFOs, sockets, devices
    and broken links are skipped too. Directories that cannot be listed are
    logged and skipped.
    """
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning("Cannot list %s (%s). Skipping", root, e)
        return
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from iter_files(entry.path)
        elif entry.is_dir():
            continue
        elif entry.is_file():
            yield entry.path
        else:
            logger.debug("Not a regular file: %s", entry.path)


def is_binary(path: str, blocksize: int = 4096) -> bool:
    """Guess whether a file is binary from its first block.

    Empty files are text. A NUL byte, or more than 30% control bytes, means binary.
    """
    with open(path, "rb") as fh:
        block = fh.read(blocksize)
    if not block:
        return False
    if b"\x00" in block:
        return True
    odd = sum(1 for b in block if (b < 32 and b not in _TEXT_CONTROLS) or b == 127)
    return odd / len(block) > BINARY_THRESHOLD


def looks_like_fasta(path: str) -> bool:
    """True when the first line of a non-empty file starts with '>'.

    Zero-length files are never opened. OSError from stat/open/read propagates.
    """
    if os.path.getsize(path) == 0:
        return False
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        first_line = fh.readline()
    return first_line[:1] == ">"


def read_first_lines(path: str, max_lines: int = 500) -> str:
    lines = []
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        for line in fh:
            lines.append(line)
            if len(lines) >= max_lines:
                break
    return "".join(lines)
