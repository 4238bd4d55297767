"""BLAST+ tool discovery and version checks.

database_formatter drives two BLAST+ executables: makeblastdb to format FASTA
files and blastdbcmd to list databases that already exist.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from typing import Dict, Mapping


BLAST_TOOLS = ("makeblastdb", "blastdbcmd")

_VER_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)")


def _parse_version(text: str) -> tuple[int, int, int] | None:
    m = _VER_RE.search(text or "")
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def get_tool_version(exe: str) -> tuple[int, int, int] | None:
    """Return (major, minor, patch) for a BLAST+ executable, or None if unknown."""
    try:
        r = subprocess.run([exe, "-version"], capture_output=True, text=True, check=False)
    except OSError:
        return None
    txt = (r.stdout or "") + "\n" + (r.stderr or "")
    return _parse_version(txt)


def _which(name: str, bin_dir: str | None) -> str | None:
    if bin_dir:
        found = shutil.which(name, path=os.path.abspath(os.path.expanduser(bin_dir)))
        if found:
            return found
    return shutil.which(name)


def resolve_binaries(bin_dir: str | None = None, overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Map each BLAST+ tool name to an executable path.

    An explicit override wins; otherwise the tool is looked up in ``bin_dir``
    (when given) and then on PATH.
    """
    logger = logging.getLogger("database_formatter")
    overrides = overrides or {}
    binaries: Dict[str, str] = {}
    for tool in BLAST_TOOLS:
        wanted = overrides.get(tool)
        exe = _which(wanted, None) if wanted else _which(tool, bin_dir)
        if exe is None:
            raise SystemExit(
                f"Not found '{wanted or tool}'. Install NCBI BLAST+ or point --bin at its bin directory and try again."
            )
        logger.debug("Using %s: %s (version %s)", tool, exe, get_tool_version(exe))
        binaries[tool] = exe
    return binaries
