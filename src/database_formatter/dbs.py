"""Formatted database discovery.

blastdbcmd is the only authority on which files are already BLAST databases.
The listing is taken once per run and treated as a fixed snapshot.
"""

from __future__ import annotations
import logging, subprocess
from typing import FrozenSet, List

from .io_utils import normalize_path

logger = logging.getLogger("database_formatter")

LIST_OUTFMT = "%f"
SUMMARY_OUTFMT = "%p %f %t"


def _blastdbcmd_list(root: str, blastdbcmd: str, outfmt: str) -> subprocess.CompletedProcess:
    cmd: List[str] = [blastdbcmd, "-recursive", "-list", root, "-list_outfmt", outfmt]
    logger.debug("CMD: %s", " ".join(cmd))
    try:
        return subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        raise SystemExit(f"Could not run '{blastdbcmd}': {e}")


def list_formatted_databases(root: str, blastdbcmd: str) -> FrozenSet[str]:
    """Return the normalised paths of every database blastdbcmd reports under root."""
    r = _blastdbcmd_list(root, blastdbcmd, LIST_OUTFMT)
    if r.returncode != 0:
        # blastdbcmd exits non-zero when the tree holds no database yet
        logger.debug("blastdbcmd exited with %s: %s", r.returncode, (r.stderr or "").strip())
    paths = [line.strip() for line in (r.stdout or "").splitlines() if line.strip()]
    logger.debug("%d formatted database(s) under %s", len(paths), root)
    return frozenset(normalize_path(p) for p in paths)


def database_summary(root: str, blastdbcmd: str) -> str:
    """Type, file and title of every database under root, as printed by blastdbcmd."""
    r = _blastdbcmd_list(root, blastdbcmd, SUMMARY_OUTFMT)
    return (r.stdout or "") + (r.stderr or "")
