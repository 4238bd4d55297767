"""Run configuration.

The BLAST+ executables are resolved once at startup and frozen into a
FormatterConfig that is passed to every component needing a tool path.
A BLAST+ bin directory can come from --bin, the DATABASE_FORMATTER_BIN
environment variable or a small JSON config file, in that order.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .blast_tools import BLAST_TOOLS, resolve_binaries


ENV_BIN = "DATABASE_FORMATTER_BIN"
DEFAULT_MAX_LINES = 500


@dataclass(frozen=True)
class FormatterConfig:
    """Resolved settings for one formatting run."""

    binaries: Mapping[str, str] = field(default_factory=dict)
    max_lines: int = DEFAULT_MAX_LINES
    parse_seqids: bool = True
    progress: bool = True

    @property
    def makeblastdb(self) -> str:
        return self.binaries["makeblastdb"]

    @property
    def blastdbcmd(self) -> str:
        return self.binaries["blastdbcmd"]


def load_config_file(path: str) -> Dict[str, Any]:
    """Load the JSON config file (keys: bin, makeblastdb, blastdbcmd)."""
    p = Path(os.path.expanduser(path))
    try:
        with p.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Could not read config file '{p}': {e}")
    if not isinstance(data, dict):
        raise SystemExit(f"Config file '{p}' must contain a JSON object.")
    return data


def build_config(
    bin_dir: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
    config_path: Optional[str] = None,
    *,
    parse_seqids: bool = True,
    progress: bool = True,
) -> FormatterConfig:
    file_cfg = load_config_file(config_path) if config_path else {}

    # CLI > environment > config file > PATH
    resolved_bin = bin_dir or os.environ.get(ENV_BIN) or file_cfg.get("bin") or None
    tools: Dict[str, str] = {t: str(file_cfg[t]) for t in BLAST_TOOLS if file_cfg.get(t)}
    tools.update({t: v for t, v in (overrides or {}).items() if v})

    binaries = resolve_binaries(resolved_bin, tools)
    return FormatterConfig(
        binaries=MappingProxyType(binaries),
        parse_seqids=parse_seqids,
        progress=progress,
    )
