"""Interactive confirmation of candidate FASTA files.

Every prompt goes through an ``ask`` callable (``input`` by default) so the
protocol can be driven from a script or a test.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from .commands import FormatDecision
from .sequence_type import MoleculeType

Ask = Callable[[str], str]

logger = logging.getLogger("database_formatter")


def ask_yes_no(ask: Ask, prompt: str = "Proceed? [y/n]: ") -> bool:
    # No retry limit: keep asking until the answer is y or n.
    while True:
        s = ask(prompt).strip("\r\n").lower()
        if s in {"y", "n"}:
            return s == "y"
        print("Please answer 'y' or 'n'.", flush=True)


def sanitize_title(title: str) -> str:
    """Replace double quotes so the title can sit inside a quoted argument."""
    return title.replace('"', "'")


def ask_title(ask: Ask, path: str) -> str:
    default = os.path.basename(path)
    s = ask(f"Enter a database title (ENTER={default}): ").strip()
    return sanitize_title(s or default)


def confirm_candidate(ask: Ask, path: str, molecule_type: MoleculeType) -> Optional[FormatDecision]:
    """Ask whether to format ``path``; None when the operator declines."""
    logger.info("FASTA file: %s", path)
    logger.info("Sequence type: %s", MoleculeType(molecule_type).value)
    if not ask_yes_no(ask):
        return None
    title = ask_title(ask, path)
    logger.info("Will make %s database from %s with title '%s'", MoleculeType(molecule_type).value, path, title)
    return FormatDecision(path=path, molecule_type=MoleculeType(molecule_type), title=title)
