"""Directory scan for unformatted FASTA files.

Walks the scan root, drops entries that are already databases, binary or not
FASTA, guesses the molecule type of what is left from its first lines and asks
the operator whether to format each file.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, Iterator, List

from .commands import FormatDecision
from .config import DEFAULT_MAX_LINES
from .io_utils import is_binary, iter_files, looks_like_fasta, normalize_path, read_first_lines
from .prompts import Ask, confirm_candidate
from .sequence_type import ClassificationFailed, MoleculeType, type_of_sequences

logger = logging.getLogger("database_formatter")

Classifier = Callable[[str], MoleculeType]


def find_candidates(root: str, formatted: AbstractSet[str]) -> Iterator[str]:
    """Yield FASTA-looking text files under root that are not in ``formatted``.

    ``formatted`` holds normalised paths; a member is never opened.
    """
    for path in iter_files(root):
        if normalize_path(path) in formatted:
            logger.debug("Already formatted: %s", path)
            continue
        try:
            if is_binary(path) or not looks_like_fasta(path):
                continue
        except OSError as e:
            logger.warning("Unable to read %s (%s). Skipping", path, e)
            continue
        yield path


def scan(
    root: str,
    formatted: AbstractSet[str],
    classify: Classifier = type_of_sequences,
    ask: Ask = input,
    max_lines: int = DEFAULT_MAX_LINES,
) -> List[FormatDecision]:
    """Return the confirmed format decisions for root, in walk order."""
    decisions: List[FormatDecision] = []
    for path in find_candidates(root, formatted):
        logger.info("Found %s", path)
        try:
            first_lines = read_first_lines(path, max_lines)
        except OSError as e:
            logger.warning("Unable to read %s (%s). Skipping", path, e)
            continue
        try:
            molecule_type = classify(first_lines)
        except ClassificationFailed:
            logger.warning("Unable to guess sequence type for %s. Skipping", path)
            continue
        decision = confirm_candidate(ask, path, molecule_type)
        if decision is not None:
            decisions.append(decision)
    return decisions
