"""Molecule type detection from FASTA text.

A record is nucleotide when more than 90% of its unambiguous letters are
A/C/G/T/U, and protein otherwise. Records too short to judge are ignored.
A block of records only gets a verdict when all judged records agree.
"""

from __future__ import annotations

import re
from collections import Counter
from enum import Enum
from typing import List, Optional


NUCLEOTIDE_LETTERS = set("ACGTU")
NUCLEOTIDE_FRACTION = 0.9
MIN_RESIDUES = 10

_NON_LETTER = re.compile(r"[^A-Z]", re.I)
_AMBIGUOUS = re.compile(r"[NX]", re.I)


class MoleculeType(str, Enum):
    PROTEIN = "protein"
    NUCLEOTIDE = "nucleotide"

    @property
    def dbtype(self) -> str:
        """makeblastdb -dbtype token: 'prot' or 'nucl'."""
        return self.value[:4]


class ClassificationFailed(ValueError):
    """No confident molecule type could be determined."""


def guess_sequence_type(seq: str) -> Optional[MoleculeType]:
    cleaned = _AMBIGUOUS.sub("", _NON_LETTER.sub("", seq or ""))
    if len(cleaned) < MIN_RESIDUES:
        return None
    composition = Counter(cleaned.upper())
    putative_na = sum(n for ch, n in composition.items() if ch in NUCLEOTIDE_LETTERS)
    if putative_na > NUCLEOTIDE_FRACTION * len(cleaned):
        return MoleculeType.NUCLEOTIDE
    return MoleculeType.PROTEIN


def split_records(text: str) -> List[str]:
    """Sequence bodies of a FASTA block; the first record may lack a header."""
    records: List[str] = []
    parts: List[str] = []
    for line in (text or "").splitlines():
        if line.startswith(">"):
            records.append("".join(parts))
            parts = []
        else:
            parts.append(line)
    records.append("".join(parts))
    return [r for r in records if r]


def type_of_sequences(text: str) -> MoleculeType:
    """Return the molecule type shared by every record in ``text``.

    Raises ClassificationFailed when no record can be judged or when records
    disagree.
    """
    records = split_records(text)
    verdicts = {guess_sequence_type(r) for r in records} - {None}
    if not verdicts:
        raise ClassificationFailed("Insufficient sequence to determine the molecule type.")
    if len(verdicts) > 1:
        raise ClassificationFailed("Records of both protein and nucleotide type were found.")
    return verdicts.pop()
