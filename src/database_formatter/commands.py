"""makeblastdb command assembly."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List

from .sequence_type import MoleculeType


@dataclass(frozen=True)
class FormatDecision:
    """A confirmed request to format one FASTA file."""

    path: str
    molecule_type: MoleculeType
    title: str


@dataclass(frozen=True)
class FormatCommand:
    makeblastdb: str
    path: str
    dbtype: str
    title: str
    parse_seqids: bool = True

    @property
    def argv(self) -> List[str]:
        cmd = [self.makeblastdb, "-in", self.path, "-dbtype", self.dbtype, "-title", self.title]
        if self.parse_seqids:
            cmd.append("-parse_seqids")
        return cmd

    def __str__(self) -> str:
        line = f'{self.makeblastdb} -in {shlex.quote(self.path)} -dbtype {self.dbtype} -title "{self.title}"'
        if self.parse_seqids:
            line += " -parse_seqids"
        return line


def build_command(
    path: str,
    molecule_type: MoleculeType,
    title: str,
    makeblastdb: str,
    parse_seqids: bool = True,
) -> FormatCommand:
    """Return the makeblastdb invocation for one file.

    The title must already be free of double quotes (see prompts.sanitize_title).
    """
    return FormatCommand(
        makeblastdb=makeblastdb,
        path=path,
        dbtype=MoleculeType(molecule_type).dbtype,
        title=title,
        parse_seqids=parse_seqids,
    )


def command_for(decision: FormatDecision, makeblastdb: str, parse_seqids: bool = True) -> FormatCommand:
    return build_command(decision.path, decision.molecule_type, decision.title, makeblastdb, parse_seqids)
