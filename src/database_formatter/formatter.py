"""Formatting run.

This module:
- Snapshots the databases blastdbcmd already knows about under the scan root
- Scans for unformatted FASTA files and collects the operator's decisions
- Runs makeblastdb once per decision, sequentially, without stopping on failures
- Prints the blastdbcmd summary table of the formatted databases
"""

from __future__ import annotations
import logging, subprocess
from typing import List

from tqdm import tqdm

from .commands import FormatCommand, command_for
from .config import FormatterConfig
from .dbs import database_summary, list_formatted_databases
from .prompts import Ask
from .scanner import Classifier, find_candidates, scan
from .sequence_type import type_of_sequences

logger = logging.getLogger("database_formatter")


def _run_command(command: FormatCommand) -> bool:
    logger.info("Will run: %s", command)
    try:
        r = subprocess.run(command.argv, check=False)
    except OSError as e:
        logger.error("Could not start makeblastdb for %s: %s", command.path, e)
        return False
    if r.returncode != 0:
        logger.warning("makeblastdb exited with status %s for %s", r.returncode, command.path)
        return False
    return True


def run_commands(commands: List[FormatCommand], progress: bool = True) -> List[FormatCommand]:
    """Run every command in order and return the ones that failed."""
    failed: List[FormatCommand] = []
    pbar = tqdm(total=len(commands), desc="makeblastdb", unit="db",
                dynamic_ncols=True, leave=True, disable=not progress)
    for command in commands:
        if not _run_command(command):
            failed.append(command)
        pbar.update(1)
    pbar.close()
    return failed


def log_summary(root: str, config: FormatterConfig) -> None:
    logger.info("Summary of formatted BLAST databases:\n%s", database_summary(root, config.blastdbcmd))


def format_databases(
    root: str,
    config: FormatterConfig,
    ask: Ask = input,
    classify: Classifier = type_of_sequences,
) -> int:
    """Format every confirmed FASTA file under root.

    Returns 0 when all makeblastdb runs succeeded (or nothing needed
    formatting) and 1 when at least one of them failed.
    """
    formatted = list_formatted_databases(root, config.blastdbcmd)
    decisions = scan(root, formatted, classify=classify, ask=ask, max_lines=config.max_lines)
    commands = [command_for(d, config.makeblastdb, config.parse_seqids) for d in decisions]

    if not commands:
        logger.info("%s does not contain any unformatted database.", root)
        return 0

    logger.info("Will now create %d database(s)", len(commands))
    failed = run_commands(commands, progress=config.progress)
    if failed:
        logger.warning("%d of %d makeblastdb run(s) failed: %s",
                       len(failed), len(commands), ", ".join(c.path for c in failed))
    else:
        logger.info("Done formatting databases.")
    log_summary(root, config)
    return 1 if failed else 0


def list_unformatted(root: str, config: FormatterConfig) -> List[str]:
    """FASTA files under root that blastdbcmd does not list yet."""
    formatted = list_formatted_databases(root, config.blastdbcmd)
    return list(find_candidates(root, formatted))
