"""Command-line interface.

This module implements:
- Argument parsing and validation of the scan root
- Logging setup and BLAST+ tool resolution
- The interactive formatting run (or a dry-run listing of candidates)
"""

from __future__ import annotations

import argparse
import logging
import os
import textwrap

from .config import ENV_BIN, build_config
from .formatter import format_databases, list_unformatted
from . import __version__

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser():
    class _Fmt(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
        """Help formatter combining defaults + multi-line descriptions."""

    description = (
        "database_formatter: prepare BLAST databases for a sequence search server.\n\n"
        "Recursively scans a directory for FASTA files that are not BLAST databases yet,\n"
        "detects whether each holds protein or nucleotide sequences, asks for a title\n"
        "and formats it with makeblastdb (-parse_seqids). Binary files, non-FASTA files\n"
        "and databases already listed by blastdbcmd are ignored."
    )
    epilog = textwrap.dedent(
        f"""\
        Examples:
          # Format everything under ~/db (interactive)
          database_formatter ~/db

          # Only list the FASTA files that would be offered
          database_formatter --dry-run ~/db

          # Use a specific BLAST+ installation
          database_formatter --bin /opt/ncbi-blast/bin ~/db

        The BLAST+ bin directory can also be set with {ENV_BIN}.
        """
    )

    p = argparse.ArgumentParser(
        prog="database_formatter",
        description=description,
        epilog=epilog,
        formatter_class=_Fmt,
    )

    p.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program version and exit.",
    )

    # Validated by hand in main() so a wrong count is a warning, not an argparse error.
    p.add_argument("db_path", nargs="*", help="Directory to scan for BLAST databases (exactly one).")

    g_tools = p.add_argument_group("BLAST+")
    g_tools.add_argument("--bin", help="Directory containing the BLAST+ executables.")
    g_tools.add_argument("--makeblastdb-exe", help="Path/name of the makeblastdb executable.")
    g_tools.add_argument("--blastdbcmd-exe", help="Path/name of the blastdbcmd executable.")
    g_tools.add_argument("--config", help="JSON config file with 'bin', 'makeblastdb' and/or 'blastdbcmd' keys.")
    g_tools.add_argument(
        "--no-parse-seqids",
        dest="parse_seqids",
        action="store_false",
        default=True,
        help="Do not pass -parse_seqids to makeblastdb.",
    )

    g_run = p.add_argument_group("Run")
    g_run.add_argument(
        "--dry-run",
        action="store_true",
        help="List unformatted FASTA files and exit without prompting or formatting.",
    )
    g_run.add_argument("--no-progress", action="store_true", help="Hide the progress bar while formatting.")

    g_out = p.add_argument_group("Output")
    g_out.add_argument("--verbose", action="store_true", help="Same as --log-level DEBUG.")
    g_out.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity.",
    )

    return p


def main(argv=None):
    p = build_parser()
    a = p.parse_args(argv)

    level = "DEBUG" if a.verbose else a.log_level
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s: %(message)s")
    logger = logging.getLogger("database_formatter")

    if len(a.db_path) != 1:
        logger.warning("Not running: give only one argument (directory)")
        return EXIT_USAGE
    db_path = a.db_path[0]
    logger.info("Running with %s", db_path)
    if not os.path.isdir(db_path):
        logger.warning("Not running because %s is not a directory", db_path)
        return EXIT_USAGE

    cfg = build_config(
        bin_dir=a.bin,
        overrides={"makeblastdb": a.makeblastdb_exe, "blastdbcmd": a.blastdbcmd_exe},
        config_path=a.config,
        parse_seqids=a.parse_seqids,
        progress=not a.no_progress,
    )

    if a.dry_run:
        pending = list_unformatted(db_path, cfg)
        if not pending:
            print(f"\n{db_path} does not contain any unformatted database.", flush=True)
        for path in pending:
            print(path, flush=True)
        return EXIT_OK

    return format_databases(db_path, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
