"""database_formatter

Prepare raw FASTA files for a BLAST search server.
The package recursively scans a directory for sequence files that are not yet
BLAST databases, guesses whether each one holds protein or nucleotide
sequences, asks the operator to confirm and name it, and runs makeblastdb.
"""

__all__ = ["cli","blast_tools","commands","config","dbs","formatter","io_utils","prompts","scanner","sequence_type"]


__version__ = "1.0.0"
