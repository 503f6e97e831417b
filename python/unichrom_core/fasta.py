"""FASTA input and output for fragment sets and reconstructed chromosomes."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Set

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqIO.FastaIO import SimpleFastaParser
from Bio.SeqRecord import SeqRecord

logger = logging.getLogger(__name__)

PathLike = str | Path


def parse_fasta_file(path: PathLike) -> Set[str] | None:
    """Read the sequences of a FASTA file into a set of fragments.

    Blank lines and ``;`` comment lines are skipped; the lines of each record
    are joined into one fragment. Returns ``None`` if the file cannot be read.
    """

    try:
        with Path(path).open(encoding="utf-8") as handle:
            lines = [
                line for line in handle
                if line.strip() and not line.startswith(";")
            ]
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read FASTA file %s: %s", path, exc)
        return None

    fragments = {
        sequence
        for _, sequence in SimpleFastaParser(io.StringIO("".join(lines)))
        if sequence
    }
    logger.debug("Parsed %d fragments from %s", len(fragments), path)
    return fragments


def write_chromosome_fasta(
    chromosome: str,
    path: PathLike,
    *,
    record_id: str = "unichrom",
    description: str = "",
) -> None:
    """Write ``chromosome`` as a single-record FASTA file."""

    SeqIO.write(
        [SeqRecord(Seq(chromosome), id=record_id, description=description)],
        str(path),
        "fasta",
    )


def write_fragments_fasta(
    fragments: Iterable[str],
    path: PathLike,
    *,
    prefix: str = "fragment",
) -> None:
    """Write fragments one record each, numbered in the given order."""

    records = [
        SeqRecord(Seq(fragment), id=f"{prefix}_{index}", description="")
        for index, fragment in enumerate(fragments, start=1)
    ]
    SeqIO.write(records, str(path), "fasta")


def read_first_sequence(path: PathLike) -> str | None:
    """Return the first record of a FASTA file, e.g. a reference chromosome."""

    record = next(SeqIO.parse(str(path), "fasta"), None)
    return str(record.seq) if record is not None else None
