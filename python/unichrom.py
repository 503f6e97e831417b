"""Command line entrypoint for unique chromosome reconstruction."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

import networkx as nx
from fastDamerauLevenshtein import damerauLevenshtein as damerau_levenshtein_distance

from unichrom_core import (
    NoUniqueAssembly,
    build_sequence_graph,
    reconstruct_from_graph,
)
from unichrom_core.fasta import (
    parse_fasta_file,
    read_first_sequence,
    write_chromosome_fasta,
)

METRICS_HEADER = (
    "edit_distance",
    "target_length",
    "assembly_length",
    "fragment_count",
    "graph_time",
    "search_time",
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconstruct the unique chromosome encoded by overlapping FASTA fragments"
    )
    parser.add_argument("input_file", type=Path, help="File containing input sequence data")
    parser.add_argument(
        "--output-fasta",
        type=Path,
        help="Optional output FASTA path for the reconstructed chromosome",
    )
    parser.add_argument(
        "--graphml",
        type=Path,
        help="Optional GraphML path for the overlap graph",
    )
    parser.add_argument(
        "--reference",
        type=Path,
        help="Reference FASTA used to score the reconstruction",
    )
    parser.add_argument(
        "--metrics-csv",
        type=Path,
        help="Optional CSV file to append reconstruction metrics",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    return parser.parse_args(argv)


def ensure_header(csv_path: Path, header: Sequence[str]) -> None:
    if not csv_path.exists() or csv_path.stat().st_size == 0:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        with csv_path.open("w", encoding="utf-8") as handle:
            handle.write(",".join(header) + "\n")


def append_metrics(csv_path: Path, row: Sequence[str], header: Sequence[str]) -> None:
    ensure_header(csv_path, header)
    with csv_path.open("a", encoding="utf-8") as handle:
        handle.write(",".join(row) + "\n")


def reconstruct(args: argparse.Namespace) -> int:
    fragments = parse_fasta_file(args.input_file)
    if fragments is None:
        print(f'ERROR: Unable to parse FASTA file "{args.input_file}"', file=sys.stderr)
        return 1

    if args.reference is not None and not args.reference.is_file():
        print(f'ERROR: Unable to read reference FASTA file "{args.reference}"', file=sys.stderr)
        return 1

    graph_start = time.time()
    graph = build_sequence_graph(fragments)
    graph_time = time.time() - graph_start

    if graph is not None and args.graphml is not None:
        nx.write_graphml(graph.to_networkx(), str(args.graphml))

    search_start = time.time()
    try:
        if graph is None:
            raise NoUniqueAssembly("no fragments were parsed from the input file")
        chromosome = reconstruct_from_graph(graph)
    except NoUniqueAssembly as exc:
        print("ERROR: Unable to reconstruct a unique chromosome", file=sys.stderr)
        print(f"       {exc}", file=sys.stderr)
        return 1
    search_time = time.time() - search_start

    print("The reconstructed chromosome is:")
    print(chromosome)
    print(f"Length: {len(chromosome)}")

    if args.output_fasta is not None:
        write_chromosome_fasta(chromosome, args.output_fasta)

    reference = read_first_sequence(args.reference) if args.reference else None
    edit_distance = None
    if reference is not None:
        edit_distance = int(
            damerau_levenshtein_distance(chromosome, reference, similarity=False)
        )
        print(f"Edit distance to reference: {edit_distance}")

    if args.metrics_csv is not None:
        row = (
            str(edit_distance) if edit_distance is not None else "",
            str(len(reference)) if reference is not None else "",
            str(len(chromosome)),
            str(len(fragments)),
            f"{graph_time:.6f}",
            f"{search_time:.6f}",
        )
        append_metrics(args.metrics_csv, row, METRICS_HEADER)

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return reconstruct(args)


if __name__ == "__main__":
    sys.exit(main())
