#!/usr/bin/env python3
"""Validation harness for unique chromosome reconstruction.

Subcommands:
  run         Reconstruct every FASTA file in a directory and report PASS/FAIL
  list        List synthetic datasets from the bundled registry
  generate    Write the reference and fragment FASTA files of a registry dataset

A reconstruction passes when every fragment of the input file occurs in the
reconstructed chromosome.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from unichrom_core import reconstruct_chromosome, validate_chromosome
from unichrom_core.datasets import DEFAULT_REGISTRY, generate_dataset, load_registry
from unichrom_core.fasta import (
    parse_fasta_file,
    write_chromosome_fasta,
    write_fragments_fasta,
)


def check_file(path: Path) -> bool | None:
    """Reconstruct one file and print its result; ``None`` if it could not be read."""

    fragments = parse_fasta_file(path)
    if fragments is None:
        print(f"ERROR: Could not parse test file at: {path.resolve()}", file=sys.stderr)
        return None

    chromosome = reconstruct_chromosome(fragments)
    passed = validate_chromosome(fragments, chromosome)
    print(f"{path.name}:")
    print("    PASS" if passed else "    FAIL")
    return passed


def run_directory(directory: Path) -> int:
    if not directory.is_dir():
        print("ERROR: Cannot locate test data directory. Aborting.", file=sys.stderr)
        return 1

    failures = 0
    for path in sorted(p for p in directory.iterdir() if p.is_file()):
        if check_file(path) is False:
            failures += 1
    return 1 if failures else 0


def list_datasets(registry) -> None:
    print("Synthetic datasets:")
    for did, meta in registry["synthetic"].items():
        desc = meta.get("description", "")
        print(f"  - {did:25s} {desc}")


def write_dataset(dataset_id: str, registry, output_dir: Path) -> int:
    meta = registry["synthetic"].get(dataset_id)
    if not meta:
        print(f"Error: dataset id '{dataset_id}' not found", file=sys.stderr)
        return 1
    chromosome, fragments = generate_dataset(meta)
    output_dir.mkdir(parents=True, exist_ok=True)
    write_chromosome_fasta(
        chromosome, output_dir / "reference.fasta", record_id=f"{dataset_id}|reference"
    )
    write_fragments_fasta(fragments, output_dir / "fragments.fasta", prefix=dataset_id)
    print(f"Generated dataset '{dataset_id}' ({len(fragments)} fragments) in {output_dir}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Reconstruction validation utilities")
    sub = p.add_subparsers(dest="cmd", required=True)
    pr = sub.add_parser("run", help="Validate every FASTA file in a directory")
    pr.add_argument("directory", type=Path, nargs="?", default=Path("test_data"))
    pl = sub.add_parser("list", help="List synthetic datasets from registry")
    pl.add_argument("--registry", type=Path, default=DEFAULT_REGISTRY)
    pg = sub.add_parser("generate", help="Generate dataset by id from registry")
    pg.add_argument("dataset_id")
    pg.add_argument("--registry", type=Path, default=DEFAULT_REGISTRY)
    pg.add_argument("--output-dir", type=Path, default=Path("test_data"))
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.cmd == "run":
        return run_directory(args.directory)
    try:
        registry = load_registry(args.registry)
    except OSError as exc:
        print(f"Error: could not read registry {args.registry}: {exc}", file=sys.stderr)
        return 1
    if args.cmd == "list":
        list_datasets(registry)
        return 0
    return write_dataset(args.dataset_id, registry, args.output_dir)


if __name__ == "__main__":
    sys.exit(main())
