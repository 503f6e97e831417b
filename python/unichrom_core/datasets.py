"""Registry of synthetic fragment datasets declared in YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .synthetic import generate_chromosome, generate_fragments

DEFAULT_REGISTRY = Path(__file__).with_name("datasets.yaml")

Registry = Dict[str, Any]


def load_registry(path: str | Path = DEFAULT_REGISTRY) -> Registry:
    """Load ``path`` and index its synthetic datasets by id."""

    with Path(path).open(encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    synthetic = {}
    for entry in data.get("synthetic", []):
        synthetic[entry["id"]] = entry
    return {"synthetic": synthetic, "raw": data}


def generate_dataset(meta: Dict[str, Any]) -> Tuple[str, List[str]]:
    """Return the reference chromosome and its fragments for a registry entry."""

    params = meta.get("generator", {}).get("params", {})
    seed = params.get("seed")
    chromosome = generate_chromosome(int(params.get("chromosome_length", 1000)), seed=seed)
    fragments = generate_fragments(
        chromosome,
        int(params.get("min_fragment_length", 40)),
        int(params.get("max_fragment_length", 60)),
        seed=seed,
    )
    return chromosome, fragments
