"""Core utilities for unique chromosome reconstruction."""

from .graph import Node, SequenceGraph
from .overlap import (
    sequence_overlap_index,
    build_sequence_graph,
)
from .path import (
    find_hamiltonian_path,
    walk_path,
)
from .reconstruction import (
    NoUniqueAssembly,
    EmptyFragmentSetError,
    MalformedGraphError,
    NoHamiltonianPathError,
    reconstruct_from_graph,
    assemble_chromosome,
    reconstruct_chromosome,
)
from .validation import validate_chromosome

__all__ = [
    "Node",
    "SequenceGraph",
    "sequence_overlap_index",
    "build_sequence_graph",
    "find_hamiltonian_path",
    "walk_path",
    "NoUniqueAssembly",
    "EmptyFragmentSetError",
    "MalformedGraphError",
    "NoHamiltonianPathError",
    "reconstruct_from_graph",
    "assemble_chromosome",
    "reconstruct_chromosome",
    "validate_chromosome",
]
