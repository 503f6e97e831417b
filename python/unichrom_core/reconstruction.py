"""Reconstruct a chromosome that has been uniquely split into fragments.

The fragments must fulfil two properties:

- all of them can be glued together, in exactly one way, into one chromosome;
- two fragments can only be glued together if they overlap by more than half
  their length.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, Tuple, Union

from .graph import SequenceGraph
from .overlap import build_sequence_graph
from .path import find_hamiltonian_path, walk_path

logger = logging.getLogger(__name__)


class NoUniqueAssembly(ValueError):
    """The fragments do not assemble into exactly one chromosome."""


class EmptyFragmentSetError(NoUniqueAssembly):
    """There were no fragments to assemble."""


class MalformedGraphError(NoUniqueAssembly):
    """The overlap graph lacks a unique root or a unique terminal node."""


class NoHamiltonianPathError(NoUniqueAssembly):
    """No path from the root visits every fragment exactly once."""


def reconstruct_from_graph(graph: SequenceGraph) -> str:
    """Spell the chromosome encoded by ``graph``.

    Raises :class:`MalformedGraphError` or :class:`NoHamiltonianPathError`.
    """

    root = graph.root()
    if root is None:
        raise MalformedGraphError("graph has no unique root fragment")
    if graph.terminal_node() is None:
        raise MalformedGraphError("graph has no unique terminal fragment")

    path = find_hamiltonian_path(graph, root)
    if path is None:
        raise NoHamiltonianPathError(
            f"no path from the root visits all {len(graph)} fragments"
        )
    return walk_path(path)


def assemble_chromosome(
    fragments: Iterable[str] | None,
    *,
    do_time: bool = False,
) -> Union[str, Tuple[str, float]]:
    """Reconstruct the chromosome, raising a :class:`NoUniqueAssembly` on failure."""

    if do_time:
        start = time.time()
    graph = build_sequence_graph(fragments)
    if graph is None:
        raise EmptyFragmentSetError("no fragments supplied")
    chromosome = reconstruct_from_graph(graph)
    if do_time:
        return chromosome, time.time() - start
    return chromosome


def reconstruct_chromosome(fragments: Iterable[str] | None) -> str | None:
    """Reconstruct the chromosome represented by ``fragments``.

    Returns ``None`` when no unique chromosome can be found.
    """

    try:
        return assemble_chromosome(fragments)
    except NoUniqueAssembly as exc:
        logger.debug("Reconstruction failed: %s", exc)
        return None
