"""Hamiltonian path search over a sequence graph and chromosome spelling."""

from __future__ import annotations

import logging
from typing import Iterator, List, Sequence, Set

from .graph import Node, SequenceGraph

logger = logging.getLogger(__name__)


def find_hamiltonian_path(
    graph: SequenceGraph,
    start: Node | None = None,
) -> List[Node] | None:
    """Find a path from ``start`` (the graph root by default) through every node.

    Depth-first search with backtracking, driven by an explicit stack of child
    iterators so deep graphs do not hit the recursion limit. Only a node
    without children can end the path, and only once every node is on it.
    Returns the first such path, or ``None`` if the search is exhausted.
    """

    if start is None:
        start = graph.root()
    if start is None:
        return None

    total = len(graph)
    path: List[Node] = []
    visited: Set[str] = set()
    # one iterator per node on the path that still has children to try
    pending: List[Iterator[Node]] = []

    def retreat() -> None:
        node = path.pop()
        visited.discard(node.sequence)

    def enter(node: Node) -> bool:
        path.append(node)
        visited.add(node.sequence)
        if node.children:
            pending.append(iter(node.children))
            return False
        if len(path) == total:
            return True
        # dead end before every node was visited
        retreat()
        return False

    if enter(start):
        return list(path)

    backtracks = 0
    while pending:
        child = next(pending[-1], None)
        if child is None:
            pending.pop()
            retreat()
            backtracks += 1
            continue
        if child.sequence in visited:
            continue
        if enter(child):
            logger.debug("Hamiltonian path found after %d backtracks", backtracks)
            return list(path)

    logger.debug("No Hamiltonian path from %r after %d backtracks", start.sequence, backtracks)
    return None


def walk_path(path: Sequence[Node]) -> str:
    """Spell the chromosome encoded by consecutive overlaps along ``path``."""

    if not path:
        return ""

    pieces: List[str] = []
    for parent, child in zip(path, path[1:]):
        overlap_index = parent.overlap_index_for(child)
        if overlap_index is None:
            raise ValueError(
                f"{child.sequence!r} is not a child of {parent.sequence!r}"
            )
        pieces.append(parent.sequence[:overlap_index])

    # terminal sequence
    pieces.append(path[-1].sequence)
    return "".join(pieces)
