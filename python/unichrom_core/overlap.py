"""Overlap detection and overlap graph construction.

Two fragments can only be glued together when they overlap by more than half
the length of the fragment they are glued onto. Every ordered pair of
fragments is checked, so construction is quadratic in the number of fragments;
this is fine for the sparse, uniquely assemblable inputs the reconstructor is
meant for.
"""

from __future__ import annotations

import logging
import warnings
from typing import Iterable

from .graph import SequenceGraph

logger = logging.getLogger(__name__)


def sequence_overlap_index(base: str, candidate: str) -> int | None:
    """Return the index of ``base`` at which ``candidate`` can be overlaid.

    ``candidate`` has to be longer than half of ``base``. Starting from its
    first ``len(base) // 2 + 1`` characters, the prefix of ``candidate`` is
    extended one character at a time and the first extension that ``base``
    ends with is taken as the overlap. The result ``i`` satisfies
    ``base[:i] + candidate`` spelling both fragments. ``None`` means the
    fragments do not overlap.
    """

    half = len(base) // 2
    if len(candidate) <= half:
        return None

    for end in range(half + 2, len(candidate) + 1):
        if base.endswith(candidate[:end]):
            return len(base) - end

    return None


def build_sequence_graph(fragments: Iterable[str] | None) -> SequenceGraph | None:
    """Build the overlap graph of ``fragments``.

    Every fragment becomes a node and every overlapping ordered pair an edge.
    Returns ``None`` when there is nothing to build a graph from.
    """

    if fragments is None:
        return None
    if isinstance(fragments, str):
        raise TypeError("fragments must be a collection of strings, not a single str")

    fragment_list = list(fragments)
    unique = sorted(set(fragment_list))
    if not unique:
        return None
    if len(unique) < len(fragment_list):
        warnings.warn(
            f"{len(fragment_list) - len(unique)} duplicate fragments were collapsed",
            UserWarning,
            stacklevel=2,
        )

    graph = SequenceGraph()
    for base in unique:
        graph.add_sequence(base)
        for candidate in unique:
            if candidate == base:
                continue
            overlap = sequence_overlap_index(base, candidate)
            if overlap is not None:
                graph.add_overlap(base, candidate, overlap)

    logger.debug(
        "Built sequence graph with %d nodes and %d edges", len(graph), graph.edge_count
    )
    return graph
