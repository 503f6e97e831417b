"""Sequence graph used to glue overlapping fragments back together.

A sequence graph has one node per fragment. An edge ``parent -> child``
carries the index of the parent's sequence at which the child's sequence can
be overlaid, so that ``parent[:offset] + child`` spells both fragments.
"""

from __future__ import annotations

from typing import Dict, Iterator, Set

import networkx as nx


class Node:
    """A single fragment together with its incoming and outgoing overlaps."""

    __slots__ = ("_sequence", "parents", "children")

    def __init__(self, sequence: str) -> None:
        self._sequence = sequence
        self.parents: Set[Node] = set()
        self.children: Dict[Node, int] = {}

    @property
    def sequence(self) -> str:
        return self._sequence

    def overlap_index_for(self, child: Node) -> int | None:
        """Return the offset at which ``child`` overlays this node, if it is a child."""

        return self.children.get(child)

    def __repr__(self) -> str:
        return (
            f"Node({self._sequence!r}, parents={len(self.parents)}, "
            f"children={len(self.children)})"
        )


class SequenceGraph:
    """Mapping of fragment values to their nodes, with edge bookkeeping."""

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    @property
    def edge_count(self) -> int:
        return sum(len(node.children) for node in self._nodes.values())

    def add_sequence(self, sequence: str) -> Node:
        """Add a node for ``sequence`` unless one exists, and return it."""

        node = self._nodes.get(sequence)
        if node is None:
            node = Node(sequence)
            self._nodes[sequence] = node
        return node

    def node(self, sequence: str) -> Node | None:
        return self._nodes.get(sequence)

    def add_overlap(self, parent: str, child: str, overlap_index: int) -> None:
        """Register the edge ``parent -> child`` on both endpoints.

        Missing nodes are created. An edge that already exists keeps its
        original offset.
        """

        if overlap_index < 0:
            raise ValueError(f"overlap index must be non-negative, got {overlap_index}")

        parent_node = self.add_sequence(parent)
        child_node = self.add_sequence(child)
        if child_node in parent_node.children:
            return

        parent_node.children[child_node] = overlap_index
        child_node.parents.add(parent_node)

    def _one_way_node(self, *, by_parents: bool) -> Node | None:
        found: Node | None = None
        for node in self._nodes.values():
            edges = node.parents if by_parents else node.children
            if edges:
                continue
            if found is not None:
                return None
            found = node
        return found

    def root(self) -> Node | None:
        """The only node without parents, or ``None`` if there are zero or several."""

        return self._one_way_node(by_parents=True)

    def terminal_node(self) -> Node | None:
        """The only node without children, or ``None`` if there are zero or several."""

        return self._one_way_node(by_parents=False)

    def to_networkx(self) -> nx.DiGraph:
        """Export the graph with fragment values as nodes and ``offset`` edge data."""

        graph = nx.DiGraph()
        for node in self._nodes.values():
            graph.add_node(node.sequence, length=len(node.sequence))
        for node in self._nodes.values():
            for child, offset in node.children.items():
                graph.add_edge(node.sequence, child.sequence, offset=offset)
        return graph
