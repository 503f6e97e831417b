"""Tests for the Hamiltonian path search and path walking."""

import pytest

from unichrom_core.graph import SequenceGraph
from unichrom_core.overlap import build_sequence_graph
from unichrom_core.path import find_hamiltonian_path, walk_path


def sequences(path):
    return [node.sequence for node in path]


def test_path_through_chain():
    graph = SequenceGraph()
    graph.add_overlap("r", "a", 1)
    graph.add_overlap("a", "t", 1)

    assert sequences(find_hamiltonian_path(graph)) == ["r", "a", "t"]


def test_backtracks_out_of_early_terminal():
    """Reaching the terminal node too early must not end the search."""
    graph = SequenceGraph()
    graph.add_overlap("r", "t", 0)
    graph.add_overlap("r", "x", 0)
    graph.add_overlap("x", "y", 0)
    graph.add_overlap("y", "t", 0)

    assert sequences(find_hamiltonian_path(graph)) == ["r", "x", "y", "t"]


def test_backtracking_unmarks_dead_ends():
    """A node abandoned on one branch can be used on the next."""
    graph = SequenceGraph()
    graph.add_overlap("r", "b", 0)
    graph.add_overlap("b", "t", 0)
    graph.add_overlap("r", "a", 0)
    graph.add_overlap("a", "b", 0)

    assert sequences(find_hamiltonian_path(graph)) == ["r", "a", "b", "t"]


def test_visited_nodes_are_not_revisited():
    graph = SequenceGraph()
    graph.add_overlap("a", "b", 0)
    graph.add_overlap("b", "a", 0)
    graph.add_overlap("b", "t", 0)

    path = find_hamiltonian_path(graph, graph.node("a"))

    assert sequences(path) == ["a", "b", "t"]


def test_pure_cycle_has_no_path():
    graph = SequenceGraph()
    graph.add_overlap("a", "b", 0)
    graph.add_overlap("b", "a", 0)

    assert find_hamiltonian_path(graph) is None
    assert find_hamiltonian_path(graph, graph.node("a")) is None


def test_diamond_has_no_path():
    graph = SequenceGraph()
    graph.add_overlap("r", "a", 0)
    graph.add_overlap("r", "b", 0)
    graph.add_overlap("a", "t", 0)
    graph.add_overlap("b", "t", 0)

    assert find_hamiltonian_path(graph) is None


def test_single_node_path():
    graph = SequenceGraph()
    graph.add_sequence("ACGT")

    assert sequences(find_hamiltonian_path(graph)) == ["ACGT"]


def test_long_chain_does_not_recurse():
    graph = SequenceGraph()
    names = [f"n{i}" for i in range(5000)]
    for parent, child in zip(names, names[1:]):
        graph.add_overlap(parent, child, 1)

    path = find_hamiltonian_path(graph)

    assert len(path) == 5000
    assert walk_path(path) == "n" * 4999 + "n4999"


def test_walk_uses_traversed_edge_offsets():
    graph = build_sequence_graph(
        {"ATTAGACCTG", "CCTGCCGGAA", "AGACCTGCCG", "GCCGGAATAC"}
    )

    path = find_hamiltonian_path(graph)

    assert sequences(path) == ["ATTAGACCTG", "AGACCTGCCG", "CCTGCCGGAA", "GCCGGAATAC"]
    assert walk_path(path) == "ATTAGACCTGCCGGAATAC"


def test_walk_empty_path():
    assert walk_path([]) == ""


def test_walk_rejects_non_edges():
    graph = SequenceGraph()
    a = graph.add_sequence("a")
    b = graph.add_sequence("b")

    with pytest.raises(ValueError):
        walk_path([a, b])
