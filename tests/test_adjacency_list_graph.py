"""
Unit tests for AdjacencyListGraph.
"""

import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from errors import NodeIndexError
from nodes import Edge, Node


def test_node_edge_operations():
    node = Node(0)

    node.add_edge(2, 2.0)
    node.add_edge(1, 1.0)
    assert node.num_edges() == 2

    assert node.get_edge(1) == Edge(0, 1, 1.0)
    assert node.get_edge(3) is None

    assert [e.dst for e in node.edge_list()] == [2, 1]
    assert [e.dst for e in node.ordered_edge_list()] == [1, 2]

    node.remove_edge(1)
    assert node.num_edges() == 1
    node.remove_edge(1)  # already gone
    assert node.num_edges() == 1


def test_add_nodes_and_edges():
    g = AdjacencyListGraph(3)

    g.insert_edge(0, 1, 1.0)
    g.insert_edge(0, 2, 2.0)
    g.insert_edge(1, 2, 3.0)

    assert g.node_count() == 3
    assert len(g) == 3
    assert g.has_edge(0, 1)
    assert not g.has_edge(1, 0)  # directed
    assert g.edge(1, 2) == Edge(1, 2, 3.0)
    assert g.edge(2, 1) is None
    assert g.edges_of(2) == []


def test_insert_edge_overwrites_existing_weight():
    """A second edge to the same neighbour replaces the first."""
    g = AdjacencyListGraph(2)

    g.insert_edge(0, 1, 5.0)
    g.insert_edge(0, 1, 2.0)

    assert g.edge(0, 1) == Edge(0, 1, 2.0)
    assert g.node(0).num_edges() == 1
    assert len(g.all_edges()) == 1


def test_undirected_edges_are_mirrored():
    g = AdjacencyListGraph(2, undirected=True)

    g.insert_edge(0, 1, 1.5)
    assert g.has_edge(0, 1)
    assert g.has_edge(1, 0)
    assert g.edge(1, 0) == Edge(1, 0, 1.5)

    g.remove_edge(0, 1)
    assert not g.has_edge(0, 1)
    assert not g.has_edge(1, 0)


def test_remove_missing_edge_is_noop():
    g = AdjacencyListGraph(2)
    g.remove_edge(0, 1)
    assert g.all_edges() == []


def test_out_of_range_indices_raise():
    g = AdjacencyListGraph(2)

    with pytest.raises(NodeIndexError) as excinfo:
        g.insert_edge(0, 2, 1.0)
    assert excinfo.value.indices == (0, 2)
    assert excinfo.value.node_count == 2
    assert "from: 0, to: 2" in str(excinfo.value)

    with pytest.raises(NodeIndexError):
        g.remove_edge(-1, 0)
    with pytest.raises(NodeIndexError):
        g.edge(5, 0)
    # builtin IndexError also catches it
    with pytest.raises(IndexError):
        g.edge(0, 9)

    assert g.all_edges() == []


def test_has_edge_is_false_for_out_of_range():
    g = AdjacencyListGraph(1)
    assert not g.has_edge(0, 1)
    assert not g.has_edge(3, 3)


def test_empty_graph_rejects_every_index():
    g = AdjacencyListGraph()
    assert g.node_count() == 0
    with pytest.raises(NodeIndexError):
        g.edge(0, 1)


def test_insert_node_appends_with_next_index():
    g = AdjacencyListGraph(2)

    node = g.insert_node("C")

    assert node.index == 2
    assert node.label == "C"
    assert g.node_count() == 3
    assert g.node(2) is node
    g.insert_edge(2, 0, 1.0)
    assert g.has_edge(2, 0)


def test_self_loops_are_allowed():
    g = AdjacencyListGraph(1, undirected=True)
    assert not g.has_edge(0, 0)

    g.insert_edge(0, 0, 1.0)

    assert g.has_edge(0, 0)
    assert g.node(0).num_edges() == 1


def test_edges_of_ordered_and_unordered_views():
    g = AdjacencyListGraph(4)
    g.insert_edge(0, 3, 1.0)
    g.insert_edge(0, 1, 1.0)
    g.insert_edge(0, 2, 1.0)

    assert [e.dst for e in g.edges_of(0)] == [1, 2, 3]
    assert [e.dst for e in g.edges_of(0, ordered=False)] == [3, 1, 2]
    # stable without mutation in between
    assert g.edges_of(0, ordered=False) == g.edges_of(0, ordered=False)

    with pytest.raises(NodeIndexError):
        g.edges_of(4)


def test_all_edges_concatenates_nodes_in_order():
    g = AdjacencyListGraph.from_edges(3, [(2, 0, 1.0), (0, 2, 2.0), (0, 1, 3.0)])

    assert g.all_edges(ordered=True) == [
        Edge(0, 1, 3.0),
        Edge(0, 2, 2.0),
        Edge(2, 0, 1.0),
    ]
    assert len(g.all_edges()) == 3


def test_nodes_returns_copy():
    g = AdjacencyListGraph(2)

    nodes = g.nodes()
    nodes.clear()

    # internal structure must remain intact
    assert g.node_count() == 2


def test_nan_weight_is_rejected():
    g = AdjacencyListGraph(2, undirected=True)

    with pytest.raises(ValueError):
        g.insert_edge(0, 1, math.nan)

    assert g.all_edges() == []


def test_infinite_weights_are_accepted():
    g = AdjacencyListGraph(2)

    g.insert_edge(0, 1, math.inf)
    g.insert_edge(1, 0, -math.inf)

    assert g.edge(0, 1).weight == math.inf
    assert g.edge(1, 0).weight == -math.inf
