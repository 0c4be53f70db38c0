"""
Tests for core graph functionality.
"""

import pytest

from algograph.core.enums import Cardinal, GraphType
from algograph.core.exceptions import GraphOperationError, NodeNotFoundError
from algograph.core.graph import Graph
from algograph.core.models import DirectionalEdge, PlainEdge


def test_graph_creation():
    """Test that a new graph has empty adjacency lists."""
    graph = Graph(4)

    assert graph.n_nodes == 4
    assert graph.n_edges == 0
    assert graph.is_directed
    assert all(graph.edges(node) == () for node in graph.nodes())
    assert list(graph.get_edges()) == []


def test_empty_graph():
    """Test a graph without nodes."""
    graph = Graph(0, GraphType.UNDIRECTED)
    assert graph.n_nodes == 0
    assert not graph.has_node(0)


def test_directed_add_edge():
    """Test directed insertion and degree bookkeeping."""
    graph = Graph(3)
    edge = graph.add_edge(0, 1, 2.5)

    assert edge == PlainEdge(0, 1, 2.5)
    assert graph.edges(0) == (edge,)
    assert graph.edges(1) == ()
    assert graph.n_edges == 1
    assert graph.out_degree(0) == 1
    assert graph.in_degree(1) == 1
    assert graph.in_degree(0) == 0


def test_undirected_add_edge_inserts_reverse():
    """Test that an undirected edge is stored in both adjacency lists."""
    graph = Graph(3, GraphType.UNDIRECTED)
    forward, reverse = graph.create_edge(0, 2, 7)

    assert forward == PlainEdge(0, 2, 7)
    assert reverse == PlainEdge(2, 0, 7)
    assert graph.edges(0) == (forward,)
    assert graph.edges(2) == (reverse,)
    assert graph.n_edges == 1
    assert graph.out_degree(0) == graph.in_degree(0) == 1
    assert graph.out_degree(2) == graph.in_degree(2) == 1


def test_directed_create_edge_has_no_reverse():
    """Test create_edge on a directed graph."""
    graph = Graph(2)
    forward, reverse = graph.create_edge(0, 1)
    assert forward.weight == 1
    assert reverse is None


def test_reverse_entry_is_independent_copy():
    """Test that mutating one entry of an undirected pair leaves the other alone."""
    graph = Graph(2, GraphType.UNDIRECTED, DirectionalEdge)
    forward, reverse = graph.create_edge(0, 1, 3)

    assert forward is not reverse
    forward.direction = Cardinal.EAST
    assert reverse.direction is Cardinal.NORTH


def test_source_invariant_holds_for_every_entry(weighted_undirected_graph):
    """Test that every stored edge sits in its source's adjacency list."""
    for node in weighted_undirected_graph.nodes():
        for edge in weighted_undirected_graph.edges(node):
            assert edge.source == node


def test_adjacency_preserves_insertion_order():
    """Test that edges come back in insertion order."""
    graph = Graph(4)
    graph.add_edges([(0, 3), (0, 1), (0, 2), (0, 1, 5)])
    assert graph.get_neighbors(0) == [3, 1, 2, 1]
    assert graph.n_edges == 4


def test_edge_count_counts_logical_edges(weighted_undirected_graph):
    """Test that undirected edges count once."""
    assert weighted_undirected_graph.n_edges == 6
    assert len(list(weighted_undirected_graph.get_edges())) == 12


@pytest.mark.parametrize("src, dst", [(0, 5), (5, 0), (-1, 0), (0, 3)])
def test_add_edge_out_of_bounds(src, dst):
    """Test that insertion outside the node range is a structured error."""
    graph = Graph(3)
    with pytest.raises(NodeNotFoundError):
        graph.add_edge(src, dst)
    assert graph.n_edges == 0
    assert list(graph.get_edges()) == []


def test_out_of_bounds_is_index_error():
    """Test that NodeNotFoundError is also an IndexError."""
    graph = Graph(1)
    with pytest.raises(IndexError, match="Node 4 not found in graph with 1 nodes"):
        graph.out_degree(4)


def test_invalid_construction():
    """Test construction argument validation."""
    with pytest.raises(ValueError):
        Graph(-1)
    with pytest.raises(TypeError):
        Graph(3, "directed")


def test_grid_edges_carry_directions(grid_graph):
    """Test direction tags on grid edges and their reverse entries."""
    east = grid_graph.edges(0)[0]
    south = grid_graph.edges(0)[1]
    assert (east.destination, east.direction) == (1, Cardinal.EAST)
    assert (south.destination, south.direction) == (3, Cardinal.SOUTH)

    west = grid_graph.edges(1)[0]
    north = grid_graph.edges(3)[0]
    assert (west.destination, west.direction) == (0, Cardinal.WEST)
    assert (north.destination, north.direction) == (0, Cardinal.NORTH)


def test_grid_edge_requires_directional_edges():
    """Test that plain graphs reject grid edges."""
    graph = Graph(2, GraphType.UNDIRECTED)
    with pytest.raises(GraphOperationError, match="require DirectionalEdge"):
        graph.add_grid_edge(0, 1)


def test_from_edges_defaults():
    """Test building from an edge list with and without weights."""
    graph = Graph.from_edges(3, [(0, 1), (1, 2, 4)])
    assert [edge.weight for edge in graph.get_edges()] == [1, 4]
    assert "n_edges=2" in repr(graph)
