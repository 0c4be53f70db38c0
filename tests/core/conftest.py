"""Shared test fixtures."""

import random
from itertools import combinations
from typing import List, Optional, Tuple

import pytest

from algograph.core.enums import GraphType
from algograph.core.graph import Graph
from algograph.core.models import DirectionalEdge


@pytest.fixture
def weighted_undirected_graph() -> Graph:
    """
    Fixture providing a five node undirected graph:

    0 --1-- 1 --5-- 3 --3-- 4
     \\      |      /
      4     2     1
       \\    |    /
         --- 2 ---
    """
    return Graph.from_edges(
        5,
        [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 1), (3, 4, 3)],
        GraphType.UNDIRECTED,
    )


@pytest.fixture
def negative_edge_graph() -> Graph:
    """Fixture providing a directed graph with one negative edge and no cycle."""
    return Graph.from_edges(3, [(0, 1, 4), (1, 2, -2), (0, 2, 5)])


@pytest.fixture
def negative_cycle_graph() -> Graph:
    """Fixture providing a two node directed graph whose only cycle weighs -1."""
    return Graph.from_edges(2, [(0, 1, 1), (1, 0, -2)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Fixture providing a directed graph with two components and an isolated node."""
    return Graph.from_edges(6, [(0, 1, 2), (1, 2, 2), (0, 2, 5), (3, 4, 1)])


@pytest.fixture
def grid_graph() -> Graph:
    """
    Fixture providing a 2x3 grid of direction-tagged cells:

    0 - 1 - 2
    |       |
    3 - 4 - 5
    """
    graph = Graph(6, GraphType.UNDIRECTED, DirectionalEdge)
    graph.add_grid_edge(0, 1)
    graph.add_grid_edge(1, 2)
    graph.add_grid_edge(0, 3, vertical=True)
    graph.add_grid_edge(2, 5, vertical=True)
    graph.add_grid_edge(3, 4)
    graph.add_grid_edge(4, 5)
    return graph


def random_graph(
    seed: int,
    n_nodes: int,
    n_edges: int,
    g_type: GraphType = GraphType.DIRECTED,
    weights: Tuple[int, int] = (0, 9),
    unit: bool = False,
) -> Graph:
    """Seeded random graph; parallel edges and self-loops may occur."""
    rng = random.Random(seed)
    graph = Graph(n_nodes, g_type)
    for _ in range(n_edges):
        weight = 1 if unit else rng.randint(*weights)
        graph.add_edge(rng.randrange(n_nodes), rng.randrange(n_nodes), weight)
    return graph


def minimum_vertex_cover_size(graph: Graph) -> int:
    """Brute-force size of a minimum vertex cover, for small graphs only."""
    edges = [(edge.source, edge.destination) for edge in graph.get_edges()]
    for size in range(graph.n_nodes + 1):
        for candidate in combinations(range(graph.n_nodes), size):
            chosen = set(candidate)
            if all(u in chosen or v in chosen for u, v in edges):
                return size
    return graph.n_nodes


def reference_distances(graph: Graph, source: int) -> List[Optional[float]]:
    """Distances by exhaustive relaxation until nothing changes."""
    distances: List[Optional[float]] = [None] * graph.n_nodes
    distances[source] = 0
    changed = True
    while changed:
        changed = False
        for edge in graph.get_edges():
            if distances[edge.source] is None:
                continue
            candidate = distances[edge.source] + edge.weight
            if distances[edge.destination] is None or candidate < distances[edge.destination]:
                distances[edge.destination] = candidate
                changed = True
    return distances
