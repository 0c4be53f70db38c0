"""
Graph algorithms over ``Graph``.

Each algorithm is a ``GraphAlgorithm`` subclass that borrows the graph
read-only; the module-level functions below are the usual entry points.
"""

from typing import List, Optional

from ..graph import Graph
from ..models import Edge
from .all_pairs import FloydWarshallFinder
from .base import GraphAlgorithm
from .models import (
    UNREACHED,
    AllPairsShortestPaths,
    DepthFirstForest,
    PerformanceMetrics,
    ShortestPathTree,
    TraversalResult,
)
from .shortest_path import BellmanFordFinder, DijkstraFinder
from .traversal import BreadthFirstSearch, DepthFirstSearch
from .vertex_cover import ApproxVertexCover

__all__ = [
    "UNREACHED",
    "GraphAlgorithm",
    "PerformanceMetrics",
    "TraversalResult",
    "DepthFirstForest",
    "ShortestPathTree",
    "AllPairsShortestPaths",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraFinder",
    "BellmanFordFinder",
    "FloydWarshallFinder",
    "ApproxVertexCover",
    "bfs",
    "dfs",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "approx_vertex_cover",
]


def bfs(graph: Graph, source: int) -> TraversalResult:
    """Breadth-first search tree rooted at ``source``."""
    return BreadthFirstSearch(graph).run(source)


def dfs(graph: Graph) -> DepthFirstForest:
    """Depth-first forest over the whole graph."""
    return DepthFirstSearch(graph).run()


def dijkstra(graph: Graph, source: int) -> ShortestPathTree:
    """Shortest path tree from ``source``; raises NegativeEdgeError on negative weights."""
    return DijkstraFinder(graph).run(source)


def bellman_ford(graph: Graph, source: int) -> Optional[ShortestPathTree]:
    """Shortest path tree from ``source``, or None if a negative cycle is reachable."""
    return BellmanFordFinder(graph).run(source)


def floyd_warshall(graph: Graph) -> Optional[AllPairsShortestPaths]:
    """All-pairs shortest paths, or None if the graph holds a negative cycle."""
    return FloydWarshallFinder(graph).run()


def approx_vertex_cover(graph: Graph) -> List[Edge]:
    """Edges of a maximal matching whose endpoints form a 2-approximate vertex cover."""
    return ApproxVertexCover(graph).run()
