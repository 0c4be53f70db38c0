"""
Algograph - Weighted graph engine with traversal and shortest path algorithms

This package provides an adjacency-list graph over dense integer node ids and
the algorithms built on it:

- Breadth-first and depth-first traversals
- Dijkstra (over an indexed binary min-heap), Bellman-Ford and Floyd-Warshall
- A greedy 2-approximate vertex cover

For more information, please see DESIGN.md.
"""

__version__ = "0.1.0"
__author__ = "Algograph Team"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("Algograph requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.enums import GraphType
from .core.graph import Graph
from .core.models import DirectionalEdge, PlainEdge
from .core.algorithms import (
    approx_vertex_cover,
    bellman_ford,
    bfs,
    dfs,
    dijkstra,
    floyd_warshall,
)

__all__ = [
    "Graph",
    "GraphType",
    "PlainEdge",
    "DirectionalEdge",
    "bfs",
    "dfs",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "approx_vertex_cover",
]
