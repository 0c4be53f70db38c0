"""
Single-source shortest path algorithms.

- Dijkstra: O((V + E) log V) over an ``IndexedMinHeap``; every weight must be
  non-negative, a negative weight aborts the run with ``NegativeEdgeError``.
- Bellman-Ford: O(V * E); negative weights are allowed and a negative cycle
  reachable from the source yields ``None`` instead of a tree.

Unreachable nodes have distance None in the returned tree.
"""

import logging
import math
from typing import List, Optional

from ..exceptions import NegativeEdgeError
from ..heap import IndexedMinHeap
from ..models import Edge
from .base import GraphAlgorithm
from .models import ShortestPathTree
from .utils import is_better_cost, relax

logger = logging.getLogger(__name__)

# Heap priority of nodes without a known distance; never used in arithmetic
UNKNOWN_PRIORITY = math.inf


class DijkstraFinder(GraphAlgorithm[ShortestPathTree]):
    """
    Dijkstra's algorithm with decrease-key.

    Every node is pushed into the heap up front. Once a node is extracted it
    is settled: its distance is final and it is never relaxed again.
    """

    operation = "dijkstra"

    def run(self, source: int) -> ShortestPathTree:
        """
        Compute the shortest path tree rooted at ``source``.

        Raises:
            NodeNotFoundError: If the source is outside the graph
            NegativeEdgeError: If a negative edge weight is met; nothing is returned
        """
        self.validate_source(source)
        n = self.graph.n_nodes
        adjacency = self.graph.adjacency

        distances: List[Optional[float]] = [None] * n
        predecessors: List[Optional[Edge]] = [None] * n
        settled = [False] * n
        heap = IndexedMinHeap()

        with self._run_context() as metrics:
            distances[source] = 0
            for node in range(n):
                heap.insert(node, 0 if node == source else UNKNOWN_PRIORITY)

            explored = 0
            while not heap.is_empty():
                self.memory_manager.check_memory()
                current = heap.delete_min()
                settled[current] = True
                explored += 1

                for edge in adjacency[current]:
                    if edge.weight < 0:
                        logger.debug("Aborting Dijkstra from %d: %r", source, edge)
                        raise NegativeEdgeError(edge.source, edge.destination, edge.weight)

                    neighbor = edge.destination
                    if settled[neighbor]:
                        continue
                    candidate = relax(distances[current], edge)
                    if candidate is not None and is_better_cost(candidate, distances[neighbor]):
                        distances[neighbor] = candidate
                        heap.change_prio(neighbor, candidate)
                        predecessors[neighbor] = edge

            metrics.nodes_explored = explored

        return ShortestPathTree(predecessors, distances, source=source, metrics=metrics)


class BellmanFordFinder(GraphAlgorithm[Optional[ShortestPathTree]]):
    """
    Bellman-Ford algorithm.

    Runs ``n_nodes - 1`` relaxation passes over every adjacency entry, then one
    verification pass. A further improvement found by the verification pass
    means a negative cycle is reachable from the source.
    """

    operation = "bellman_ford"

    def run(self, source: int) -> Optional[ShortestPathTree]:
        """
        Compute the shortest path tree rooted at ``source``.

        Returns:
            The tree, or None when a negative cycle is reachable from ``source``

        Raises:
            NodeNotFoundError: If the source is outside the graph
        """
        self.validate_source(source)
        n = self.graph.n_nodes

        distances: List[Optional[float]] = [None] * n
        predecessors: List[Optional[Edge]] = [None] * n

        with self._run_context() as metrics:
            distances[source] = 0
            explored = 0

            for i in range(n - 1):
                self.memory_manager.check_memory()
                explored += n
                relaxed = False

                for edge in self.graph.get_edges():
                    candidate = relax(distances[edge.source], edge)
                    if candidate is not None and is_better_cost(
                        candidate, distances[edge.destination]
                    ):
                        distances[edge.destination] = candidate
                        predecessors[edge.destination] = edge
                        relaxed = True

                # Later passes would not change anything
                if not relaxed:
                    logger.debug("Bellman-Ford from %d converged after %d passes", source, i + 1)
                    break

            metrics.nodes_explored = explored

            for edge in self.graph.get_edges():
                candidate = relax(distances[edge.source], edge)
                if candidate is not None and is_better_cost(
                    candidate, distances[edge.destination]
                ):
                    logger.debug("Negative cycle reachable from %d through %r", source, edge)
                    return None

        return ShortestPathTree(predecessors, distances, source=source, metrics=metrics)
