"""
Floyd-Warshall all-pairs shortest paths in O(V^3).

Iteration ``k`` is computed entirely from a frozen snapshot of iteration
``k - 1``: every row is rebuilt into a fresh matrix, so an update made while
processing ``k`` is never read back during the same ``k``.

Two choices differ from a textbook seeding step:
- parallel edges between the same ordered pair seed the matrix with their
  minimum weight;
- a negative diagonal entry after the last iteration means the graph holds a
  negative cycle, and the run returns None.
"""

import logging
from typing import List, Optional, Tuple

from .base import GraphAlgorithm
from .models import AllPairsShortestPaths
from .utils import is_better_cost

logger = logging.getLogger(__name__)

Matrix = List[List[Optional[float]]]
PredecessorMatrix = List[List[Optional[int]]]


class FloydWarshallFinder(GraphAlgorithm[Optional[AllPairsShortestPaths]]):
    """Floyd-Warshall with per-iteration double buffering."""

    operation = "floyd_warshall"

    def _seed(self) -> Tuple[Matrix, PredecessorMatrix]:
        n = self.graph.n_nodes
        distances: Matrix = [[None] * n for _ in range(n)]
        predecessors: PredecessorMatrix = [[None] * n for _ in range(n)]
        for i in range(n):
            distances[i][i] = 0

        for edge in self.graph.get_edges():
            i, j = edge.source, edge.destination
            if is_better_cost(edge.weight, distances[i][j]):
                distances[i][j] = edge.weight
                if i != j:
                    predecessors[i][j] = i
        return distances, predecessors

    def run(self) -> Optional[AllPairsShortestPaths]:
        """
        Compute every pairwise shortest distance.

        Returns:
            The predecessor and distance matrices, or None when the graph
            contains a negative cycle
        """
        n = self.graph.n_nodes

        with self._run_context() as metrics:
            distances, predecessors = self._seed()

            for k in range(n):
                self.memory_manager.check_memory()
                previous, previous_pred = distances, predecessors
                distances = [row[:] for row in previous]
                predecessors = [row[:] for row in previous_pred]
                row_k = previous[k]

                for i in range(n):
                    through_k = previous[i][k]
                    if i == k or through_k is None:
                        continue
                    current = distances[i]
                    for j in range(n):
                        if j == k or row_k[j] is None:
                            continue
                        candidate = through_k + row_k[j]
                        if is_better_cost(candidate, previous[i][j]):
                            current[j] = candidate
                            predecessors[i][j] = previous_pred[k][j]

            metrics.nodes_explored = n

            for i in range(n):
                if distances[i][i] < 0:
                    logger.debug("Negative cycle through node %d", i)
                    return None

        return AllPairsShortestPaths(predecessors, distances, metrics=metrics)
