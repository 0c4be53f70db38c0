"""
Greedy approximate vertex cover.

A single pass over nodes in id order: an uncovered node takes its first edge
(in adjacency order) to an uncovered neighbour into the cover, and both
endpoints become covered. The chosen edges form a maximal matching, so their
endpoints cover every edge and number at most twice the minimum cover.
"""

import logging
from typing import List

from ..models import Edge
from .base import GraphAlgorithm

logger = logging.getLogger(__name__)


class ApproxVertexCover(GraphAlgorithm[List[Edge]]):
    """2-approximation of minimum vertex cover."""

    operation = "approx_vertex_cover"

    def run(self) -> List[Edge]:
        adjacency = self.graph.adjacency
        covered = [False] * self.graph.n_nodes
        cover: List[Edge] = []

        with self._run_context() as metrics:
            for node, edges in enumerate(adjacency):
                if covered[node]:
                    continue
                for edge in edges:
                    if not covered[edge.destination]:
                        cover.append(edge)
                        covered[node] = True
                        covered[edge.destination] = True
                        break

            metrics.nodes_explored = self.graph.n_nodes
            logger.debug("Vertex cover picked %d edges", len(cover))

        return cover
