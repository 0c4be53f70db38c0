"""
Breadth-first and depth-first traversals.

Both traversals share the three-colour scheme of ``Color``: WHITE nodes are
unvisited, GREY nodes are discovered but not finished, BLACK nodes are done.
Neither traversal has a failure mode once its input is valid.
"""

import logging
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from ..enums import Color
from ..models import Edge
from .base import GraphAlgorithm
from .models import UNREACHED, DepthFirstForest, TraversalResult

logger = logging.getLogger(__name__)


class BreadthFirstSearch(GraphAlgorithm[TraversalResult]):
    """
    Breadth-first search from a single source in O(V + E).

    For every reached node the recorded distance is the minimum number of
    edges from the source. The predecessor edge, not just the predecessor
    node, is kept so callers can rebuild the literal path.
    """

    operation = "bfs"

    def run(self, source: int) -> TraversalResult:
        self.validate_source(source)
        n = self.graph.n_nodes
        adjacency = self.graph.adjacency

        colors = [Color.WHITE] * n
        distances = [UNREACHED] * n
        predecessors: List[Optional[Edge]] = [None] * n
        queue: Deque[int] = deque([source])

        with self._run_context() as metrics:
            colors[source] = Color.GREY
            distances[source] = 0
            explored = 0

            while queue:
                self.memory_manager.check_memory()
                current = queue.popleft()
                explored += 1
                for edge in adjacency[current]:
                    neighbor = edge.destination
                    if colors[neighbor] is Color.WHITE:
                        colors[neighbor] = Color.GREY
                        distances[neighbor] = distances[current] + 1
                        predecessors[neighbor] = edge
                        queue.append(neighbor)
                colors[current] = Color.BLACK

            metrics.nodes_explored = explored
            logger.debug("BFS from %d reached %d of %d nodes", source, explored, n)

        return TraversalResult(predecessors, distances, source=source, metrics=metrics)


class DepthFirstSearch(GraphAlgorithm[DepthFirstForest]):
    """
    Depth-first search over the whole graph, producing a forest.

    Roots are taken in node order. The visit is driven by an explicit stack
    of edge iterators, which numbers discover and finish times exactly as the
    recursive formulation does without being bound by the recursion limit.
    """

    operation = "dfs"

    def run(self) -> DepthFirstForest:
        n = self.graph.n_nodes
        adjacency = self.graph.adjacency

        colors = [Color.WHITE] * n
        predecessors: List[Optional[Edge]] = [None] * n
        discovered = [0] * n
        finished = [0] * n
        clock = 0

        with self._run_context() as metrics:
            for root in range(n):
                if colors[root] is not Color.WHITE:
                    continue

                clock += 1
                discovered[root] = clock
                colors[root] = Color.GREY
                stack: List[Tuple[int, Iterator[Edge]]] = [(root, iter(adjacency[root]))]

                while stack:
                    self.memory_manager.check_memory()
                    node, edges = stack[-1]
                    for edge in edges:
                        neighbor = edge.destination
                        if colors[neighbor] is Color.WHITE:
                            predecessors[neighbor] = edge
                            clock += 1
                            discovered[neighbor] = clock
                            colors[neighbor] = Color.GREY
                            stack.append((neighbor, iter(adjacency[neighbor])))
                            break
                    else:
                        stack.pop()
                        colors[node] = Color.BLACK
                        clock += 1
                        finished[node] = clock

            metrics.nodes_explored = n

        return DepthFirstForest(predecessors, discovered, finished, metrics=metrics)
