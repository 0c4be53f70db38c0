"""
Data models for graph algorithm results.

This module provides the result structures returned by every algorithm:
- TraversalResult: BFS tree with hop distances
- DepthFirstForest: DFS forest with discover/finish timestamps
- ShortestPathTree: Dijkstra/Bellman-Ford tree with weighted distances
- AllPairsShortestPaths: Floyd-Warshall predecessor and distance matrices
- PerformanceMetrics: Container for algorithm performance metrics

Results are computed fresh per call and never persisted. Tree results unpack
like tuples so callers can write ``predecessors, distances = bfs(graph, 0)``.

Example:
    >>> tree = dijkstra(graph, 0)
    >>> tree.distances
    [0, 1, 3, 4, 7]
    >>> [edge.destination for edge in tree.path_to(4)]
    [1, 2, 3, 4]
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Dict, Iterator, List, Optional, Union

from ..exceptions import GraphOperationError, NodeNotFoundError
from ..models import Edge

# Distance recorded by BFS for nodes it never reached
UNREACHED = -1


@dataclass
class PerformanceMetrics:
    """
    Container for algorithm performance metrics.

    Attributes:
        operation: Name of the algorithm
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of nodes settled, visited or scanned
        max_memory_used: Peak memory usage during operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        >>> # ... run the algorithm ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }


class _UnpackMixin:
    """Lets a result dataclass unpack like the tuple of its public fields."""

    def __iter__(self) -> Iterator:
        for f in fields(self):  # type: ignore[arg-type]
            if f.compare:
                yield getattr(self, f.name)


class _PredecessorTree(_UnpackMixin, ABC):
    """Shared path reconstruction over a predecessor-edge array."""

    predecessors: List[Optional[Edge]]

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self.predecessors):
            raise NodeNotFoundError(node, len(self.predecessors))

    def predecessor_nodes(self) -> List[Optional[int]]:
        """Predecessor node of every node, None for roots and unreached nodes."""
        return [None if edge is None else edge.source for edge in self.predecessors]

    def path_to(self, node: int) -> List[Edge]:
        """
        Edges from the root of ``node``'s tree down to ``node``.

        Returns an empty list when ``node`` is itself a root.

        Raises:
            GraphOperationError: If ``node`` was not reached
        """
        self._check(node)
        if not self.is_reachable(node):
            raise GraphOperationError(f"Node {node} is not reachable from {self.root}")
        path = []
        edge = self.predecessors[node]
        while edge is not None:
            path.append(edge)
            edge = self.predecessors[edge.source]
        path.reverse()
        return path

    def route(self, node: int) -> str:
        """
        Turn-by-turn route to ``node`` as compass letters, e.g. ``"EESN"``.

        Only meaningful for graphs of direction-tagged edges.
        """
        letters = []
        for edge in self.path_to(node):
            direction = getattr(edge, "direction", None)
            if direction is None:
                raise GraphOperationError("route requires direction-tagged edges")
            letters.append(direction.value)
        return "".join(letters)

    @property
    def root(self) -> Optional[int]:
        return None

    @abstractmethod
    def is_reachable(self, node: int) -> bool:
        """True when ``node`` belongs to the tree."""


@dataclass
class TraversalResult(_PredecessorTree):
    """
    Breadth-first search tree.

    Attributes:
        predecessors: Edge used to discover each node (None for the source
            and unreached nodes)
        distances: Minimum number of edges from the source, ``UNREACHED``
            (-1) when there is no path
        source: Root of the tree
    """

    predecessors: List[Optional[Edge]]
    distances: List[int]
    source: int = field(compare=False)
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False, repr=False)

    @property
    def root(self) -> int:
        return self.source

    def is_reachable(self, node: int) -> bool:
        self._check(node)
        return self.distances[node] != UNREACHED


@dataclass
class DepthFirstForest(_PredecessorTree):
    """
    Depth-first search forest over the whole graph.

    Discover and finish times come from one clock shared by every tree, so
    for any two nodes the intervals ``[discovered, finished]`` are either
    nested or disjoint.

    Attributes:
        predecessors: Tree edge into each node (None for tree roots)
        discovered: Clock value when each node was first reached
        finished: Clock value when each node's edges were exhausted
    """

    predecessors: List[Optional[Edge]]
    discovered: List[int]
    finished: List[int]
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False, repr=False)

    def is_reachable(self, node: int) -> bool:
        self._check(node)
        return True

    def roots(self) -> List[int]:
        """Roots of the forest in discovery order."""
        roots = [node for node, edge in enumerate(self.predecessors) if edge is None]
        return sorted(roots, key=lambda node: self.discovered[node])

    def is_ancestor(self, ancestor: int, node: int) -> bool:
        """True when ``node`` lies in the subtree rooted at ``ancestor``."""
        self._check(ancestor)
        self._check(node)
        return (
            self.discovered[ancestor] <= self.discovered[node]
            and self.finished[node] <= self.finished[ancestor]
        )


@dataclass
class ShortestPathTree(_PredecessorTree):
    """
    Single-source shortest path tree.

    Attributes:
        predecessors: Last edge on a shortest path to each node (None for the
            source and unreachable nodes)
        distances: Shortest distance from the source, None when unreachable
        source: Root of the tree
    """

    predecessors: List[Optional[Edge]]
    distances: List[Optional[float]]
    source: int = field(compare=False)
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False, repr=False)

    @property
    def root(self) -> int:
        return self.source

    def is_reachable(self, node: int) -> bool:
        self._check(node)
        return self.distances[node] is not None


@dataclass
class AllPairsShortestPaths(_UnpackMixin):
    """
    All-pairs shortest paths.

    Attributes:
        predecessors: ``predecessors[i][j]`` is the node preceding ``j`` on a
            shortest path from ``i``; None on the diagonal and when unreachable
        distances: ``distances[i][j]`` is the shortest distance from ``i`` to
            ``j``, None when unreachable
    """

    predecessors: List[List[Optional[int]]]
    distances: List[List[Optional[float]]]
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.distances)

    def path(self, source: int, target: int) -> List[int]:
        """
        Node sequence of a shortest path from ``source`` to ``target``.

        Raises:
            GraphOperationError: If ``target`` is unreachable from ``source``
        """
        n = len(self.distances)
        for node in (source, target):
            if not 0 <= node < n:
                raise NodeNotFoundError(node, n)
        if self.distances[source][target] is None:
            raise GraphOperationError(f"Node {target} is not reachable from {source}")
        nodes = [target]
        while nodes[-1] != source:
            previous = self.predecessors[source][nodes[-1]]
            if previous is None or len(nodes) > n:
                raise GraphOperationError(f"Broken predecessor chain from {source} to {target}")
            nodes.append(previous)
        nodes.reverse()
        return nodes
