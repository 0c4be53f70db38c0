"""
Core graph data structure with an adjacency list representation.

This module provides the Graph class that every algorithm in the package reads.
Nodes are dense integer ids in ``[0, n_nodes)`` and carry no payload. Each node
owns an ordered list of the edges leaving it, in insertion order.

Graphs are append-only: they are sized once at construction, then grown purely
by edge insertion. An undirected edge is stored as two independent directed
entries, so tagging one entry never affects the other.
"""

import logging
from copy import copy
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, Type, TypeVar

from .enums import Cardinal, GraphType
from .exceptions import GraphOperationError, NodeNotFoundError
from .models import DirectionalEdge, Edge, PlainEdge, validate_endpoint

logger = logging.getLogger(__name__)

# Weight given to edges added without an explicit one
DEFAULT_EDGE_WEIGHT = 1

E = TypeVar("E", bound=Edge)


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    edges: List[List[Edge]] = field(default_factory=list)
    in_deg: List[int] = field(default_factory=list)
    out_deg: List[int] = field(default_factory=list)
    edge_count: int = 0


class Graph(Generic[E]):
    """
    Weighted graph over dense integer node ids.

    Attributes:
        g_type (GraphType): Directed or undirected edge semantics
        edge_type (Type[Edge]): Edge variant created by ``add_edge``
    """

    def __init__(
        self,
        n_nodes: int,
        g_type: GraphType = GraphType.DIRECTED,
        edge_type: Type[E] = PlainEdge,
    ):
        """
        Allocate ``n_nodes`` empty adjacency lists.

        Args:
            n_nodes (int): Number of nodes, fixed for the lifetime of the graph
            g_type (GraphType): Edge semantics (default: directed)
            edge_type (Type[Edge]): Edge variant to create (default: PlainEdge)
        """
        validate_endpoint("n_nodes", n_nodes)
        if not isinstance(g_type, GraphType):
            raise TypeError("g_type must be a GraphType enum")
        self._n_nodes = n_nodes
        self.g_type = g_type
        self.edge_type = edge_type
        self._state = GraphState(
            edges=[[] for _ in range(n_nodes)],
            in_deg=[0] * n_nodes,
            out_deg=[0] * n_nodes,
        )

    def __repr__(self) -> str:
        return (
            f"Graph(n_nodes={self._n_nodes}, n_edges={self.n_edges}, "
            f"g_type={self.g_type.name}, edge_type={self.edge_type.__name__})"
        )

    @property
    def n_nodes(self) -> int:
        """Number of nodes in the graph."""
        return self._n_nodes

    @property
    def n_edges(self) -> int:
        """Number of logical edges; an undirected edge counts once."""
        return self._state.edge_count

    @property
    def adjacency(self) -> List[List[E]]:
        """Adjacency lists indexed by source node. Callers must not mutate them."""
        return self._state.edges

    @property
    def is_directed(self) -> bool:
        return self.g_type is GraphType.DIRECTED

    def nodes(self) -> range:
        return range(self._n_nodes)

    def has_node(self, node: int) -> bool:
        """Check if a node id lies inside the graph."""
        return isinstance(node, int) and not isinstance(node, bool) and 0 <= node < self._n_nodes

    def validate_node(self, node: int) -> None:
        """Raise NodeNotFoundError unless ``node`` is a valid node id."""
        if not self.has_node(node):
            raise NodeNotFoundError(node, self._n_nodes)

    def _insert_edge(self, edge: E) -> E:
        self._state.edges[edge.source].append(edge)
        self._state.in_deg[edge.destination] += 1
        self._state.out_deg[edge.source] += 1
        return edge

    def create_edge(
        self, src: int, dst: int, weight: float = DEFAULT_EDGE_WEIGHT
    ) -> Tuple[E, Optional[E]]:
        """
        Add one logical edge and return the stored entries.

        For an undirected graph the reverse entry is a copy of the forward edge
        with swapped endpoints and the same weight.

        Args:
            src (int): Source node
            dst (int): Destination node
            weight (float): Edge weight (default: 1)

        Returns:
            Tuple[Edge, Optional[Edge]]: The forward entry and, for undirected
                graphs, the reverse entry (None for directed graphs)

        Raises:
            NodeNotFoundError: If either endpoint is outside the graph
        """
        self.validate_node(src)
        self.validate_node(dst)

        forward = self._insert_edge(self.edge_type(src, dst, weight))
        reverse = None
        if self.g_type is GraphType.UNDIRECTED:
            reverse = copy(forward)
            reverse.source = dst
            reverse.destination = src
            self._insert_edge(reverse)
        self._state.edge_count += 1
        return forward, reverse

    def add_edge(self, src: int, dst: int, weight: float = DEFAULT_EDGE_WEIGHT) -> E:
        """Add one logical edge and return the stored forward entry."""
        forward, _ = self.create_edge(src, dst, weight)
        return forward

    def add_grid_edge(
        self, src: int, dst: int, weight: float = DEFAULT_EDGE_WEIGHT, vertical: bool = False
    ) -> E:
        """
        Add an edge between neighbouring grid cells, tagging its direction.

        The forward entry moves SOUTH when vertical and EAST otherwise; the
        reverse entry of an undirected graph moves the opposite way.

        Raises:
            GraphOperationError: If the graph does not hold DirectionalEdge entries
        """
        if not issubclass(self.edge_type, DirectionalEdge):
            raise GraphOperationError(
                f"Grid edges require DirectionalEdge, graph holds {self.edge_type.__name__}"
            )
        forward, reverse = self.create_edge(src, dst, weight)
        forward.direction = Cardinal.SOUTH if vertical else Cardinal.EAST
        if reverse is not None:
            reverse.direction = forward.direction.opposite
        return forward

    def add_edges(self, edges: Iterable[Sequence[float]]) -> None:
        """Add every ``(src, dst[, weight])`` entry in order."""
        for entry in edges:
            self.add_edge(*entry)

    def edges(self, node: int) -> Sequence[E]:
        """Edges leaving ``node``, in insertion order."""
        self.validate_node(node)
        return tuple(self._state.edges[node])

    def get_edges(self) -> Iterator[E]:
        """Every adjacency entry, grouped by source node."""
        for adjacency in self._state.edges:
            yield from adjacency

    def get_neighbors(self, node: int) -> List[int]:
        """Destinations of the edges leaving ``node``, in insertion order."""
        return [edge.destination for edge in self.edges(node)]

    def in_degree(self, node: int) -> int:
        """Number of adjacency entries ending in ``node``."""
        self.validate_node(node)
        return self._state.in_deg[node]

    def out_degree(self, node: int) -> int:
        """Number of adjacency entries starting from ``node``."""
        self.validate_node(node)
        return self._state.out_deg[node]

    @classmethod
    def from_edges(
        cls,
        n_nodes: int,
        edges: Iterable[Sequence[float]],
        g_type: GraphType = GraphType.DIRECTED,
        edge_type: Type[E] = PlainEdge,
    ) -> "Graph[E]":
        """Create a Graph from a node count and a ``(src, dst[, weight])`` list."""
        graph = cls(n_nodes, g_type, edge_type)
        graph.add_edges(edges)
        logger.debug("Built %r", graph)
        return graph
