"""Core graph functionality."""

from .enums import Cardinal, Color, GraphType
from .exceptions import (
    GraphOperationError,
    HeapContractError,
    NegativeEdgeError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import DirectionalEdge, Edge, PlainEdge
from .heap import IndexedMinHeap
from .graph import Graph
from .serialization import GraphSerializer

__all__ = [
    "Cardinal",
    "Color",
    "DirectionalEdge",
    "Edge",
    "Graph",
    "GraphOperationError",
    "GraphSerializer",
    "GraphType",
    "HeapContractError",
    "IndexedMinHeap",
    "NegativeEdgeError",
    "NodeNotFoundError",
    "PlainEdge",
    "ResourceNotFoundError",
    "ValidationError",
]
