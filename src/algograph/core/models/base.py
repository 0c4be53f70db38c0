"""
Core domain models base module for the graph engine.

This module provides the edge capability protocol and the validation helpers
shared by the concrete edge variants.
"""

import math
from typing import Protocol, runtime_checkable


@runtime_checkable
class Edge(Protocol):
    """
    Capability every edge representation must provide.

    Algorithms only read ``source``, ``destination`` and ``weight``. The graph
    writes ``source`` and ``destination`` when it synthesises the reverse entry
    of an undirected edge from a copy of the forward one.
    """

    source: int
    destination: int
    weight: float


def validate_endpoint(name: str, value: int) -> None:
    """Validate that an edge endpoint is a non-negative integer node id."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer node id")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_weight(weight: float) -> None:
    """Validate that an edge weight is a finite real number."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise TypeError("weight must be a numeric value")
    if math.isnan(weight) or math.isinf(weight):
        raise ValueError("Edge weight must be finite number")
