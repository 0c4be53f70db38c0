"""
Core domain models package for the graph engine.

This package provides the edge capability protocol and its concrete variants.
"""

from .base import Edge, validate_endpoint, validate_weight
from .edge import DirectionalEdge, PlainEdge

__all__ = [
    # Protocol and validation
    "Edge",
    "validate_endpoint",
    "validate_weight",
    # Edge variants
    "PlainEdge",
    "DirectionalEdge",
]
