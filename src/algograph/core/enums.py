"""
Enumerations for graph kinds, edge directions and traversal colours.

This module defines the core enumeration types used throughout the engine:
- GraphType: Directed or undirected edge semantics
- Cardinal: Compass direction tag carried by grid-derived edges
- Color: Three-colour visitation scheme shared by BFS and DFS
"""

from enum import Enum


class GraphType(Enum):
    """Edge semantics of a graph."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Cardinal(Enum):
    """
    Compass direction of a grid edge.

    The value is the single letter used when printing a turn-by-turn route.
    """

    NORTH = "N"
    SOUTH = "S"
    WEST = "W"
    EAST = "E"

    @property
    def opposite(self) -> "Cardinal":
        """Direction of the reverse edge."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Cardinal.NORTH: Cardinal.SOUTH,
    Cardinal.SOUTH: Cardinal.NORTH,
    Cardinal.WEST: Cardinal.EAST,
    Cardinal.EAST: Cardinal.WEST,
}


class Color(Enum):
    """Visitation state of a node during a traversal."""

    WHITE = "unvisited"
    GREY = "discovered"
    BLACK = "finished"
