"""
Edge models for the graph engine.

Two interchangeable edge variants are provided. ``PlainEdge`` carries only the
endpoints and the weight; ``DirectionalEdge`` adds a compass direction tag used
by grid-derived graphs to print turn-by-turn routes.
"""

from dataclasses import dataclass

from ..enums import Cardinal
from .base import validate_endpoint, validate_weight


@dataclass
class PlainEdge:
    """
    Weighted edge between two nodes.

    Attributes:
        source (int): Node the edge starts from
        destination (int): Node the edge ends in
        weight (float): Signed edge weight
    """

    source: int
    destination: int
    weight: float = 1

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_endpoint("source", self.source)
        validate_endpoint("destination", self.destination)
        validate_weight(self.weight)


@dataclass
class DirectionalEdge(PlainEdge):
    """
    Weighted edge tagged with the compass direction it moves in.

    Attributes:
        direction (Cardinal): Direction of travel, NORTH unless set otherwise
    """

    direction: Cardinal = Cardinal.NORTH

    def __post_init__(self):
        """Validate edge after initialization."""
        super().__post_init__()
        if not isinstance(self.direction, Cardinal):
            raise TypeError("direction must be a Cardinal enum")
