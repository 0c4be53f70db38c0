"""Graph serialization and deserialization operations.

This module converts between ``Graph`` and the edge-list document the engine
consumes from its collaborators:

    {"n_nodes": 5, "directed": false, "edges": [[0, 1, 1], [0, 2, 4]]}

Documents are validated against a JSON schema before any graph is built.
The weight of an edge entry is optional and defaults to 1.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Type, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .enums import GraphType
from .exceptions import NodeNotFoundError, ValidationError
from .graph import Graph
from .models import Edge, PlainEdge

logger = logging.getLogger(__name__)

GRAPH_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "n_nodes": {"type": "integer", "minimum": 0},
        "directed": {"type": "boolean"},
        "edges": {
            "type": "array",
            "items": {
                "type": "array",
                "prefixItems": [
                    {"type": "integer", "minimum": 0},
                    {"type": "integer", "minimum": 0},
                    {"type": "number"},
                ],
                "minItems": 2,
                "maxItems": 3,
            },
        },
    },
    "required": ["n_nodes", "edges"],
    "additionalProperties": False,
}


class GraphSerializer:
    """Handles graph serialization operations."""

    @staticmethod
    def validate(data: Dict[str, Any]) -> None:
        """
        Validate a graph document against the schema.

        Raises:
            ValidationError: If the document does not match the schema
        """
        try:
            json_validate(instance=data, schema=GRAPH_SCHEMA)
        except JsonSchemaError as e:
            raise ValidationError(f"Invalid graph document: {e.message}") from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any], edge_type: Type[Edge] = PlainEdge) -> Graph:
        """
        Build a graph from a validated document.

        Args:
            data: Document with ``n_nodes``, ``edges`` and optional ``directed``
                (default: true)
            edge_type: Edge variant to create (default: PlainEdge)

        Raises:
            ValidationError: If the document is malformed or an edge references
                a node outside ``[0, n_nodes)``
        """
        cls.validate(data)
        g_type = GraphType.DIRECTED if data.get("directed", True) else GraphType.UNDIRECTED
        try:
            return Graph.from_edges(data["n_nodes"], data["edges"], g_type, edge_type)
        except NodeNotFoundError as e:
            raise ValidationError(str(e)) from e
        except (TypeError, ValueError) as e:
            # JSON Schema integers admit integral floats such as 2.0
            raise ValidationError(f"Invalid graph document: {e}") from e

    @staticmethod
    def to_dict(graph: Graph) -> Dict[str, Any]:
        """
        Convert a graph back to its document form.

        Undirected graphs list each logical edge once, oriented the way its
        first adjacency entry is.
        """
        edges: List[List[Union[int, float]]] = []
        if graph.is_directed:
            entries = graph.get_edges()
        else:
            entries = _forward_entries(graph)
        for edge in entries:
            edges.append([edge.source, edge.destination, edge.weight])
        return {"n_nodes": graph.n_nodes, "directed": graph.is_directed, "edges": edges}

    @classmethod
    def load(cls, path: Union[str, Path], edge_type: Type[Edge] = PlainEdge) -> Graph:
        """
        Read a graph document from a JSON file.

        Raises:
            ValidationError: If the file is not valid JSON or not a valid document
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {path}: {e}") from e
        logger.debug("Loaded graph document from %s", path)
        return cls.from_dict(data, edge_type)

    @classmethod
    def dump(cls, graph: Graph, path: Union[str, Path]) -> None:
        """Write a graph document to a JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(cls.to_dict(graph), f, indent=2)


def _forward_entries(graph: Graph) -> List[Edge]:
    """
    One adjacency entry per logical edge of an undirected graph.

    Every logical edge left two entries, ``(u, v, w)`` and ``(v, u, w)``; the
    second one met is paired with the first and skipped.
    """
    unpaired: Dict[Tuple[int, int, float], int] = {}
    forward: List[Edge] = []
    for edge in graph.get_edges():
        mirror = (edge.destination, edge.source, edge.weight)
        if unpaired.get(mirror, 0) > 0:
            unpaired[mirror] -= 1
            continue
        own = (edge.source, edge.destination, edge.weight)
        unpaired[own] = unpaired.get(own, 0) + 1
        forward.append(edge)
    return forward
