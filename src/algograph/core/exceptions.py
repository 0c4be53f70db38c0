"""
Custom exceptions for the graph engine.

This module defines the hierarchy of custom exceptions used throughout the engine
to handle error conditions in a structured and meaningful way. Each exception type
corresponds to a specific category of errors that may occur while building a graph
or running an algorithm against it.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when serialized graph input fails to meet the required
    validation criteria, such as schema validation or inconsistent counts.

    Examples:
        * Missing node count
        * Edge entries that are not [source, destination, weight] triples
        * Edge endpoints outside the declared node range
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph structure or an
    algorithm run against it encounter errors.

    Examples:
        * Path requested to an unreachable node
        * Grid edge added to a graph of plain edges
        * Invalid algorithm input
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NegativeEdgeError(GraphOperationError):
    """
    Raised when Dijkstra's algorithm meets a negative edge weight.

    The partial computation is discarded; no distances are returned.
    """

    def __init__(self, source: int, destination: int, weight: float):
        self.source = source
        self.destination = destination
        self.weight = weight
        super().__init__(f"Negative weight {weight} found on edge {source} -> {destination}")


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Heap key not found
    """


class NodeNotFoundError(ResourceNotFoundError, IndexError):
    """
    Raised when a node index falls outside ``[0, n_nodes)``.

    Examples:
        * Edge insertion referencing a non-existent node
        * Algorithm source outside the graph
    """

    def __init__(self, node: int, n_nodes: int):
        self.node = node
        self.n_nodes = n_nodes
        super().__init__(f"Node {node} not found in graph with {n_nodes} nodes")


class HeapContractError(AssertionError):
    """
    Raised when the indexed heap is used outside its contract.

    Underflow (extracting from an empty heap), inserting a key twice and
    re-prioritising a removed or unknown key are programming errors, never
    recoverable conditions.
    """
