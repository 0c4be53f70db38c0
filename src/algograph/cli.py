"""Command Line Interface for the graph engine.

This module loads a graph document, runs one algorithm against it and prints
the result as a table. The graph document has the form
``{"n_nodes": 5, "directed": false, "edges": [[0, 1, 1], [0, 2, 4]]}``.

The CLI supports the following commands:
    - bfs: Breadth-first distances and paths from a source
    - dfs: Depth-first discover/finish times over the whole graph
    - dijkstra: Shortest paths from a source (non-negative weights)
    - bellman-ford: Shortest paths from a source (negative weights allowed)
    - floyd-warshall: All-pairs shortest distances
    - vertex-cover: Edges of a 2-approximate vertex cover

JSON input can be provided either as a direct string or as a file path prefixed
with '@'.

Example Usage:
    python -m algograph dijkstra @data/graph.json --source 0
    python -m algograph bfs '{"n_nodes": 2, "edges": [[0, 1]]}' --target 1
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .core.exceptions import GraphOperationError, ResourceNotFoundError, ValidationError
from .core.graph import Graph
from .core.serialization import GraphSerializer
from .core.algorithms import (
    approx_vertex_cover,
    bellman_ford,
    bfs,
    dfs,
    dijkstra,
    floyd_warshall,
)

logger = logging.getLogger(__name__)

# Printed in place of a distance or path when a node cannot be reached
NO_PATH = "-1"


def parse_json_input(json_str: str) -> dict:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ValidationError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        path = Path(json_str[1:])
        if not path.is_file():
            raise ValidationError(f"File not found: {path}")
        json_str = path.read_text(encoding="utf-8")
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}") from e


def format_number(value: Optional[float]) -> str:
    if value is None:
        return NO_PATH
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_path(nodes: Sequence[int]) -> str:
    return "->".join(str(node) for node in nodes)


def format_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render rows as a '|'-separated table with a ruled header."""
    rows = [list(row) for row in rows]
    widths = [len(header) for header in headers]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]
    lines = [" | ".join(h.center(w) for h, w in zip(headers, widths))]
    lines.append("-+-".join("-" * w for w in widths))
    for row in rows:
        lines.append(" | ".join(cell.center(w) for cell, w in zip(row, widths)))
    return "\n".join(lines)


def _targets(graph: Graph, target: Optional[int]) -> List[int]:
    if target is None:
        return list(graph.nodes())
    graph.validate_node(target)
    return [target]


def report_tree(graph: Graph, tree, target: Optional[int]) -> str:
    """Table of distance and path from the tree's source to each target."""
    rows = []
    for node in _targets(graph, target):
        if tree.is_reachable(node):
            path = [tree.source] + [edge.destination for edge in tree.path_to(node)]
            rows.append(
                [str(tree.source), str(node), format_number(tree.distances[node]), format_path(path)]
            )
        else:
            rows.append([str(tree.source), str(node), NO_PATH, NO_PATH])
    return format_table(["src", "dest", "distance", "path"], rows)


def run_command(args: argparse.Namespace) -> str:
    """Run the requested algorithm and return its printable report."""
    graph = GraphSerializer.from_dict(parse_json_input(args.graph))
    logger.debug("Running %s on %r", args.command, graph)

    if args.command == "bfs":
        return report_tree(graph, bfs(graph, args.source), args.target)

    if args.command == "dijkstra":
        return report_tree(graph, dijkstra(graph, args.source), args.target)

    if args.command == "bellman-ford":
        tree = bellman_ford(graph, args.source)
        if tree is None:
            return f"Negative cycle reachable from {args.source}"
        return report_tree(graph, tree, args.target)

    if args.command == "dfs":
        forest = dfs(graph)
        rows = [
            [str(node), format_number(pred), str(forest.discovered[node]), str(forest.finished[node])]
            for node, pred in enumerate(forest.predecessor_nodes())
        ]
        return format_table(["node", "parent", "discover", "finish"], rows)

    if args.command == "floyd-warshall":
        result = floyd_warshall(graph)
        if result is None:
            return "Negative cycle detected"
        headers = [""] + [str(node) for node in graph.nodes()]
        rows = [
            [str(i)] + [format_number(value) for value in row]
            for i, row in enumerate(result.distances)
        ]
        return format_table(headers, rows)

    if args.command == "vertex-cover":
        cover = approx_vertex_cover(graph)
        rows = [[str(edge.source), str(edge.destination)] for edge in cover]
        return format_table(["src", "dest"], rows)

    raise GraphOperationError(f"Unknown command: {args.command}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="algograph", description="Graph algorithms CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Single-source commands
    for name, help_text in (
        ("bfs", "Breadth-first search from a source"),
        ("dijkstra", "Dijkstra shortest paths from a source"),
        ("bellman-ford", "Bellman-Ford shortest paths from a source"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("graph", help="JSON string or @filename containing the graph")
        command.add_argument("-s", "--source", type=int, default=0, help="Source node")
        command.add_argument("-t", "--target", type=int, help="Only report this node")

    # Whole-graph commands
    for name, help_text in (
        ("dfs", "Depth-first forest over the whole graph"),
        ("floyd-warshall", "All-pairs shortest distances"),
        ("vertex-cover", "Greedy 2-approximate vertex cover"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("graph", help="JSON string or @filename containing the graph")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not args.command:
        parser.print_help()
        return 1

    try:
        print(run_command(args))
    except (GraphOperationError, ResourceNotFoundError, ValidationError) as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
