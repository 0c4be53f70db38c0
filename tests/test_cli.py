"""
Tests for the command line interface.
"""

import json

import pytest

from algograph.cli import create_parser, format_table, main, parse_json_input
from algograph.core.exceptions import ValidationError

SCENARIO = json.dumps(
    {
        "n_nodes": 5,
        "directed": False,
        "edges": [[0, 1, 1], [0, 2, 4], [1, 2, 2], [1, 3, 5], [2, 3, 1], [3, 4, 3]],
    }
)


def table_rows(output: str):
    """Split a printed table into stripped cells, skipping header and rule."""
    lines = output.strip().splitlines()[2:]
    return [[cell.strip() for cell in line.split("|")] for line in lines]


def test_dijkstra_command(capsys):
    """Test the dijkstra report for one target."""
    assert main(["dijkstra", SCENARIO, "--source", "0", "--target", "4"]) == 0
    rows = table_rows(capsys.readouterr().out)
    assert rows == [["0", "4", "7", "0->1->2->3->4"]]


def test_bfs_command_all_targets(capsys):
    """Test the bfs report over every node."""
    assert main(["bfs", SCENARIO]) == 0
    rows = table_rows(capsys.readouterr().out)
    assert [row[2] for row in rows] == ["0", "1", "1", "2", "3"]
    assert rows[4][3] == "0->1->3->4"


def test_bfs_unreachable_target(capsys):
    """Test that unreachable nodes print -1."""
    graph = json.dumps({"n_nodes": 3, "edges": [[0, 1]]})
    assert main(["bfs", graph, "-t", "2"]) == 0
    assert table_rows(capsys.readouterr().out) == [["0", "2", "-1", "-1"]]


def test_bellman_ford_negative_cycle(capsys):
    """Test the negative cycle report."""
    graph = json.dumps({"n_nodes": 2, "edges": [[0, 1, 1], [1, 0, -2]]})
    assert main(["bellman-ford", graph]) == 0
    assert "Negative cycle reachable from 0" in capsys.readouterr().out


def test_dijkstra_negative_edge(capsys):
    """Test that Dijkstra errors are reported with a failing exit code."""
    graph = json.dumps({"n_nodes": 2, "edges": [[0, 1, -1]]})
    assert main(["dijkstra", graph]) == 1
    assert "Negative weight -1" in capsys.readouterr().out


def test_floyd_warshall_command(capsys):
    """Test the all-pairs distance table."""
    graph = json.dumps({"n_nodes": 3, "edges": [[0, 1, 4], [1, 2, -2], [0, 2, 5]]})
    assert main(["floyd-warshall", graph]) == 0
    rows = table_rows(capsys.readouterr().out)
    assert rows == [["0", "0", "4", "2"], ["1", "-1", "0", "-2"], ["2", "-1", "-1", "0"]]


def test_dfs_command(capsys):
    """Test the depth-first timestamps table."""
    graph = json.dumps({"n_nodes": 2, "edges": [[0, 1]]})
    assert main(["dfs", graph]) == 0
    assert table_rows(capsys.readouterr().out) == [["0", "-1", "1", "4"], ["1", "0", "2", "3"]]


def test_vertex_cover_command(capsys):
    """Test the vertex cover table."""
    assert main(["vertex-cover", SCENARIO]) == 0
    assert table_rows(capsys.readouterr().out) == [["0", "1"], ["2", "3"]]


def test_graph_from_file(tmp_path, capsys):
    """Test reading the graph from an @file argument."""
    path = tmp_path / "graph.json"
    path.write_text(SCENARIO)
    assert main(["dijkstra", f"@{path}", "-s", "4", "-t", "0"]) == 0
    assert table_rows(capsys.readouterr().out) == [["4", "0", "7", "4->3->2->1->0"]]


def test_invalid_source(capsys):
    """Test that an out-of-range source is reported."""
    assert main(["bfs", SCENARIO, "--source", "9"]) == 1
    assert "Node 9 not found" in capsys.readouterr().out


def test_missing_command(capsys):
    """Test that running without a command prints help."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_parse_json_input_errors(tmp_path):
    """Test JSON input failures."""
    with pytest.raises(ValidationError, match="File not found"):
        parse_json_input(f"@{tmp_path / 'missing.json'}")
    with pytest.raises(ValidationError, match="Invalid JSON input"):
        parse_json_input("{broken")


def test_parser_defaults():
    """Test default source and target."""
    args = create_parser().parse_args(["dijkstra", "{}"])
    assert (args.source, args.target) == (0, None)


def test_format_table_alignment():
    """Test that columns are padded to a common width."""
    table = format_table(["a", "bb"], [["100", "1"]])
    header, rule, row = table.splitlines()
    assert len(header) == len(rule) == len(row)


def test_float_node_count(capsys):
    """Test that an integral float node count is reported, not raised."""
    assert main(["bfs", '{"n_nodes": 2.0, "edges": [[0, 1]]}']) == 1
    assert "Validation Error" in capsys.readouterr().out
