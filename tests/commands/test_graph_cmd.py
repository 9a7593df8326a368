"""Tests for the graph command group."""

import json
from pathlib import Path

from click.testing import CliRunner

from esuctl.cli import cli
from esuctl.infrastructure.loader import load_graphs


class TestShow:
    def test_table(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["graph", "show", str(cycle_file)])
        assert result.exit_code == 0
        assert "Library" in result.stdout
        assert "5 vertices, 5 edges (directional), 1 component(s)" in result.stdout

    def test_undirected_quiet(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "--undirected", "graph", "show", str(cycle_file)])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "1: 2 5"

    def test_warnings_reach_stderr(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("2\na\nb\n1 9\n0 0\n")
        result = cli_runner.invoke(cli, ["graph", "show", str(path)])
        assert result.exit_code == 0
        assert "WARNING" in result.stderr
        assert "1 -> 9" in result.stderr

    def test_unreadable_count(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("lots\n")
        result = cli_runner.invoke(cli, ["graph", "show", str(path)])
        assert result.exit_code == 1
        assert "vertex count" in result.stderr


class TestNeighbors:
    def test_lists_neighbors(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "graph", "neighbors", str(cycle_file), "1"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2 5"

    def test_unknown_vertex(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["graph", "neighbors", str(cycle_file), "6"])
        assert result.exit_code == 1
        assert "Vertex 6 not in graph 1" in result.stderr


class TestLinkUnlink:
    def test_link_rewrites_file(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["graph", "link", str(cycle_file), "1", "3", "--both"])
        assert result.exit_code == 0
        (loaded,) = load_graphs(cycle_file)
        assert loaded.graph.has_edge(0, 2)
        assert loaded.graph.has_edge(2, 0)
        assert loaded.graph.label_of(2) == "Library"

    def test_undirected_link_keeps_file_one_way(
        self, cli_runner: CliRunner, cycle_file: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["--undirected", "graph", "link", str(cycle_file), "1", "3"]
        )
        assert result.exit_code == 0
        (loaded,) = load_graphs(cycle_file)
        assert loaded.graph.has_edge(0, 2)
        assert not loaded.graph.has_edge(2, 0)
        assert not loaded.graph.has_edge(1, 0)

    def test_link_existing_warns(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["graph", "link", str(cycle_file), "1", "2"])
        assert result.exit_code == 0
        assert "already present" in result.stderr

    def test_unlink(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["graph", "unlink", str(cycle_file), "1", "5"])
        assert result.exit_code == 0
        (loaded,) = load_graphs(cycle_file)
        assert list(loaded.graph.edges()) == [(1, 2), (2, 3), (3, 4), (4, 5)]

    def test_out_of_range_ignored(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["graph", "link", str(cycle_file), "1", "42"])
        assert result.exit_code == 0
        assert "ignored" in result.stderr


class TestExport:
    def test_node_link(self, cli_runner: CliRunner, cycle_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "graph", "export", str(cycle_file)])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert sorted(node["id"] for node in payload["nodes"]) == [1, 2, 3, 4, 5]
        assert len(payload["edges"]) == 5
