"""Shared pytest fixtures and test helpers for esuctl tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from esuctl.domain.graph import Graph
from esuctl.infrastructure.workspace import Workspace

CYCLE_5 = """\
5
Entrance
Hall
Library
Study
Garden
1 2
2 3
3 4
4 5
1 5
0 0
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def cycle_file(tmp_path: Path) -> Path:
    """The 5-cycle description written to a temp file (edges one-way)."""
    path = tmp_path / "cycle.txt"
    path.write_text(CYCLE_5, encoding="utf-8")
    return path


@pytest.fixture
def workspace(cycle_file: Path) -> Workspace:
    """Workspace over the 5-cycle with mirrored edges."""
    return Workspace(cycle_file, mirror_edges=True)


@pytest.fixture(autouse=True)
def _no_user_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's esuctl.toml or ESUCTL_* env out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ESUCTL_CONFIG", raising=False)
    monkeypatch.delenv("ESUCTL_UNDIRECTED", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_graph(size: int, edges: Iterable[tuple[int, int]], *, mirror: bool = True) -> Graph:
    """Graph on *size* vertices from 1-based *edges*, mirrored by default."""
    g = Graph(size)
    for v in range(size):
        g.set_label(v, f"v{v + 1}")
    for a, b in edges:
        g.insert_edge(a, b)
        if mirror:
            g.insert_edge(b, a)
    return g


def cycle(n: int) -> Graph:
    return build_graph(n, [(i, i % n + 1) for i in range(1, n + 1)])


def path_graph(n: int) -> Graph:
    return build_graph(n, [(i, i + 1) for i in range(1, n)])


def complete(n: int) -> Graph:
    return build_graph(n, [(a, b) for a in range(1, n + 1) for b in range(a + 1, n + 1)])
