"""Tests for the NetworkX adapter."""

from __future__ import annotations

from esuctl.domain.graph import Graph
from esuctl.infrastructure.engine import NetworkEngine, to_networkx
from tests.conftest import build_graph


class TestToNetworkx:
    def test_isolated_vertices_included(self) -> None:
        g = build_graph(3, [(1, 2)], mirror=False)
        network = to_networkx(g)
        assert set(network.nodes()) == {0, 1, 2}
        assert list(network.edges()) == [(0, 1)]
        assert network.nodes[2]["label"] == "v3"


class TestNetworkEngine:
    def test_lazy_build_cached(self) -> None:
        engine = NetworkEngine(build_graph(2, [(1, 2)]))
        assert engine.network is engine.network

    def test_invalidate_rebuilds(self) -> None:
        g = build_graph(3, [(1, 2)])
        engine = NetworkEngine(g)
        assert engine.network.number_of_edges() == 2
        g.insert_edge(2, 3)
        engine.invalidate()
        assert engine.network.number_of_edges() == 3

    def test_symmetry(self) -> None:
        assert NetworkEngine(build_graph(3, [(1, 2), (2, 3)])).is_symmetric()
        assert not NetworkEngine(build_graph(2, [(1, 2)], mirror=False)).is_symmetric()

    def test_stats(self) -> None:
        stats = NetworkEngine(build_graph(4, [(1, 2)])).stats()
        assert stats == {"vertices": 4, "edges": 2, "symmetric": True, "components": 3}

    def test_stats_empty_graph(self) -> None:
        assert NetworkEngine(Graph()).stats()["components"] == 0

    def test_node_link_uses_one_based_ids(self) -> None:
        data = NetworkEngine(build_graph(2, [(1, 2)], mirror=False)).node_link()
        assert sorted(n["id"] for n in data["nodes"]) == [1, 2]
        assert [(e["source"], e["target"]) for e in data["edges"]] == [(1, 2)]
        assert data["directed"] is True
