"""Tests for the adjacency-list Graph and EdgeSet."""

from __future__ import annotations

import pytest

from esuctl.domain.errors import GraphCapacityError, VertexOutOfRange
from esuctl.domain.graph import MAX_VERTICES, EdgeSet, Graph
from tests.conftest import build_graph


class TestEdgeSet:
    def test_add_preserves_insertion_order(self) -> None:
        edges = EdgeSet()
        for v in (3, 1, 2):
            edges.add(v)
        assert list(edges) == [3, 1, 2]

    def test_add_duplicate_is_ignored(self) -> None:
        edges = EdgeSet([1, 2])
        assert edges.add(1) is False
        assert list(edges) == [1, 2]

    def test_discard_missing_is_noop(self) -> None:
        edges = EdgeSet([1, 2])
        assert edges.discard(5) is False
        assert edges == EdgeSet([1, 2])

    def test_copy_is_independent(self) -> None:
        edges = EdgeSet([1])
        clone = edges.copy()
        clone.add(2)
        assert list(edges) == [1]


class TestSize:
    def test_default_is_empty(self) -> None:
        g = Graph()
        assert g.size == 0
        assert len(g) == 0

    def test_max_vertices_allowed(self) -> None:
        assert Graph(MAX_VERTICES).size == MAX_VERTICES

    @pytest.mark.parametrize("size", [-1, MAX_VERTICES + 1])
    def test_out_of_bounds_size_rejected(self, size: int) -> None:
        with pytest.raises(GraphCapacityError):
            Graph(size)

    def test_capacity_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Graph().set_size(1000)

    def test_set_size_resets_vertices(self) -> None:
        g = build_graph(3, [(1, 2)])
        g.set_size(2)
        assert g.size == 2
        assert list(g.neighbors_of(0)) == []
        assert g.label_of(0) == ""


class TestLabels:
    def test_set_and_read_label(self) -> None:
        g = Graph(2)
        g.set_label(1, "Library")
        assert g.label_of(1) == "Library"
        assert g.labels() == ["", "Library"]

    def test_out_of_range_label_is_noop(self) -> None:
        g = Graph(2)
        g.set_label(5, "Nowhere")
        assert g.labels() == ["", ""]

    def test_label_of_out_of_range_raises(self) -> None:
        with pytest.raises(VertexOutOfRange):
            Graph(2).label_of(2)


class TestInsertEdge:
    def test_one_based_input(self) -> None:
        g = Graph(3)
        assert g.insert_edge(1, 3) is True
        assert list(g.neighbors_of(0)) == [2]

    def test_not_mirrored(self) -> None:
        g = Graph(3)
        g.insert_edge(1, 2)
        assert list(g.neighbors_of(1)) == []
        assert g.has_edge(0, 1)
        assert not g.has_edge(1, 0)

    def test_idempotent(self) -> None:
        g = Graph(3)
        g.insert_edge(1, 2)
        before = list(g.neighbors_of(0))
        assert g.insert_edge(1, 2) is False
        assert list(g.neighbors_of(0)) == before

    def test_self_loop_ignored(self) -> None:
        g = Graph(3)
        assert g.insert_edge(2, 2) is False
        assert list(g.neighbors_of(1)) == []

    @pytest.mark.parametrize(("source", "destination"), [(0, 1), (1, 0), (4, 1), (1, 4), (-1, 2)])
    def test_out_of_range_ignored(self, source: int, destination: int) -> None:
        g = Graph(3)
        assert g.insert_edge(source, destination) is False
        assert list(g.edges()) == []

    def test_insertion_order_kept(self) -> None:
        g = Graph(4)
        for dest in (4, 2, 3):
            g.insert_edge(1, dest)
        assert list(g.neighbors_of(0)) == [3, 1, 2]


class TestRemoveEdge:
    def test_removes_only_that_entry(self) -> None:
        g = build_graph(4, [(1, 2), (1, 3), (1, 4)], mirror=False)
        assert g.remove_edge(1, 3) is True
        assert list(g.neighbors_of(0)) == [1, 3]

    def test_missing_edge_is_noop(self) -> None:
        g = build_graph(3, [(1, 2)], mirror=False)
        before = list(g.neighbors_of(0))
        assert g.remove_edge(1, 3) is False
        assert list(g.neighbors_of(0)) == before

    def test_reverse_direction_untouched(self) -> None:
        g = build_graph(2, [(1, 2)])
        g.remove_edge(1, 2)
        assert list(g.neighbors_of(1)) == [0]

    def test_out_of_range_is_noop(self) -> None:
        g = build_graph(2, [(1, 2)])
        assert g.remove_edge(1, 9) is False
        assert g.remove_edge(0, 2) is False


class TestNeighbors:
    def test_view_is_restartable(self) -> None:
        g = build_graph(3, [(1, 2), (1, 3)])
        view = g.neighbors_of(0)
        assert list(view) == [1, 2]
        assert list(view) == [1, 2]
        assert len(view) == 2
        assert view[0] == 1

    def test_view_is_read_only(self) -> None:
        view = build_graph(2, [(1, 2)]).neighbors_of(0)
        assert not hasattr(view, "append")
        assert not hasattr(view, "add")

    def test_out_of_range_raises(self) -> None:
        g = Graph(2)
        with pytest.raises(VertexOutOfRange):
            g.neighbors_of(2)
        with pytest.raises(IndexError):
            g.neighbors_of(-1)

    def test_never_contains_self_or_out_of_range(self) -> None:
        g = Graph(4)
        for a in range(-1, 6):
            for b in range(-1, 6):
                g.insert_edge(a, b)
        for v in g:
            neighbors = list(g.neighbors_of(v))
            assert v not in neighbors
            assert all(0 <= u < g.size for u in neighbors)
            assert len(neighbors) == len(set(neighbors))


class TestCopy:
    def test_copy_is_equal(self) -> None:
        g = build_graph(3, [(1, 2), (2, 3)])
        assert g.copy() == g

    def test_copy_is_deep(self) -> None:
        g = build_graph(3, [(1, 2)])
        clone = g.copy()
        clone.insert_edge(1, 3)
        clone.set_label(0, "changed")
        assert list(g.neighbors_of(0)) == [1]
        assert g.label_of(0) == "v1"


class TestEdges:
    def test_edges_are_one_based_in_storage_order(self) -> None:
        g = build_graph(3, [(2, 3), (1, 2)], mirror=False)
        assert list(g.edges()) == [(1, 2), (2, 3)]

    def test_repr(self) -> None:
        assert repr(build_graph(3, [(1, 2)])) == "Graph(size=3, edges=2)"
