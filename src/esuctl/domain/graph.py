"""Adjacency-list graph store.

A Graph owns ``size`` vertices, each with an opaque label and an ordered,
duplicate-free EdgeSet of neighbor indices.

Index conventions:
- Edge mutation (``insert_edge``, ``remove_edge``) takes 1-based indices,
  matching the graph description format.
- Queries (``neighbors_of``, ``label_of``, ``has_edge``) take 0-based indices.

INVARIANT: edges are stored exactly as inserted. Inserting ``(a, b)`` touches
only ``a``'s EdgeSet; nothing is mirrored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload

from esuctl.domain.errors import GraphCapacityError, VertexOutOfRange

logger = logging.getLogger(__name__)

MAX_VERTICES = 100


class EdgeSet:
    """Ordered, duplicate-free neighbor indices for one vertex."""

    __slots__ = ("_items",)

    def __init__(self, items: Sequence[int] = ()) -> None:
        self._items: list[int] = []
        for item in items:
            self.add(item)

    def add(self, index: int) -> bool:
        """Append *index* unless already present. Returns True if appended."""
        if index in self._items:
            return False
        self._items.append(index)
        return True

    def discard(self, index: int) -> bool:
        """Remove *index* if present. Returns True if removed."""
        try:
            self._items.remove(index)
        except ValueError:
            return False
        return True

    def view(self) -> NeighborView:
        return NeighborView(self._items)

    def copy(self) -> EdgeSet:
        clone = EdgeSet()
        clone._items = list(self._items)
        return clone

    def __contains__(self, index: object) -> bool:
        return index in self._items

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EdgeSet):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"EdgeSet({self._items!r})"


class NeighborView(Sequence[int]):
    """Read-only, restartable view over an EdgeSet.

    Reflects later mutation of the underlying EdgeSet; take ``tuple(view)``
    for a snapshot.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[int]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[int]: ...

    def __getitem__(self, index: int | slice) -> int | Sequence[int]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"NeighborView({self._items!r})"


@dataclass
class Vertex:
    """A labelled vertex owning its EdgeSet."""

    label: str = ""
    edges: EdgeSet = field(default_factory=EdgeSet)

    def copy(self) -> Vertex:
        return Vertex(label=self.label, edges=self.edges.copy())


class Graph:
    """Fixed-capacity adjacency-list graph of at most ``MAX_VERTICES`` vertices.

    Out-of-range and self-loop edge operations are silent no-ops; the
    boolean return of ``insert_edge``/``remove_edge`` tells the caller
    whether anything changed.

    Usage::

        g = Graph(3)
        g.insert_edge(1, 2)
        g.insert_edge(2, 1)
        list(g.neighbors_of(0))  # [1]
    """

    def __init__(self, size: int = 0) -> None:
        self._vertices: list[Vertex] = []
        self.set_size(size)

    # ------------------------------------------------------------------
    # Loader surface
    # ------------------------------------------------------------------

    def set_size(self, size: int) -> None:
        """Reset the graph to *size* unlabelled, unconnected vertices."""
        if not 0 <= size <= MAX_VERTICES:
            msg = f"Graph size must be between 0 and {MAX_VERTICES}, got {size}"
            raise GraphCapacityError(msg)
        self._vertices = [Vertex() for _ in range(size)]

    def set_label(self, index: int, value: str) -> None:
        """Set the label of the 0-based vertex *index*. Out of range is a no-op."""
        if not self._in_range(index):
            logger.debug("Ignoring label for out-of-range vertex %d", index)
            return
        self._vertices[index].label = value

    def insert_edge(self, source: int, destination: int) -> bool:
        """Add the 1-based edge ``source -> destination`` if absent."""
        pair = self._to_internal(source, destination)
        if pair is None:
            return False
        vertex_from, vertex_to = pair
        return self._vertices[vertex_from].edges.add(vertex_to)

    def remove_edge(self, source: int, destination: int) -> bool:
        """Remove the 1-based edge ``source -> destination`` if present."""
        pair = self._to_internal(source, destination)
        if pair is None:
            return False
        vertex_from, vertex_to = pair
        return self._vertices[vertex_from].edges.discard(vertex_to)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._vertices)

    def neighbors_of(self, vertex: int) -> NeighborView:
        """Ordered neighbors of the 0-based *vertex*, in insertion order."""
        return self._vertex(vertex).edges.view()

    def label_of(self, vertex: int) -> str:
        return self._vertex(vertex).label

    def has_edge(self, vertex_from: int, vertex_to: int) -> bool:
        """True if the 0-based edge ``vertex_from -> vertex_to`` is stored."""
        return vertex_to in self._vertex(vertex_from).edges

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every stored edge as a 1-based ``(source, destination)`` pair."""
        for index, vertex in enumerate(self._vertices):
            for neighbor in vertex.edges:
                yield index + 1, neighbor + 1

    def labels(self) -> list[str]:
        return [vertex.label for vertex in self._vertices]

    def copy(self) -> Graph:
        """Deep copy: the clone owns its own labels and EdgeSets."""
        clone = Graph()
        clone._vertices = [vertex.copy() for vertex in self._vertices]
        return clone

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._vertices)))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Graph):
            return self._vertices == other._vertices
        return NotImplemented

    def __repr__(self) -> str:
        edge_count = sum(len(vertex.edges) for vertex in self._vertices)
        return f"Graph(size={self.size}, edges={edge_count})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._vertices)

    def _vertex(self, index: int) -> Vertex:
        if not self._in_range(index):
            msg = f"Vertex {index} out of range for graph of size {self.size}"
            raise VertexOutOfRange(msg)
        return self._vertices[index]

    def _to_internal(self, source: int, destination: int) -> tuple[int, int] | None:
        """Convert 1-based endpoints to 0-based, or None for a no-op edge."""
        vertex_from = source - 1
        vertex_to = destination - 1
        if vertex_from == vertex_to:
            logger.debug("Ignoring self-loop on vertex %d", source)
            return None
        if not (self._in_range(vertex_from) and self._in_range(vertex_to)):
            logger.debug("Ignoring out-of-range edge %d -> %d", source, destination)
            return None
        return vertex_from, vertex_to
