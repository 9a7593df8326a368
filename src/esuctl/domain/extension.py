"""Extension-set construction for ESU enumeration.

The exclusive neighborhood rule admits a neighbor ``u`` of the newly added
vertex ``w`` only when ``u > root`` (the anchor) and ``u`` lies outside the
closed neighborhood of the subgraph as it stood before ``w`` joined.
The second condition keeps a vertex reachable through two members of the
subgraph from entering the extension twice along different branches.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Set
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from esuctl.domain.graph import Graph


def build_extension(
    graph: Graph,
    w: int,
    current: Iterable[int],
    *,
    root: int,
    blocked: Set[int] = frozenset(),
) -> deque[int]:
    """Return *current* followed by the eligible neighbors of *w*.

    Args:
        graph: Adjacency source.
        w: Vertex just added to the subgraph (0-based).
        current: Extension inherited from the parent step. Never mutated.
        root: The anchor; only neighbors with a larger index are eligible.
        blocked: Closed neighborhood of the subgraph before *w* was added.

    New candidates are appended in *w*'s adjacency order, skipping any
    already present in the result.
    """
    extension = deque(current)
    present = set(extension)
    for u in graph.neighbors_of(w):
        if u <= root or u in blocked or u in present:
            continue
        extension.append(u)
        present.add(u)
    return extension


def closed_neighborhood(graph: Graph, vertices: Iterable[int]) -> frozenset[int]:
    """``N[S]``: the vertices in *vertices* plus every stored neighbor of them."""
    reached: set[int] = set()
    for v in vertices:
        reached.add(v)
        reached.update(graph.neighbors_of(v))
    return frozenset(reached)
