"""ESU enumeration of connected induced subgraphs of size k.

For every anchor ``root`` in ``0..size-1`` the search starts from
``(root,)`` with the anchor's larger-index neighbors as extension, then
repeatedly pops the front candidate, extends a copy of the subgraph by it,
and recurses on the remaining candidates plus the new vertex's exclusive
neighbors. A popped candidate is never reconsidered within its branch.

INVARIANT: for symmetric adjacency each connected induced k-subgraph is
emitted exactly once, under the anchor equal to its minimum vertex index.
Order is deterministic: anchors ascend, candidates are consumed FIFO.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from esuctl.domain.errors import InvalidSubgraphSize
from esuctl.domain.extension import build_extension, closed_neighborhood

if TYPE_CHECKING:
    from collections import deque

    from esuctl.domain.graph import Graph

Subgraph = tuple[int, ...]


def validate_k(graph: Graph, k: int) -> None:
    """Raise InvalidSubgraphSize unless ``1 <= k <= graph.size``."""
    if not 1 <= k <= graph.size:
        msg = f"Subgraph size k must be between 1 and {graph.size}, got {k}"
        raise InvalidSubgraphSize(msg)


def iter_subgraphs(graph: Graph, k: int) -> Iterator[Subgraph]:
    """Lazily yield each connected induced k-subgraph as 0-based indices.

    Validation happens on the call, not on first iteration.
    """
    validate_k(graph, k)
    return _iter_anchors(graph, k)


def _iter_anchors(graph: Graph, k: int) -> Iterator[Subgraph]:
    for root in range(graph.size):
        extension = build_extension(graph, root, (), root=root)
        blocked = closed_neighborhood(graph, (root,))
        yield from _extend((root,), extension, blocked, graph, root, k)


def _extend(
    subgraph: Subgraph,
    extension: deque[int],
    blocked: frozenset[int],
    graph: Graph,
    root: int,
    k: int,
) -> Iterator[Subgraph]:
    if len(subgraph) == k:
        yield subgraph
        return

    # extension is owned by this call; consuming it is the backtrack boundary
    while extension:
        w = extension.popleft()
        child_extension = build_extension(graph, w, extension, root=root, blocked=blocked)
        child_blocked = blocked | closed_neighborhood(graph, (w,))
        yield from _extend((*subgraph, w), child_extension, child_blocked, graph, root, k)


def enumerate_subgraphs(
    graph: Graph,
    k: int,
    emit: Callable[[Subgraph], object],
) -> int:
    """Run the full enumeration, handing each subgraph to *emit* 1-based.

    Returns the number of subgraphs emitted.
    """
    count = 0
    for subgraph in iter_subgraphs(graph, k):
        emit(tuple(v + 1 for v in subgraph))
        count += 1
    return count


def count_subgraphs(graph: Graph, k: int) -> int:
    return sum(1 for _ in iter_subgraphs(graph, k))
