"""Isomorphism census over enumerated subgraphs.

Groups vertex sets by the isomorphism class of the undirected subgraph they
induce. The Weisfeiler-Lehman hash buckets candidates cheaply; within a
bucket ``nx.is_isomorphic`` settles hash collisions.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import networkx as nx
from networkx.algorithms.graph_hashing import weisfeiler_lehman_graph_hash

if TYPE_CHECKING:
    from esuctl.domain.graph import Graph


@dataclass
class IsomorphismClass:
    """One class of induced subgraphs and how often it occurred."""

    wl_hash: str
    pattern: nx.Graph
    example: tuple[int, ...]
    count: int = 0
    members: list[tuple[int, ...]] = field(default_factory=list)

    @property
    def edge_count(self) -> int:
        return self.pattern.number_of_edges()

    def canonical_edges(self) -> list[tuple[int, int]]:
        """Edges of the pattern relabelled onto ``1..k`` in example order."""
        order = {v: i + 1 for i, v in enumerate(self.example)}
        return sorted(
            tuple(sorted((order[u], order[v])))  # type: ignore[misc]
            for u, v in self.pattern.edges()
        )


def induced_pattern(graph: Graph, vertices: Iterable[int]) -> nx.Graph:
    """Undirected subgraph induced by the 0-based *vertices*."""
    members = list(vertices)
    member_set = set(members)
    pattern: nx.Graph = nx.Graph()
    pattern.add_nodes_from(members)
    for v in members:
        for u in graph.neighbors_of(v):
            if u in member_set:
                pattern.add_edge(v, u)
    return pattern


def census(
    graph: Graph,
    subgraphs: Iterable[tuple[int, ...]],
    *,
    keep_members: bool = False,
) -> list[IsomorphismClass]:
    """Count isomorphism classes among *subgraphs* (0-based vertex tuples).

    Returns classes ordered by count (descending), ties broken by edge count
    then first appearance.
    """
    buckets: dict[str, list[IsomorphismClass]] = {}
    ordered: list[IsomorphismClass] = []

    for subgraph in subgraphs:
        pattern = induced_pattern(graph, subgraph)
        wl_hash = weisfeiler_lehman_graph_hash(pattern)
        bucket = buckets.setdefault(wl_hash, [])
        match = next((c for c in bucket if nx.is_isomorphic(c.pattern, pattern)), None)
        if match is None:
            match = IsomorphismClass(wl_hash=wl_hash, pattern=pattern, example=subgraph)
            bucket.append(match)
            ordered.append(match)
        match.count += 1
        if keep_members:
            match.members.append(subgraph)

    first_seen = {id(c): i for i, c in enumerate(ordered)}
    return sorted(ordered, key=lambda c: (-c.count, c.edge_count, first_seen[id(c)]))
