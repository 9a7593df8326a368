"""NetworkEngine — lazy NetworkX view of a Graph.

Built on first access and cached until ``invalidate()``. Nodes are the
0-based vertex indices carrying a ``label`` attribute; edges are exactly
the stored (directional) edges.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

if TYPE_CHECKING:
    from esuctl.domain.graph import Graph

_Network = nx.DiGraph


class NetworkEngine:
    """Lazy-loading NetworkX adapter over an adjacency-list Graph."""

    def __init__(self, graph: Graph) -> None:
        self._source = graph
        self._network: _Network | None = None

    @property
    def network(self) -> _Network:
        """Return the DiGraph, building it on first access."""
        if self._network is None:
            self._network = to_networkx(self._source)
        return self._network

    def invalidate(self) -> None:
        """Drop the cached DiGraph after the source Graph was mutated."""
        self._network = None

    def is_symmetric(self) -> bool:
        """True if every stored edge has its reverse stored too."""
        g = self.network
        return all(g.has_edge(v, u) for u, v in g.edges())

    def node_link(self) -> dict[str, Any]:
        """Node-link JSON payload with 1-based ids for export."""
        relabelled = nx.relabel_nodes(self.network, {v: v + 1 for v in self.network})
        return nx.node_link_data(relabelled, edges="edges")

    def stats(self) -> dict[str, Any]:
        g = self.network
        undirected = g.to_undirected(as_view=True)
        components = nx.number_connected_components(undirected) if len(g) else 0
        return {
            "vertices": g.number_of_nodes(),
            "edges": g.number_of_edges(),
            "symmetric": self.is_symmetric(),
            "components": components,
        }


def to_networkx(graph: Graph) -> _Network:
    """Build a DiGraph mirroring *graph*'s stored edges.

    Loads every vertex first so isolated vertices appear in the result.
    """
    g: _Network = nx.DiGraph()
    for v in graph:
        g.add_node(v, label=graph.label_of(v))
    for v in graph:
        for u in graph.neighbors_of(v):
            g.add_edge(v, u)
    return g
