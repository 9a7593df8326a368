"""GraphService — adjacency listing, neighbor queries, and edge edits.

Vertex arguments are 1-based throughout, matching the file format and the
display layer. Edge edits go through ``Workspace.edit()`` so the file is
rewritten only when the whole operation succeeds.
"""

from __future__ import annotations

from typing import Any

from esuctl.domain.errors import VertexOutOfRange
from esuctl.services.base import BaseService
from esuctl.services.result import NOT_FOUND, ServiceResult


class GraphService(BaseService):
    """Read and edit one graph block of a workspace."""

    def show(self, *, index: int = 1) -> ServiceResult:
        """List every vertex with its label and stored neighbors."""
        loaded = self._load_block("show", index)
        if isinstance(loaded, ServiceResult):
            return loaded
        graph = loaded.graph

        vertices: list[dict[str, Any]] = [
            {
                "vertex": v + 1,
                "label": graph.label_of(v),
                "neighbors": [u + 1 for u in graph.neighbors_of(v)],
            }
            for v in graph
        ]
        stats = self._workspace.engine(index).stats()
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "graph": index,
                "count": len(vertices),
                "edges": stats["edges"],
                "symmetric": stats["symmetric"],
                "components": stats["components"],
                "vertices": vertices,
            },
            warnings=list(loaded.warnings),
        )

    def neighbors(self, vertex: int, *, index: int = 1) -> ServiceResult:
        """Neighbors of the 1-based *vertex*, in insertion order."""
        loaded = self._load_block("neighbors", index)
        if isinstance(loaded, ServiceResult):
            return loaded
        graph = loaded.graph

        try:
            label = graph.label_of(vertex - 1)
            view = graph.neighbors_of(vertex - 1)
        except VertexOutOfRange:
            return ServiceResult.failure(
                "neighbors",
                NOT_FOUND,
                f"Vertex {vertex} not in graph {index} (vertices 1..{graph.size})",
                vertex=vertex,
            )

        items = [{"vertex": u + 1, "label": graph.label_of(u)} for u in view]
        return ServiceResult(
            ok=True,
            op="neighbors",
            data={
                "graph": index,
                "vertex": vertex,
                "label": label,
                "count": len(items),
                "items": items,
            },
            warnings=list(loaded.warnings),
        )

    def link(
        self, source: int, destination: int, *, both: bool = False, index: int = 1
    ) -> ServiceResult:
        """Insert ``source -> destination`` (and the reverse with *both*)."""
        return self._edit_edge("link", source, destination, both=both, index=index)

    def unlink(
        self, source: int, destination: int, *, both: bool = False, index: int = 1
    ) -> ServiceResult:
        """Remove ``source -> destination`` (and the reverse with *both*)."""
        return self._edit_edge("unlink", source, destination, both=both, index=index)

    def export(self, *, index: int = 1) -> ServiceResult:
        """NetworkX node-link payload for the graph."""
        loaded = self._load_block("export", index)
        if isinstance(loaded, ServiceResult):
            return loaded
        return ServiceResult(
            ok=True,
            op="export",
            data={"graph": index, "node_link": self._workspace.engine(index).node_link()},
            warnings=list(loaded.warnings),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _edit_edge(
        self,
        op: str,
        source: int,
        destination: int,
        *,
        both: bool,
        index: int,
    ) -> ServiceResult:
        loaded = self._load_block(op, index)
        if isinstance(loaded, ServiceResult):
            return loaded

        pairs = [(source, destination)]
        if both:
            pairs.append((destination, source))

        changed: list[list[int]] = []
        unchanged: list[list[int]] = []
        with self._workspace.edit() as stored:
            graph = stored[index - 1].graph
            mutate = graph.insert_edge if op == "link" else graph.remove_edge
            for a, b in pairs:
                (changed if mutate(a, b) else unchanged).append([a, b])

        warnings = list(loaded.warnings)
        verb = "already present" if op == "link" else "not present"
        for a, b in unchanged:
            if a == b or not (1 <= a <= graph.size and 1 <= b <= graph.size):
                warnings.append(f"Edge {a} -> {b} ignored (self-loop or out of range)")
            else:
                warnings.append(f"Edge {a} -> {b} {verb}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "graph": index,
                "source": source,
                "destination": destination,
                "changed": changed,
                "path": str(self._workspace.source),
            },
            warnings=warnings,
        )
