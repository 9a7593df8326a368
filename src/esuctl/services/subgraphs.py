"""SubgraphService — ESU enumeration and isomorphism census.

Both operations validate ``k`` against the graph size and answer with an
``INVALID_ARGUMENT`` failure instead of an empty listing.
"""

from __future__ import annotations

import itertools
import time
from typing import Any

import structlog

from esuctl.domain.census import census
from esuctl.domain.enumeration import iter_subgraphs
from esuctl.domain.errors import InvalidSubgraphSize
from esuctl.services.base import BaseService
from esuctl.services.result import INVALID_ARGUMENT, ServiceResult

log = structlog.get_logger(__name__)


class SubgraphService(BaseService):
    """Enumerate connected induced subgraphs of one graph block."""

    def enumerate(self, k: int, *, limit: int = 0, index: int = 1) -> ServiceResult:
        """List every connected induced subgraph of size *k*.

        Args:
            k: Subgraph size, ``1 <= k <= size``.
            limit: Stop after this many subgraphs; 0 means no limit.
            index: 1-based graph block in the workspace file.

        Subgraphs are reported as 1-based vertex lists in discovery order.
        """
        loaded = self._load_block("enumerate", index)
        if isinstance(loaded, ServiceResult):
            return loaded
        graph = loaded.graph

        started = time.perf_counter()
        try:
            stream = iter_subgraphs(graph, k)
        except InvalidSubgraphSize as exc:
            return ServiceResult.failure("enumerate", INVALID_ARGUMENT, str(exc), k=k)

        if limit > 0:
            # one extra probe tells a complete run from a cut-off one
            found = list(itertools.islice(stream, limit + 1))
            truncated = len(found) > limit
            found = found[:limit]
        else:
            found = list(stream)
            truncated = False

        subgraphs = [[v + 1 for v in subgraph] for subgraph in found]
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        log.debug(
            "enumerate.complete",
            graph=index,
            k=k,
            count=len(subgraphs),
            truncated=truncated,
            elapsed_ms=elapsed_ms,
        )

        warnings = list(loaded.warnings)
        if truncated:
            warnings.append(f"Stopped after {limit} subgraphs (--limit)")
        if not self._workspace.engine(index).is_symmetric():
            warnings.append("Adjacency is not symmetric; connectivity follows stored edges only")

        return ServiceResult(
            ok=True,
            op="enumerate",
            data={
                "graph": index,
                "k": k,
                "count": len(subgraphs),
                "truncated": truncated,
                "subgraphs": subgraphs,
            },
            warnings=warnings,
            meta={"elapsed_ms": elapsed_ms, "size": graph.size},
        )

    def census(self, k: int, *, index: int = 1) -> ServiceResult:
        """Count isomorphism classes among all size-*k* subgraphs."""
        loaded = self._load_block("census", index)
        if isinstance(loaded, ServiceResult):
            return loaded
        graph = loaded.graph

        started = time.perf_counter()
        try:
            classes = census(graph, iter_subgraphs(graph, k))
        except InvalidSubgraphSize as exc:
            return ServiceResult.failure("census", INVALID_ARGUMENT, str(exc), k=k)

        total = sum(c.count for c in classes)
        items: list[dict[str, Any]] = [
            {
                "class": position,
                "count": c.count,
                "share": round(c.count / total, 4) if total else 0.0,
                "edges": c.edge_count,
                "pattern": [list(edge) for edge in c.canonical_edges()],
                "example": [v + 1 for v in c.example],
            }
            for position, c in enumerate(classes, start=1)
        ]
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        log.debug("census.complete", graph=index, k=k, classes=len(items), total=total)

        return ServiceResult(
            ok=True,
            op="census",
            data={"graph": index, "k": k, "total": total, "count": len(items), "items": items},
            warnings=list(loaded.warnings),
            meta={"elapsed_ms": elapsed_ms, "size": graph.size},
        )
