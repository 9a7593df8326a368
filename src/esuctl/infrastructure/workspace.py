"""Workspace — the single dependency injected into every service.

Owns one graph description file: the parsed blocks (loaded lazily on first
access), a NetworkEngine per block, and write-back for edits.

:meth:`edit` hands out the blocks exactly as stored on disk, never
mirrored, so an edit under ``mirror_edges`` changes only the edges it
touches. On a clean exit the file is rewritten and the cached blocks are
dropped; on an exception nothing is written.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from esuctl.infrastructure.engine import NetworkEngine
from esuctl.infrastructure.loader import LoadedGraph, load_graphs, write_graphs

if TYPE_CHECKING:
    from collections.abc import Iterator

    from esuctl.config.settings import EsuSettings

logger = logging.getLogger(__name__)


class Workspace:
    """Lazily loaded graph description file."""

    def __init__(
        self,
        source: Path,
        *,
        mirror_edges: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        self.source = source
        self.mirror_edges = mirror_edges
        self.encoding = encoding
        self._blocks: list[LoadedGraph] | None = None
        self._engines: dict[int, NetworkEngine] = {}

    @classmethod
    def from_settings(cls, settings: EsuSettings, source: Path) -> Workspace:
        return cls(
            source,
            mirror_edges=settings.undirected or settings.loader.mirror_edges,
            encoding=settings.loader.encoding,
        )

    @property
    def blocks(self) -> list[LoadedGraph]:
        """All graph blocks in the file (parsed on first access)."""
        if self._blocks is None:
            logger.debug("Loading graphs from %s", self.source)
            self._blocks = load_graphs(
                self.source,
                mirror_edges=self.mirror_edges,
                encoding=self.encoding,
            )
        return self._blocks

    def block(self, index: int) -> LoadedGraph:
        """Return the 1-based graph block *index*.

        Raises:
            IndexError: No such block in the file.
        """
        if not 1 <= index <= len(self.blocks):
            msg = f"Graph {index} not found in {self.source} ({len(self.blocks)} graph(s))"
            raise IndexError(msg)
        return self.blocks[index - 1]

    def engine(self, index: int) -> NetworkEngine:
        """NetworkX adapter for block *index*, cached until the next edit."""
        if index not in self._engines:
            self._engines[index] = NetworkEngine(self.block(index).graph)
        return self._engines[index]

    @contextmanager
    def edit(self) -> Iterator[list[LoadedGraph]]:
        """Mutate the stored blocks; persist them to ``source`` on clean exit."""
        stored = load_graphs(self.source, mirror_edges=False, encoding=self.encoding)
        yield stored
        write_graphs(self.source, [loaded.graph for loaded in stored], encoding=self.encoding)
        logger.debug("Wrote %d graph(s) to %s", len(stored), self.source)
        self._blocks = None
        self._engines.clear()
