"""Graph description reader and writer.

Text format, one or more blocks back to back::

    3               vertex count
    Kitchen         one label line per vertex
    Hallway
    Garden
    1 2             1-based "source destination" pairs
    2 3
    0 0             terminator (source 0), or end of input

Malformed input never raises past the first line of a block: the reader stops
consuming input, keeps the partial graph, and records a warning on the
LoadedGraph. Only an unreadable or oversize vertex count is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from esuctl.domain.errors import GraphFormatError
from esuctl.domain.graph import Graph

log = structlog.get_logger(__name__)

SENTINEL = (0, 0)


@dataclass
class LoadedGraph:
    """A graph read from one block, plus any non-fatal reader warnings."""

    graph: Graph
    index: int = 1
    warnings: list[str] = field(default_factory=list)


def parse_graphs(text: str, *, mirror_edges: bool = False) -> list[LoadedGraph]:
    """Parse every graph block in *text*.

    Args:
        text: Graph description in the block format above.
        mirror_edges: Insert ``(b, a)`` alongside every ``(a, b)``.

    Raises:
        GraphFormatError: A block does not start with an integer count.
        GraphCapacityError: A block declares more vertices than supported.
    """
    lines = text.splitlines()
    blocks: list[LoadedGraph] = []
    pos = _skip_blank(lines, 0)
    while pos < len(lines):
        loaded, pos = _read_block(lines, pos, len(blocks) + 1, mirror_edges=mirror_edges)
        blocks.append(loaded)
        pos = _skip_blank(lines, pos)
    return blocks


def load_graphs(
    path: Path,
    *,
    mirror_edges: bool = False,
    encoding: str = "utf-8",
) -> list[LoadedGraph]:
    """Read and parse a graph description file.

    Raises:
        GraphFormatError: The file cannot be decoded with *encoding*, or
            *encoding* is not a known codec.
    """
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        msg = f"{path} is not valid {encoding}: {exc.reason} at byte {exc.start}"
        raise GraphFormatError(msg) from exc
    except LookupError as exc:
        msg = f"Unknown encoding {encoding!r}"
        raise GraphFormatError(msg) from exc
    return parse_graphs(text, mirror_edges=mirror_edges)


def dump_graph(graph: Graph) -> str:
    """Serialize *graph* into one block, edges in storage order."""
    lines = [str(graph.size), *graph.labels()]
    lines.extend(f"{source} {destination}" for source, destination in graph.edges())
    lines.append(f"{SENTINEL[0]} {SENTINEL[1]}")
    return "\n".join(lines) + "\n"


def write_graphs(path: Path, graphs: list[Graph], *, encoding: str = "utf-8") -> None:
    """Write *graphs* to *path* as consecutive blocks, replacing its content."""
    path.write_text("".join(dump_graph(g) for g in graphs), encoding=encoding)


# ── Internals ────────────────────────────────────────────────────────


def _skip_blank(lines: list[str], pos: int) -> int:
    while pos < len(lines) and not lines[pos].strip():
        pos += 1
    return pos


def _read_block(
    lines: list[str],
    pos: int,
    index: int,
    *,
    mirror_edges: bool,
) -> tuple[LoadedGraph, int]:
    """Read one block starting at *pos*; return it and the next unread line."""
    head = lines[pos].split()
    try:
        size = int(head[0])
    except ValueError as exc:
        msg = f"Line {pos + 1}: expected a vertex count, got {head[0]!r}"
        raise GraphFormatError(msg) from exc
    pos += 1

    loaded = LoadedGraph(graph=Graph(size), index=index)
    graph = loaded.graph

    for v in range(size):
        if pos >= len(lines):
            _truncated(loaded, f"expected {size} labels, found {v}")
            return loaded, pos
        graph.set_label(v, lines[pos].rstrip())
        pos += 1

    pending: list[int] = []
    while pos < len(lines):
        line_no = pos + 1
        tokens = lines[pos].split()
        pos += 1
        for token in tokens:
            try:
                pending.append(int(token))
            except ValueError:
                _truncated(loaded, f"line {line_no}: non-integer token {token!r}")
                return loaded, len(lines)
            if len(pending) < 2:
                continue
            source, destination = pending
            pending.clear()
            if source == SENTINEL[0]:
                return loaded, pos
            _insert(loaded, source, destination, line_no, mirror_edges=mirror_edges)

    if pending:
        _truncated(loaded, f"dangling vertex {pending[0]} without a destination")
    return loaded, pos


def _insert(
    loaded: LoadedGraph,
    source: int,
    destination: int,
    line_no: int,
    *,
    mirror_edges: bool,
) -> None:
    graph = loaded.graph
    if source == destination or not (
        1 <= source <= graph.size and 1 <= destination <= graph.size
    ):
        loaded.warnings.append(f"line {line_no}: ignored edge {source} -> {destination}")
        return
    graph.insert_edge(source, destination)
    if mirror_edges:
        graph.insert_edge(destination, source)


def _truncated(loaded: LoadedGraph, reason: str) -> None:
    log.warning("loader.truncated", graph=loaded.index, reason=reason)
    loaded.warnings.append(f"graph {loaded.index} truncated: {reason}")
