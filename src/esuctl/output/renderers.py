"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; ``render_result`` picks
one by ``result.op`` and falls back to a key-value listing for unknown ops.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from esuctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from esuctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: bare vertex numbers, one item per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "enumerate":
        return "\n".join(_vertex_line(s) for s in data.get("subgraphs", []))
    if result.op == "census":
        return "\n".join(
            f"{item['count']} {_vertex_line(item['example'])}" for item in data["items"]
        )
    if result.op == "neighbors":
        return _vertex_line(item["vertex"] for item in data.get("items", []))
    if result.op == "show":
        return "\n".join(
            f"{v['vertex']}: {_vertex_line(v['neighbors'])}".rstrip() for v in data["vertices"]
        )
    if result.op == "export":
        return json.dumps(data["node_link"], separators=(",", ":"))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _vertex_line(vertices: Any) -> str:
    return " ".join(str(v) for v in vertices)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="esu.ok"), Text(f"  {result.op}", style="esu.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="esu.key")
    style = "esu.vertex" if key in {"vertex", "source", "destination"} else ""
    console.print(k, Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="esu.error"),
        Text(f"  {result.op}", style="esu.op"),
        Text(" — "),
        msg,
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Graph renderers ───────────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Adjacency listing: one row per vertex with its label and neighbors."""
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Vertex", style="esu.vertex", justify="right", no_wrap=True)
    table.add_column("Description", style="esu.label")
    table.add_column("To")
    if verbose:
        table.add_column("Degree", justify="right")

    for v in d.get("vertices", []):
        row = [str(v["vertex"]), str(v["label"]), _vertex_line(v["neighbors"]) or "-"]
        if verbose:
            row.append(str(len(v["neighbors"])))
        table.add_row(*row)

    console.print(table)
    symmetric = "symmetric" if d.get("symmetric") else "directional"
    console.print(
        f"\n{d.get('count', 0)} vertices, "
        f"{d.get('edges', 0)} edges ({symmetric}), "
        f"{d.get('components', 0)} component(s)"
    )


def _render_neighbors(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "vertex", d["vertex"])
    _field(console, "label", d["label"])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("To", style="esu.vertex", justify="right")
    table.add_column("Description", style="esu.label")
    for item in d.get("items", []):
        table.add_row(str(item["vertex"]), str(item["label"]))
    console.print(table)
    console.print(f"\n{d.get('count', 0)} neighbors")


def _render_enumerate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Vertices", style="esu.vertex")
    for position, subgraph in enumerate(d.get("subgraphs", []), start=1):
        table.add_row(str(position), _vertex_line(subgraph))
    console.print(table)

    suffix = " (truncated)" if d.get("truncated") else ""
    console.print(f"\n{d.get('count', 0)} connected subgraphs of size {d.get('k')}{suffix}")
    if verbose:
        _render_meta(console, result)


def _render_census(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Class", justify="right")
    table.add_column("Count", style="esu.count", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Pattern")
    table.add_column("Example", style="esu.vertex")
    for item in d.get("items", []):
        pattern = " ".join(f"{a}-{b}" for a, b in item["pattern"])
        table.add_row(
            str(item["class"]),
            str(item["count"]),
            f"{item['share']:.2%}",
            str(item["edges"]),
            pattern,
            _vertex_line(item["example"]),
        )
    console.print(table)
    console.print(f"\n{d.get('total', 0)} subgraphs in {d.get('count', 0)} classes (k={d.get('k')})")
    if verbose:
        _render_meta(console, result)


def _render_edit(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render link/unlink results."""
    d = result.data
    _status_line(console, result)
    _field(console, "source", d["source"])
    _field(console, "destination", d["destination"])
    changed = ", ".join(f"{a} -> {b}" for a, b in d.get("changed", [])) or "none"
    _field(console, "changed", changed)
    if verbose:
        _field(console, "path", d.get("path", ""))


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print_json(data=result.data["node_link"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "show": _render_show,
    "neighbors": _render_neighbors,
    "enumerate": _render_enumerate,
    "census": _render_census,
    "link": _render_edit,
    "unlink": _render_edit,
    "export": _render_export,
}
