"""Command group: inspect and edit a graph description file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from esuctl.commands._base import EsuGroup
from esuctl.services.graph import GraphService

if TYPE_CHECKING:
    from esuctl.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  esuctl graph show rooms.txt
  esuctl graph neighbors rooms.txt 2
  esuctl graph link rooms.txt 1 3 --both
  esuctl graph unlink rooms.txt 1 3
  esuctl --json graph export rooms.txt"""

GRAPH_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)

graph_index_option = click.option(
    "-g",
    "--graph",
    "index",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Which graph block of FILE to use (1-based).",
)


@click.group(cls=EsuGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Inspect and edit graph description files."""


@graph.command(
    examples="""\
  esuctl graph show rooms.txt
  esuctl graph show rooms.txt --graph 2
  esuctl -q graph show rooms.txt"""
)
@click.argument("file", type=GRAPH_FILE)
@graph_index_option
@click.pass_obj
def show(app: AppContext, file: Path, index: int) -> None:
    """List every vertex with its description and neighbors."""
    app.emit(GraphService(app.workspace(file)).show(index=index))


@graph.command(
    examples="""\
  esuctl graph neighbors rooms.txt 2
  esuctl --json graph neighbors rooms.txt 2"""
)
@click.argument("file", type=GRAPH_FILE)
@click.argument("vertex", type=int)
@graph_index_option
@click.pass_obj
def neighbors(app: AppContext, file: Path, vertex: int, index: int) -> None:
    """Show the neighbors of VERTEX (1-based) in insertion order."""
    app.emit(GraphService(app.workspace(file)).neighbors(vertex, index=index))


@graph.command(
    examples="""\
  esuctl graph link rooms.txt 1 3
  esuctl graph link rooms.txt 1 3 --both"""
)
@click.argument("file", type=GRAPH_FILE)
@click.argument("source", type=int)
@click.argument("destination", type=int)
@click.option("--both", is_flag=True, help="Also add the reverse edge.")
@graph_index_option
@click.pass_obj
def link(
    app: AppContext, file: Path, source: int, destination: int, both: bool, index: int
) -> None:
    """Add the edge SOURCE -> DESTINATION and rewrite FILE."""
    svc = GraphService(app.workspace(file))
    app.emit(svc.link(source, destination, both=both, index=index))


@graph.command(
    examples="""\
  esuctl graph unlink rooms.txt 1 3
  esuctl graph unlink rooms.txt 1 3 --both"""
)
@click.argument("file", type=GRAPH_FILE)
@click.argument("source", type=int)
@click.argument("destination", type=int)
@click.option("--both", is_flag=True, help="Also remove the reverse edge.")
@graph_index_option
@click.pass_obj
def unlink(
    app: AppContext, file: Path, source: int, destination: int, both: bool, index: int
) -> None:
    """Remove the edge SOURCE -> DESTINATION and rewrite FILE."""
    svc = GraphService(app.workspace(file))
    app.emit(svc.unlink(source, destination, both=both, index=index))


@graph.command(
    examples="""\
  esuctl graph export rooms.txt
  esuctl -q graph export rooms.txt > rooms.json"""
)
@click.argument("file", type=GRAPH_FILE)
@graph_index_option
@click.pass_obj
def export(app: AppContext, file: Path, index: int) -> None:
    """Print the graph as NetworkX node-link JSON."""
    app.emit(GraphService(app.workspace(file)).export(index=index))
