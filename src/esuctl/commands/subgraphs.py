"""Standalone commands: enumerate and census."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from esuctl.commands._base import EsuCommand
from esuctl.commands.graph import GRAPH_FILE, graph_index_option
from esuctl.services.subgraphs import SubgraphService

if TYPE_CHECKING:
    from pathlib import Path

    from esuctl.commands._context import AppContext

_k_option = click.option(
    "-k",
    "--size",
    "k",
    type=int,
    default=None,
    help="Subgraph size (default: [enumerate] default_k).",
)


@click.command(
    "enumerate",
    cls=EsuCommand,
    examples="""\
  esuctl enumerate rooms.txt -k 3
  esuctl --undirected enumerate rooms.txt -k 4 --limit 20
  esuctl -q enumerate rooms.txt -k 3""",
)
@click.argument("file", type=GRAPH_FILE)
@_k_option
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Stop after N subgraphs (0: no limit).",
)
@graph_index_option
@click.pass_obj
def enumerate_cmd(
    app: AppContext, file: Path, k: int | None, limit: int | None, index: int
) -> None:
    """List every connected induced subgraph of size K."""
    cfg = app.settings.enumerate
    svc = SubgraphService(app.workspace(file))
    app.emit(
        svc.enumerate(
            cfg.default_k if k is None else k,
            limit=cfg.limit if limit is None else limit,
            index=index,
        )
    )


@click.command(
    cls=EsuCommand,
    examples="""\
  esuctl census rooms.txt -k 3
  esuctl --json census rooms.txt -k 4""",
)
@click.argument("file", type=GRAPH_FILE)
@_k_option
@graph_index_option
@click.pass_obj
def census(app: AppContext, file: Path, k: int | None, index: int) -> None:
    """Count size-K subgraphs by isomorphism class."""
    k = app.settings.enumerate.default_k if k is None else k
    app.emit(SubgraphService(app.workspace(file)).census(k, index=index))
