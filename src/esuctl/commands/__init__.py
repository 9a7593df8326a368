"""Subcommand modules for esuctl.

register_commands() defers imports so ``esuctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``graph`` group and the standalone commands."""
    from esuctl.commands.graph import graph

    cli.add_command(graph)

    from esuctl.commands.subgraphs import census, enumerate_cmd

    cli.add_command(enumerate_cmd)
    cli.add_command(census)
