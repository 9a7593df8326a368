"""Root CLI group for esuctl with global flags and command registration."""

from __future__ import annotations

import click

from esuctl import __version__
from esuctl.commands import register_commands
from esuctl.commands._context import AppContext
from esuctl.config.settings import EsuSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="esuctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--undirected", is_flag=True, help="Mirror every edge read from the input file.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    undirected: bool,
    config_path: str | None,
) -> None:
    """esuctl — enumerate connected induced subgraphs of small graphs."""
    # Only pass flags that were set so env vars and TOML can still apply.
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "undirected": undirected,
    }
    settings = EsuSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
