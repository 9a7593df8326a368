"""Output mode dispatch for ServiceResult.

Three modes: ``--json`` dumps the full result, ``--quiet`` prints one bare
line per item, and the default hands off to the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from esuctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from esuctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* according to *settings* (defaults: Rich, non-verbose)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
