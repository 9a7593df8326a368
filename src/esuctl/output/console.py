"""Rich Console factory and theme for esuctl output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops color codes when not writing to a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ESU_THEME = Theme(
    {
        "esu.ok": "bold green",
        "esu.error": "bold red",
        "esu.warning": "bold yellow",
        "esu.op": "bold cyan",
        "esu.key": "dim",
        "esu.vertex": "bold blue",
        "esu.label": "bold",
        "esu.count": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=ESU_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
