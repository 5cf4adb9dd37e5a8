"""Rich Console factory and theme for itemctl output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ITEM_THEME = Theme(
    {
        "item.ok": "bold green",
        "item.error": "bold red",
        "item.warning": "bold yellow",
        "item.op": "bold cyan",
        "item.key": "dim",
        "item.identity": "bold blue",
        "item.metadata": "dim",
        "item.count": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable test output.
    """
    return Console(
        file=StringIO(),
        theme=ITEM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
