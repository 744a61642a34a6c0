"""Rich Console factory and theme for resolution output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RESOLUTION_THEME = Theme(
    {
        "res.header": "bold",
        "res.error": "bold red",
        "res.label": "dim",
        "res.position": "bold blue",
        "res.old": "red",
        "res.new": "green",
        "res.meta": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=RESOLUTION_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
