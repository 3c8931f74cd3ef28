"""Rich Console factory and theme for CLI output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SHOWCASE_THEME = Theme(
    {
        "layers.ok": "bold green",
        "layers.error": "bold red",
        "layers.op": "bold cyan",
        "layers.key": "dim",
        "layers.id": "bold blue",
        "layers.name": "bold",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=SHOWCASE_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
