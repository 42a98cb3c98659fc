"""Rich Console factory and theme for objfacade output.

Consoles render into a StringIO buffer so formatters keep returning ``str``.
In non-TTY environments (tests, pipes) Rich disables color codes itself.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FACADE_THEME = Theme(
    {
        "ofc.ok": "bold green",
        "ofc.error": "bold red",
        "ofc.warning": "bold yellow",
        "ofc.op": "bold cyan",
        "ofc.key": "dim",
        "ofc.name": "bold",
        "ofc.type": "magenta",
        "ofc.flag.on": "green",
        "ofc.flag.off": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=FACADE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
