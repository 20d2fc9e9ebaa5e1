"""Rich Console factory and theme.

Consoles render into a StringIO buffer so that renderers return plain
strings. Rich drops color codes on its own when output is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MOKA_THEME = Theme(
    {
        "moka.ok": "bold green",
        "moka.error": "bold red",
        "moka.warning": "bold yellow",
        "moka.op": "bold cyan",
        "moka.key": "dim",
        "moka.title": "bold",
        "moka.link": "underline blue",
        "moka.kind.article": "green",
        "moka.kind.cheatsheet": "magenta",
        "moka.kind.guide": "yellow",
        "moka.level.beginner": "green",
        "moka.level.intermediate": "yellow",
        "moka.level.advanced": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing to an in-memory buffer."""
    return Console(
        file=StringIO(),
        theme=MOKA_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Rendered text of a StringIO-backed console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    return f"moka.kind.{kind}" if kind in {"article", "cheatsheet", "guide"} else ""


def style_for_level(level_name: str) -> str:
    return f"moka.level.{level_name}" if level_name else ""
