"""Rich Console factory and theme for tsconv output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TSCONV_THEME = Theme(
    {
        "tsconv.ok": "bold green",
        "tsconv.error": "bold red",
        "tsconv.warning": "bold yellow",
        "tsconv.op": "bold cyan",
        "tsconv.key": "dim",
        "tsconv.label": "bold",
        "tsconv.value": "",
        "tsconv.kind.timestamp": "magenta",
        "tsconv.kind.date": "green",
    }
)

_KIND_STYLES: dict[str, str] = {
    "timestamp": "tsconv.kind.timestamp",
    "date": "tsconv.kind.date",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TSCONV_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for an input kind."""
    return _KIND_STYLES.get(kind, "")
