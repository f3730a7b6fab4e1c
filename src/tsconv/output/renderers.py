"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Successful results are rendered as a conversion table; failures as a
single error line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tsconv.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from tsconv.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_conversion(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Row values are printed one per line, without labels.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_value(item) for item in items if _extract_value(item))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_value(item: Any) -> str:
    if isinstance(item, dict):
        val = item.get("value")
        if val is not None:
            return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="tsconv.ok")
    op = Text(f"  {result.op}", style="tsconv.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tsconv.key")
    if key == "kind":
        v = Text(str(value), style=style_for_kind(str(value)))
    else:
        v = Text(str(value))
    console.print(k + v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tsconv.error")
    op = Text(f"  {result.op}", style="tsconv.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Conversion renderer ───────────────────────────────────────────────


def _render_conversion(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a conversion as a two-column label/value table."""
    d = result.data
    _status_line(console, result)
    _field(console, "input", d.get("input", ""))
    _field(console, "kind", d.get("kind", ""))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="tsconv.label", no_wrap=True)
    table.add_column("Value", style="tsconv.value", no_wrap=True)
    for item in d.get("items", []):
        table.add_row(str(item.get("label", "")), str(item.get("value", "")))
    console.print()
    console.print(table)

    if verbose:
        _render_meta(console, result)
