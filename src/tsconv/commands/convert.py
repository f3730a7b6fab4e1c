"""Command: convert one timestamp or date string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsconv.commands._base import TsCommand
from tsconv.domain.types import FieldKey

if TYPE_CHECKING:
    from tsconv.commands._context import AppContext


@click.command(
    "convert",
    cls=TsCommand,
    examples="""\
  tsconv convert 1700000000
  tsconv convert 1700000000000
  tsconv convert 20240101
  tsconv convert 2024-01-01T00:00:00Z
  tsconv convert "Jan 2, 2024"
  tsconv convert 1700000000 --field iso
  tsconv --tz UTC convert 20240101
  tsconv --json convert 2024/01/02 10:00""",
)
@click.argument("text", nargs=-1)
@click.option(
    "-f",
    "--field",
    type=click.Choice([k.value for k in FieldKey]),
    default=None,
    help="Print only this value (for piping to a clipboard tool).",
)
@click.pass_obj
def convert_cmd(app: AppContext, text: tuple[str, ...], field: str | None) -> None:
    """Convert a Unix timestamp or date string into every representation."""
    result = app.service.convert(" ".join(text))
    if field:
        app.emit_field(result, field)
    else:
        app.emit(result)
