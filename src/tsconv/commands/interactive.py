"""Command: read inputs line by line and convert each one."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from tsconv.commands._base import TsCommand

if TYPE_CHECKING:
    from tsconv.commands._context import AppContext

_QUIT_WORDS = frozenset({"q", "quit", "exit"})


def _prompts_enabled(stream: IO[str]) -> bool:
    """Prompt only for a human at a terminal; piped input stays silent."""
    return stream.isatty()


@click.command(
    cls=TsCommand,
    examples="""\
  tsconv interactive
  tsconv --quiet interactive
  printf '1700000000\\n20240101\\n' | tsconv --json interactive""",
)
@click.option("--prompt", "prompt_text", default="tsconv", help="Prompt label.")
@click.pass_obj
def interactive(app: AppContext, prompt_text: str) -> None:
    """Convert each entered line until 'q' or end of input.

    Blank lines produce no result; invalid lines are reported on stderr
    and the session continues. The prompt is written to stderr, so stdout
    carries only results.
    """
    svc = app.service
    stdin = click.get_text_stream("stdin")
    show_prompt = _prompts_enabled(stdin)
    while True:
        if show_prompt:
            click.echo(f"{prompt_text}> ", nl=False, err=True)
        line = stdin.readline()
        if not line:
            break
        text = line.strip()
        if text.lower() in _QUIT_WORDS:
            break
        if not text:
            continue
        app.show(svc.convert(text))
