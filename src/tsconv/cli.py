"""Root CLI group for tsconv with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from tsconv import __version__
from tsconv.commands import register_commands
from tsconv.commands._base import TsGroup
from tsconv.commands._context import AppContext
from tsconv.config.settings import TsconvSettings


@click.group(
    cls=TsGroup,
    invoke_without_command=True,
    examples="""\
  tsconv convert 1700000000
  tsconv --json convert "Jan 2, 2024 10:00 PST"
  tsconv --tz Asia/Shanghai convert 20240101
  tsconv -c ./tsconv.toml interactive""",
)
@click.version_option(version=__version__, prog_name="tsconv")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Values only, one per line.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--tz",
    default=None,
    help="Local timezone for naive dates (IANA name, UTC, or +HH:MM).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    tz: str | None,
) -> None:
    """tsconv: Unix timestamp and date string converter."""
    ctx.ensure_object(dict)
    try:
        settings = TsconvSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            tz=tz,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc.errors()[0]['msg']}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
