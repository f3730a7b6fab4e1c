"""Subcommand modules for tsconv.

Provides register_commands() which uses deferred imports to keep
``tsconv --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tsconv.commands.convert import convert_cmd
    from tsconv.commands.interactive import interactive

    cli.add_command(convert_cmd)
    cli.add_command(interactive)
