"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsconv.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tsconv.config.settings import TsconvSettings
    from tsconv.services.convert import ConversionService
    from tsconv.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The conversion
    service is created on first use so ``--help`` and ``--version``
    never resolve timezones.
    """

    def __init__(self, settings: TsconvSettings) -> None:
        self.settings = settings
        self._service: ConversionService | None = None

        from tsconv.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ConversionService:
        """The conversion service (created lazily on first access)."""
        if self._service is None:
            from tsconv.services.convert import ConversionService

            self._service = ConversionService(self.settings)
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def show(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult without exiting.

        Success goes to stdout, failure to stderr.
        """
        output = format_result(result, settings=self.output_settings)
        click.echo(output, err=not result.ok)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        self.show(result)
        if not result.ok:
            raise SystemExit(1)

    def emit_field(self, result: ServiceResult, key: str) -> None:
        """Print one raw row value, suitable for piping to a clipboard tool.

        Failures are emitted exactly as :meth:`emit` would.
        """
        from tsconv.services.convert import field_value

        value = field_value(result, key) if result.ok else None
        if value is None:
            self.emit(result)
            return
        click.echo(value)
