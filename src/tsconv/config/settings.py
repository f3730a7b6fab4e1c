"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``TSCONV_*`` prefix
  3. TOML file: ``tsconv.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reads the file located by ``find_config`` in
:mod:`tsconv.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tsconv.config.discovery import find_config, read_config
from tsconv.config.models import ConversionConfig, DisplayConfig
from tsconv.domain.timezones import resolve_timezone


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``tsconv.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TsconvSettings(BaseSettings):
    """Unified settings for the tsconv CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on
    the :class:`AppContext` held in ``click.Context.obj``.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        tz: ``--tz`` override for the local zone; wins over
            ``[conversion] local_timezone``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TSCONV_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    tz: str | None = None

    # --- TOML sections ---
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)

    @field_validator("tz")
    @classmethod
    def _valid_tz(cls, value: str | None) -> str | None:
        if value is not None:
            resolve_timezone(value)
        return value

    @property
    def local_timezone(self) -> str:
        """Effective local-zone specifier (empty string means system local)."""
        if self.tz is not None:
            return self.tz
        return self.conversion.local_timezone

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TsconvSettings:
        """Construct settings from CLI invocation.

        Discovers ``tsconv.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.  Flags passed as None are left to lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
