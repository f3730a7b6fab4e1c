"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tsconv.toml only contains overrides.
Timezone specifiers are validated when the config is loaded, so a bad
zone name fails before any conversion runs.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from tsconv.domain.display import DEFAULT_ZONED_LABEL
from tsconv.domain.timezones import DEFAULT_DISPLAY_TIMEZONE, resolve_timezone


def _check_timezone(value: str) -> str:
    resolve_timezone(value)
    return value.strip()


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    timezone: str = DEFAULT_DISPLAY_TIMEZONE
    label: str = DEFAULT_ZONED_LABEL

    @field_validator("timezone")
    @classmethod
    def _valid_timezone(cls, value: str) -> str:
        if not value.strip():
            msg = "display timezone must not be empty"
            raise ValueError(msg)
        return _check_timezone(value)


class ConversionConfig(BaseModel):
    """[conversion] section.

    An empty ``local_timezone`` means the system local zone.
    """

    model_config = {"frozen": True}

    local_timezone: str = ""

    @field_validator("local_timezone")
    @classmethod
    def _valid_timezone(cls, value: str) -> str:
        return _check_timezone(value)
