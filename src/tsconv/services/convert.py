"""ConversionService wraps the converter in the ServiceResult contract.

Blank input is reported as ``EMPTY_INPUT`` (no result yet) and is never
passed to the converter. An ``invalid`` classification becomes
``INVALID_INPUT``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tsconv.domain.conversion import convert
from tsconv.domain.display import derive_display_fields, display_rows
from tsconv.domain.timezones import resolve_timezone, timezone_name
from tsconv.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tsconv.config.settings import TsconvSettings

logger = logging.getLogger(__name__)

OP_CONVERT = "convert"


def _empty() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP_CONVERT,
        error=ServiceError(
            code="EMPTY_INPUT",
            message="Enter a timestamp or date string",
        ),
    )


def _invalid(text: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP_CONVERT,
        data={"input": text, "kind": "invalid"},
        error=ServiceError(
            code="INVALID_INPUT",
            message="Invalid input: enter a valid timestamp or date string",
            detail={"input": text},
        ),
    )


class ConversionService:
    """Convert user text using the zones configured in *settings*.

    Zone specifiers are resolved once at construction.
    """

    def __init__(self, settings: TsconvSettings) -> None:
        self._settings = settings
        self._local_tz = resolve_timezone(settings.local_timezone)
        self._display_tz = resolve_timezone(settings.display.timezone)

    def convert(self, text: str) -> ServiceResult:
        value = text.strip()
        if not value:
            return _empty()

        result = convert(value, local_tz=self._local_tz)
        if not result.is_valid or result.epoch_millis is None:
            return _invalid(value)

        try:
            fields = derive_display_fields(result.epoch_millis, self._display_tz)
        except OverflowError:
            logger.debug("Cannot show %d ms in the display zone", result.epoch_millis)
            return _invalid(value)

        rows = display_rows(result, fields, zoned_label=self._settings.display.label)
        data: dict[str, Any] = {"input": value}
        data.update(result.model_dump(mode="json"))
        data["items"] = [row.model_dump(mode="json") for row in rows]
        return ServiceResult(
            ok=True,
            op=OP_CONVERT,
            data=data,
            meta={
                "local_timezone": timezone_name(self._settings.local_timezone),
                "display_timezone": timezone_name(self._settings.display.timezone),
            },
        )


def field_value(result: ServiceResult, key: str) -> str | None:
    """Value of the row named *key* in a successful convert result."""
    for item in result.data.get("items", []):
        if item.get("key") == key:
            return str(item.get("value", ""))
    return None
