"""Derived display strings and the ordered rows shown for each result kind.

Everything here is computed from ``epoch_millis`` alone so it can be
reproduced exactly from a serialized ``ConversionResult``.
"""

from __future__ import annotations

from datetime import UTC, tzinfo

from pydantic import BaseModel

from tsconv.domain.conversion import ConversionResult, format_wall_clock, from_epoch_millis
from tsconv.domain.types import FieldKey, InputKind

DEFAULT_ZONED_LABEL = "Beijing Time"

_LABELS: dict[FieldKey, str] = {
    FieldKey.ISO: "ISO format",
    FieldKey.UTC: "UTC time",
    FieldKey.MILLIS: "Timestamp (ms)",
    FieldKey.SECONDS: "Timestamp (s)",
}

_ROW_ORDER: dict[InputKind, tuple[FieldKey, ...]] = {
    InputKind.TIMESTAMP: (
        FieldKey.FORMATTED,
        FieldKey.ISO,
        FieldKey.ZONED,
        FieldKey.UTC,
        FieldKey.MILLIS,
        FieldKey.SECONDS,
    ),
    InputKind.DATE: (
        FieldKey.MILLIS,
        FieldKey.SECONDS,
        FieldKey.FORMATTED,
        FieldKey.ISO,
        FieldKey.ZONED,
        FieldKey.UTC,
    ),
}


class DisplayFields(BaseModel):
    """Strings derived from an instant's epoch milliseconds."""

    model_config = {"frozen": True}

    zoned: str
    utc: str
    millis: str
    seconds: str


class DisplayRow(BaseModel):
    """One labelled, copyable value."""

    model_config = {"frozen": True}

    key: FieldKey
    label: str
    value: str


def derive_display_fields(epoch_millis: int, display_tz: tzinfo) -> DisplayFields:
    """Compute the display-zone, UTC, millisecond and second renderings.

    Raises:
        OverflowError: If the instant cannot be shown in *display_tz*.
    """
    instant = from_epoch_millis(epoch_millis)
    return DisplayFields(
        zoned=format_wall_clock(instant.astimezone(display_tz)),
        utc=format_wall_clock(instant.astimezone(UTC)),
        millis=str(epoch_millis),
        seconds=str(epoch_millis // 1000),
    )


def _label(key: FieldKey, kind: InputKind, zoned_label: str) -> str:
    if key == FieldKey.FORMATTED:
        return "Date string" if kind == InputKind.TIMESTAMP else "Formatted date"
    if key == FieldKey.ZONED:
        return zoned_label
    return _LABELS[key]


def display_rows(
    result: ConversionResult,
    fields: DisplayFields,
    *,
    zoned_label: str = DEFAULT_ZONED_LABEL,
) -> list[DisplayRow]:
    """Ordered rows for a valid *result*; empty for ``invalid``."""
    if not result.is_valid:
        return []
    values: dict[FieldKey, str] = {
        FieldKey.FORMATTED: result.display_string or "",
        FieldKey.ISO: result.canonical_string or "",
        FieldKey.ZONED: fields.zoned,
        FieldKey.UTC: fields.utc,
        FieldKey.MILLIS: fields.millis,
        FieldKey.SECONDS: fields.seconds,
    }
    return [
        DisplayRow(key=key, label=_label(key, result.kind, zoned_label), value=values[key])
        for key in _ROW_ORDER[result.kind]
    ]
