"""Input classification enums."""

from __future__ import annotations

from enum import StrEnum


class InputKind(StrEnum):
    """Mutually exclusive classification of a converter input."""

    TIMESTAMP = "timestamp"
    DATE = "date"
    INVALID = "invalid"


class FieldKey(StrEnum):
    """Keys of the rendered display rows."""

    FORMATTED = "formatted"
    ISO = "iso"
    ZONED = "zoned"
    UTC = "utc"
    MILLIS = "millis"
    SECONDS = "seconds"
