"""Input classification and timestamp/date conversion.

``convert()`` decides whether free text denotes a calendar date or a Unix
timestamp and resolves it to an instant. Parse attempts run in a fixed
order and the first success wins:

1. strict ISO-8601 (extended forms, e.g. ``2024-01-01T00:00:00Z``)
2. compact ``YYYYMMDD`` at local midnight
3. permissive free-form date (``Jan 2, 2024``, ``2024/01/02 10:00 PST``);
   year, month and day must all be present
4. digits-only Unix timestamp, seconds below ``10**11``, milliseconds otherwise

INVARIANT: ``convert()`` is total. Every failure, including instants
outside the representable range, is an ``invalid`` result.
"""

from __future__ import annotations

import logging
import re
import warnings
from datetime import UTC, datetime, timedelta, tzinfo

from dateutil import parser, tz
from pydantic import BaseModel, model_validator

from tsconv.domain.types import InputKind

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Seconds-precision timestamps stay below this until year ~5138; millisecond
# timestamps exceed it for any date after early 1973.
SECONDS_THRESHOLD = 10**11

_DIGITS_RE = re.compile(r"^[0-9]+$")
_COMPACT_DATE_RE = re.compile(r"^[0-9]{8}$")
_NON_ASCII_DIGIT_RE = re.compile(r"(?![0-9])\d")
_ONE_MS = timedelta(milliseconds=1)

# North American abbreviations understood by browser Date parsing.
_TZ_ABBREVIATIONS: dict[str, int] = {
    "UT": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}

# Two fill-in defaults that differ in year, month and day.
_FILL_A = datetime(2001, 1, 1)
_FILL_B = datetime(2002, 2, 2)


class ConversionResult(BaseModel):
    """Classification of one input plus the resolved instant.

    Attributes:
        kind: ``timestamp``, ``date`` or ``invalid``.
        epoch_millis: Milliseconds since the Unix epoch (UTC).
        canonical_string: ISO-8601 rendering, or the normalized source
            text for recognized date forms.
        display_string: ``yyyy-MM-dd HH:mm:ss`` in the local zone.
    """

    model_config = {"frozen": True}

    kind: InputKind
    epoch_millis: int | None = None
    canonical_string: str | None = None
    display_string: str | None = None

    @model_validator(mode="after")
    def _fields_match_kind(self) -> ConversionResult:
        values = (self.epoch_millis, self.canonical_string, self.display_string)
        if self.kind == InputKind.INVALID:
            if any(v is not None for v in values):
                msg = "invalid results carry no conversion fields"
                raise ValueError(msg)
        elif any(v is None for v in values):
            msg = f"{self.kind} results require epoch_millis, canonical_string and display_string"
            raise ValueError(msg)
        return self

    @classmethod
    def invalid(cls) -> ConversionResult:
        return cls(kind=InputKind.INVALID)

    @property
    def is_valid(self) -> bool:
        return self.kind != InputKind.INVALID


# ── Formatting primitives ─────────────────────────────────────────────


def to_epoch_millis(moment: datetime) -> int:
    """Whole milliseconds between the epoch and an aware *moment* (floored)."""
    return (moment - EPOCH) // _ONE_MS


def from_epoch_millis(epoch_millis: int) -> datetime:
    """UTC datetime for *epoch_millis*.

    Raises:
        OverflowError: If the instant falls outside years 1-9999.
    """
    return EPOCH + timedelta(milliseconds=epoch_millis)


def format_wall_clock(moment: datetime) -> str:
    """Render ``yyyy-MM-dd HH:mm:ss`` from *moment*'s own wall clock."""
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def format_iso(moment: datetime) -> str:
    """Render ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    utc = moment.astimezone(UTC)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}T"
        f"{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}.{utc.microsecond // 1000:03d}Z"
    )


# ── Parse attempts (each returns None on failure) ─────────────────────


def _localize(moment: datetime, local_tz: tzinfo) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=local_tz)
    return moment


def _parse_iso(text: str, local_tz: tzinfo) -> datetime | None:
    # Basic-format digit runs belong to the compact-date and timestamp rules.
    if _DIGITS_RE.match(text):
        return None
    try:
        parsed = parser.isoparse(text)
    except (ValueError, OverflowError):
        return None
    return _localize(parsed, local_tz)


def _parse_compact_date(text: str, local_tz: tzinfo) -> datetime | None:
    if not _COMPACT_DATE_RE.match(text):
        return None
    try:
        parsed = datetime.strptime(text, "%Y%m%d")
    except ValueError:
        return None
    return parsed.replace(tzinfo=local_tz)


def _parse_freeform(text: str, local_tz: tzinfo) -> datetime | None:
    if _DIGITS_RE.match(text) or _NON_ASCII_DIGIT_RE.search(text):
        return None
    try:
        with warnings.catch_warnings():
            # An unrecognized zone name must not silently become local time.
            warnings.simplefilter("error", parser.UnknownTimezoneWarning)
            first = parser.parse(text, default=_FILL_A, tzinfos=_TZ_ABBREVIATIONS)
            second = parser.parse(text, default=_FILL_B, tzinfos=_TZ_ABBREVIATIONS)
    except (ValueError, OverflowError, TypeError, parser.UnknownTimezoneWarning):
        return None
    if first != second:
        # Some date component came from the fill-in default.
        return None
    return _localize(first, local_tz)


def _parse_epoch_number(text: str) -> int | None:
    if not _DIGITS_RE.match(text):
        return None
    try:
        value = int(text)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit.
        return None
    if value < SECONDS_THRESHOLD:
        return value * 1000
    return value


# ── Public API ────────────────────────────────────────────────────────


def _build(
    kind: InputKind,
    epoch_millis: int,
    canonical: str | None,
    local_tz: tzinfo,
) -> ConversionResult:
    try:
        instant = from_epoch_millis(epoch_millis)
        iso = format_iso(instant)
        display = format_wall_clock(instant.astimezone(local_tz))
    except (OverflowError, OSError, ValueError):
        logger.debug("Instant %d ms is outside the representable range", epoch_millis)
        return ConversionResult.invalid()
    return ConversionResult(
        kind=kind,
        epoch_millis=epoch_millis,
        canonical_string=canonical if canonical is not None else iso,
        display_string=display,
    )


def convert(text: str, *, local_tz: tzinfo | None = None) -> ConversionResult:
    """Classify *text* and resolve it to an instant.

    Args:
        text: Arbitrary user input. Surrounding whitespace is ignored.
        local_tz: Zone for naive dates and ``display_string``. Defaults to
            the system local zone.

    Returns:
        A ``ConversionResult``; never raises.
    """
    value = text.strip()
    if not value:
        return ConversionResult.invalid()
    zone = local_tz if local_tz is not None else tz.tzlocal()

    moment = _parse_iso(value, zone)
    if moment is not None:
        logger.debug("Classified %r as ISO-8601 date", value)
        return _build(InputKind.DATE, to_epoch_millis(moment), value, zone)

    moment = _parse_compact_date(value, zone)
    if moment is not None:
        logger.debug("Classified %r as compact date", value)
        normalized = f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        return _build(InputKind.DATE, to_epoch_millis(moment), normalized, zone)

    moment = _parse_freeform(value, zone)
    if moment is not None:
        logger.debug("Classified %r as free-form date", value)
        return _build(InputKind.DATE, to_epoch_millis(moment), None, zone)

    epoch_millis = _parse_epoch_number(value)
    if epoch_millis is not None:
        logger.debug("Classified %r as Unix timestamp (%d ms)", value, epoch_millis)
        return _build(InputKind.TIMESTAMP, epoch_millis, None, zone)

    logger.debug("No parser recognized %r", value)
    return ConversionResult.invalid()
