"""Timezone specifier resolution.

A specifier is one of:
- empty / None: the system local zone (DST-aware via ``dateutil.tz``)
- ``UTC`` or ``Z``
- a fixed offset: ``+08:00``, ``-0530``, ``UTC+8``, ``GMT-03:30``
- an IANA zone name: ``Asia/Shanghai``
"""

from __future__ import annotations

import re
from datetime import UTC, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz

_OFFSET_RE = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)

DEFAULT_DISPLAY_TIMEZONE = "+08:00"


class InvalidTimezoneError(ValueError):
    """Raised when a timezone specifier cannot be resolved."""


def parse_offset(spec: str) -> timezone | None:
    """Parse a fixed UTC offset specifier, or return None if *spec* is not one."""
    match = _OFFSET_RE.match(spec.strip())
    if match is None:
        return None
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
    if delta >= timedelta(hours=24):
        return None
    return timezone(-delta if sign == "-" else delta)


def resolve_timezone(spec: str | None) -> tzinfo:
    """Resolve *spec* to a ``tzinfo``.

    Raises:
        InvalidTimezoneError: If *spec* is neither an offset nor a known zone.
    """
    if spec is None or not spec.strip():
        return tz.tzlocal()
    text = spec.strip()
    if text.upper() in ("UTC", "Z", "GMT"):
        return UTC
    offset = parse_offset(text)
    if offset is not None:
        return offset
    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone: {spec!r}"
        raise InvalidTimezoneError(msg) from exc


def timezone_name(spec: str | None) -> str:
    """Human-readable name for a specifier (``local`` when empty)."""
    if spec is None or not spec.strip():
        return "local"
    return spec.strip()
