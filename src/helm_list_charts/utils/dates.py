"""Timestamp formatting for the CREATED column."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo

from helm_list_charts.models import UNSPECIFIED

_RFC3339 = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})\Z",
    re.ASCII,
)

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Fractional seconds beyond microsecond precision are truncated and a leap
    second is clamped to ``:59``. Returns ``None`` for anything else.
    """
    match = _RFC3339.match(value)
    if match is None:
        return None

    offset = match["offset"]
    if offset in ("Z", "z"):
        tz: tzinfo = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            return None
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            min(int(match["second"]), 59),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError:
        return None


def humanize(moment: datetime) -> str:
    """Render ``moment`` as e.g. ``Feb 13, 2025 12:42 pm``."""
    hour = moment.hour % 12 or 12
    meridiem = "am" if moment.hour < 12 else "pm"
    return (
        f"{_MONTHS[moment.month - 1]} {moment.day}, {moment.year} "
        f"{hour}:{moment.minute:02d} {meridiem}"
    )


def format_created(value: str | None, tz: tzinfo | None = None) -> str:
    """Format a ``created`` field in local time (or ``tz`` when given).

    Values that are not RFC 3339 timestamps are returned unchanged.
    """
    if value is None:
        return UNSPECIFIED

    moment = parse_rfc3339(value)
    if moment is None:
        return value
    return humanize(moment.astimezone(tz))
