"""Timestamp parsing and bucket-key helpers shared by the aggregator transforms.

parse_timestamp() keeps the wall clock and the zone offset exactly as written
so that hour/minute bucketing happens in the event's own zone. Two formats are
accepted:

- the dashboard export format, e.g. "July 8, 2025 at 7:03:02 AM UTC+7"
- ISO 8601, e.g. "2025-07-08T07:03:02+07:00" (naive values are taken as UTC)
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any

from logindash.aggregator.config import DEFAULT_BUCKET_MINUTES
from logindash.aggregator.events import MalformedTimestamp

# Separator between bucket start and end minute (EN DASH).
BUCKET_RANGE_SEP = "–"

_MONTHS = {
    name: i
    for i, names in enumerate(
        [
            ("january", "jan"),
            ("february", "feb"),
            ("march", "mar"),
            ("april", "apr"),
            ("may",),
            ("june", "jun"),
            ("july", "jul"),
            ("august", "aug"),
            ("september", "sep", "sept"),
            ("october", "oct"),
            ("november", "nov"),
            ("december", "dec"),
        ],
        start=1,
    )
    for name in names
}

_EXPORT_RE = re.compile(
    r"""
    ^(?P<month>[A-Za-z]+)\.?\s+
    (?P<day>\d{1,2}),\s*
    (?P<year>\d{4})
    (?:\s+at|,)?\s+
    (?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?
    (?:\s*(?P<ampm>[AaPp][Mm]))?
    (?:\s*(?:UTC|GMT)(?P<offset>[+-]\d{1,2}(?::?\d{2})?)?)?
    $""",
    re.VERBOSE,
)


def _parse_offset(offset: str, source: str) -> timezone:
    sign = -1 if offset[0] == "-" else 1
    body = offset[1:]
    if ":" in body:
        hours_s, minutes_s = body.split(":", 1)
    elif len(body) <= 2:
        hours_s, minutes_s = body, "0"
    else:
        hours_s, minutes_s = body[:-2], body[-2:]
    hours, minutes = int(hours_s), int(minutes_s)
    if hours > 23 or minutes > 59:
        raise MalformedTimestamp(source, f"offset {offset!r} out of range")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _parse_export(match: re.Match) -> datetime:
    month = _MONTHS.get(match["month"].lower())
    if month is None:
        raise MalformedTimestamp(match.string, f"unknown month {match['month']!r}")

    hour = int(match["hour"])
    ampm = match["ampm"]
    if ampm:
        if not 1 <= hour <= 12:
            raise MalformedTimestamp(match.string, "12-hour clock hour out of range")
        hour = hour % 12 + (12 if ampm.lower() == "pm" else 0)

    tz = _parse_offset(match["offset"], match.string) if match["offset"] else timezone.utc
    return datetime(
        int(match["year"]),
        month,
        int(match["day"]),
        hour,
        int(match["minute"]),
        int(match["second"] or 0),
        tzinfo=tz,
    )


def parse_timestamp(text: Any) -> datetime:
    """Parse an event timestamp into a timezone-aware datetime.

    The returned wall clock (hour, minute) is the one written in the text; the
    offset is attached, never converted.

    Args:
        text: Timestamp text in export or ISO 8601 format.

    Returns:
        Aware datetime.

    Raises:
        MalformedTimestamp: If the text is not a string or cannot be parsed
            into a valid instant.
    """
    if not isinstance(text, str):
        raise MalformedTimestamp(text, "not a string")
    s = text.strip()
    if not s:
        raise MalformedTimestamp(text, "empty")

    try:
        match = _EXPORT_RE.match(s)
        if match is not None:
            return _parse_export(match)

        iso = s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s
        dt = datetime.fromisoformat(iso)
    except MalformedTimestamp:
        raise
    except ValueError as e:
        raise MalformedTimestamp(text, str(e)) from e

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def bucket_start(minute: int, width: int = DEFAULT_BUCKET_MINUTES) -> int:
    """First minute of the bucket containing minute: floor(minute / width) * width."""
    return (minute // width) * width


def bucket_end(start: int, width: int = DEFAULT_BUCKET_MINUTES) -> int:
    """Last minute of the bucket starting at start, clipped to 59 (never wraps the hour)."""
    return min(start + width - 1, 59)


def format_bucket_key(hour: int, start: int, end: int, zero_pad_hour: bool = False) -> str:
    """Build "<hour>:<start:02d>–<end:02d>"; hour is unpadded unless zero_pad_hour."""
    hour_s = f"{hour:02d}" if zero_pad_hour else str(hour)
    return f"{hour_s}:{start:02d}{BUCKET_RANGE_SEP}{end:02d}"


def bucket_key_for(
    dt: datetime,
    width: int = DEFAULT_BUCKET_MINUTES,
    zero_pad_hour: bool = False,
) -> str:
    """Bucket key for a parsed timestamp, using its own wall clock."""
    start = bucket_start(dt.minute, width)
    return format_bucket_key(dt.hour, start, bucket_end(start, width), zero_pad_hour)
