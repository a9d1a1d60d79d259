"""
Syndication date-time handling.

RFC-822 (RSS) and RFC-3339 (Atom, Dublin Core) parsing and formatting.
Parsed values are always timezone-aware; naive inputs are taken as UTC.
"""

import re
from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime

from dateutil import parser as dateutil_parser

# Zones the email parser does not know about, expressed as numeric offsets.
_EXTRA_ZONE_OFFSETS = {
    "CET": "+0100",
    "CEST": "+0200",
    "A": "-0100",
    "M": "-1200",
    "N": "+0100",
    "Y": "+1200",
}

_DATEUTIL_TZINFOS = {
    "UT": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
    "CET": 3600,
    "CEST": 2 * 3600,
}

_YEAR = re.compile(r"\d{4}")


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _replace_extra_zone(text: str) -> str:
    head, _, zone = text.rpartition(" ")
    offset = _EXTRA_ZONE_OFFSETS.get(zone.upper())
    if head and offset:
        return f"{head} {offset}"
    return text


def try_parse_rfc822(value: str | None) -> datetime | None:
    """
    Parse an RFC-822 date-time such as 'Sat, 07 Sep 2002 00:00:01 GMT'.

    Args:
        value: Date-time text.

    Returns:
        Aware datetime, or None if the text cannot be parsed.
    """
    if not value or not value.strip():
        return None
    text = _replace_extra_zone(" ".join(value.split()))

    try:
        return _as_aware(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError):
        pass

    # Lenient fallback for near-misses (missing weekday, odd separators),
    # only when something that looks like a year is present.
    if not _YEAR.search(text):
        return None
    try:
        parsed = dateutil_parser.parse(text, tzinfos=_DATEUTIL_TZINFOS)
    except (ValueError, OverflowError):
        return None
    return _as_aware(parsed)


def parse_rfc822(value: str) -> datetime:
    """
    Parse an RFC-822 date-time.

    Raises:
        ValueError: If the value is empty or not an RFC-822 date-time.
    """
    if not value or not value.strip():
        raise ValueError("value must not be empty")
    result = try_parse_rfc822(value)
    if result is None:
        raise ValueError(f"'{value}' is not a valid RFC-822 formatted date-time value.")
    return result


def to_rfc822(value: datetime) -> str:
    """Format a datetime in the RFC-1123 profile of RFC-822, in GMT."""
    return format_datetime(_as_aware(value).astimezone(UTC), usegmt=True)


def try_parse_rfc3339(value: str | None) -> datetime | None:
    """
    Parse an RFC-3339 date-time such as '2007-10-14T17:17:44Z'.

    Args:
        value: Date-time text.

    Returns:
        Aware datetime, or None if the text cannot be parsed.
    """
    if not value or not value.strip():
        return None
    text = value.strip()

    try:
        return _as_aware(datetime.fromisoformat(text))
    except ValueError:
        pass
    try:
        return _as_aware(dateutil_parser.isoparse(text))
    except (ValueError, OverflowError):
        return None


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC-3339 date-time.

    Raises:
        ValueError: If the value is empty or not an RFC-3339 date-time.
    """
    if not value or not value.strip():
        raise ValueError("value must not be empty")
    result = try_parse_rfc3339(value)
    if result is None:
        raise ValueError(f"'{value}' is not a valid RFC-3339 formatted date-time value.")
    return result


def to_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC-3339 in UTC with a 'Z' designator."""
    utc = _as_aware(value).astimezone(UTC)
    if utc.microsecond:
        return utc.strftime("%Y-%m-%dT%H:%M:%S.%f").rstrip("0") + "Z"
    return utc.strftime("%Y-%m-%dT%H:%M:%SZ")
