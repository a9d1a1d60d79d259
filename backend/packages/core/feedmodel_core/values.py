"""
Value parsing helpers.

Every ``try_parse_*`` function returns None when the input cannot be
interpreted, so loaders can skip a single field without failing.
"""

import re
from enum import IntEnum
from urllib.parse import urlsplit

_LANGUAGE_TAG = re.compile(r"^[A-Za-z]{2,3}(?:-[A-Za-z0-9]{1,8})*$")
_URI_FORBIDDEN = re.compile(r"[\s\x00-\x1f\x7f]")
_NETWORK_SCHEMES = frozenset({"http", "https", "ftp"})


class DayOfWeek(IntEnum):
    """Day of the week, numbered from Sunday like the RSS skipDays examples."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def display_name(self) -> str:
        """English day name as written in <skipDays>, e.g. 'Saturday'."""
        return self.name.capitalize()


def normalize_text(value: str | None) -> str:
    """
    Return an empty string for None/empty input, otherwise the trimmed value.

    Raises:
        ValueError: If the value is not a string.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return value.strip()


def try_parse_int(value: str | None) -> int | None:
    """Parse an invariant-culture integer, allowing a sign and outer whitespace."""
    if value is None:
        return None
    text = value.strip()
    if not re.fullmatch(r"[+-]?\d+", text):
        return None
    return int(text)


def try_parse_bool(value: str | None) -> bool | None:
    """Parse 'true'/'false' case-insensitively."""
    if value is None:
        return None
    text = value.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def try_parse_uri(value: str | None) -> str | None:
    """
    Validate an absolute or relative URI reference.

    Args:
        value: Candidate URI text.

    Returns:
        The trimmed URI, or None if it is empty or malformed.
    """
    if value is None:
        return None
    text = value.strip()
    if not text or _URI_FORBIDDEN.search(text):
        return None
    try:
        parts = urlsplit(text)
        # Accessing port validates the numeric part of the authority
        _ = parts.port
    except ValueError:
        return None
    if parts.scheme.lower() in _NETWORK_SCHEMES and not parts.netloc:
        return None
    return text


def try_parse_day_of_week(value: str | None) -> DayOfWeek | None:
    """Parse an English day name such as 'saturday' or 'Sunday'."""
    if value is None:
        return None
    try:
        return DayOfWeek[value.strip().upper()]
    except KeyError:
        return None


def try_parse_language(value: str | None) -> str | None:
    """
    Normalize a language tag such as 'en-us' to 'en-US'.

    Args:
        value: Candidate language tag.

    Returns:
        Normalized tag, or None if the text is not a language tag.
    """
    if value is None:
        return None
    text = value.strip().replace("_", "-")
    if not _LANGUAGE_TAG.match(text):
        return None

    primary, *subtags = text.split("-")
    normalized = [primary.lower()]
    for subtag in subtags:
        if len(subtag) == 2 and subtag.isalpha():
            normalized.append(subtag.upper())
        elif len(subtag) == 4 and subtag.isalpha():
            normalized.append(subtag.title())
        else:
            normalized.append(subtag.lower())
    return "-".join(normalized)
