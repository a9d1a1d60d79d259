"""Unit tests for RFC-822 and RFC-3339 date handling."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from feedmodel_core.datetime_utility import (
    parse_rfc822,
    parse_rfc3339,
    to_rfc822,
    to_rfc3339,
    try_parse_rfc822,
    try_parse_rfc3339,
)


class TestRfc822:
    """Test RFC-822 parsing and formatting."""

    def test_parse_gmt(self):
        result = try_parse_rfc822("Sat, 07 Sep 2002 00:00:01 GMT")
        assert result == datetime(2002, 9, 7, 0, 0, 1, tzinfo=UTC)

    def test_parse_named_us_zone(self):
        result = try_parse_rfc822("Sat, 07 Sep 2002 00:00:01 EST")
        assert result == datetime(2002, 9, 7, 5, 0, 1, tzinfo=UTC)

    def test_parse_numeric_offset(self):
        result = try_parse_rfc822("Sat, 07 Sep 2002 02:00:01 +0200")
        assert result == datetime(2002, 9, 7, 0, 0, 1, tzinfo=UTC)

    def test_parse_central_european_zone(self):
        result = try_parse_rfc822("Sat, 07 Sep 2002 01:00:01 CET")
        assert result == datetime(2002, 9, 7, 0, 0, 1, tzinfo=UTC)

    def test_result_is_aware(self):
        result = try_parse_rfc822("Sat, 07 Sep 2002 00:00:01 -0000")
        assert result is not None
        assert result.tzinfo is not None

    def test_invalid_returns_none(self):
        assert try_parse_rfc822("not a date") is None
        assert try_parse_rfc822("") is None
        assert try_parse_rfc822(None) is None

    def test_parse_raises_on_invalid(self):
        with pytest.raises(ValueError):
            parse_rfc822("not a date")

    def test_parse_raises_on_empty(self):
        with pytest.raises(ValueError):
            parse_rfc822("  ")

    def test_format_in_gmt(self):
        value = datetime(2002, 9, 7, 2, 0, 1, tzinfo=timezone(timedelta(hours=2)))
        assert to_rfc822(value) == "Sat, 07 Sep 2002 00:00:01 GMT"

    def test_naive_is_utc(self):
        assert to_rfc822(datetime(2002, 9, 7, 0, 0, 1)) == "Sat, 07 Sep 2002 00:00:01 GMT"


class TestRfc3339:
    """Test RFC-3339 parsing and formatting."""

    def test_parse_zulu(self):
        result = try_parse_rfc3339("2007-10-14T17:17:44Z")
        assert result == datetime(2007, 10, 14, 17, 17, 44, tzinfo=UTC)

    def test_parse_offset_and_fraction(self):
        result = try_parse_rfc3339("2007-10-14T17:17:44.5+02:00")
        assert result == datetime(2007, 10, 14, 15, 17, 44, 500000, tzinfo=UTC)

    def test_invalid_returns_none(self):
        assert try_parse_rfc3339("yesterday") is None

    def test_parse_raises_on_invalid(self):
        with pytest.raises(ValueError):
            parse_rfc3339("yesterday")

    def test_format(self):
        assert to_rfc3339(datetime(2007, 10, 14, 17, 17, 44, tzinfo=UTC)) == "2007-10-14T17:17:44Z"

    def test_format_fraction(self):
        value = datetime(2007, 10, 14, 17, 17, 44, 500000, tzinfo=UTC)
        assert to_rfc3339(value) == "2007-10-14T17:17:44.5Z"
