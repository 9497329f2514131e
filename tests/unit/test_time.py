"""
Unit Tests for Time Utilities

Run with:
    pytest tests/unit/test_time.py -v
"""

from datetime import datetime, timezone

import pytest

from melonbar.utils.time import is_iso8601, parse_iso8601, to_utc_datetime


class TestToUtcDatetime:
    """Tests for to_utc_datetime"""

    def test_seconds(self):
        assert to_utc_datetime(1704110400) == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_milliseconds(self):
        assert to_utc_datetime(1704110400000) == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="negative"):
            to_utc_datetime(-1)


class TestIso8601:
    """Tests for ISO-8601 parsing"""

    def test_parse_with_zone(self):
        assert parse_iso8601("2024-01-01T12:00:00Z") == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_naive_assumed_utc(self):
        assert parse_iso8601("2024-01-01T12:00:00").tzinfo == timezone.utc

    @pytest.mark.parametrize("value,expected", [
        ("2024-01-01T12:00:00Z", True),
        ("2024-01-01", True),
        ("2024-01-01T12:00:00+02:00", True),
        ("yesterday", False),
        ("", False),
    ])
    def test_is_iso8601(self, value, expected):
        assert is_iso8601(value) is expected
