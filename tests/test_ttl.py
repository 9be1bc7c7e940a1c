"""Tests for TTL parsing and duration formatting."""

import pytest

from nsrecords.dns import Duration, TTLParseFailure, format_duration, format_ttl, parse_ttl_seconds


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, ""),
            (1, "1 second"),
            (59, "59 seconds"),
            (60, "1 minute"),
            (3600, "1 hour"),
            (3661, "1 hour 1 minute 1 second"),
            (7322, "2 hours 2 minutes 2 seconds"),
            (86400, "1 day"),
            (90000, "1 day 1 hour"),
            (172800, "2 days"),
            (86401, "1 day 1 second"),
        ],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_no_trailing_space(self):
        """Output never ends with whitespace."""
        for seconds in (1, 61, 3601, 86461):
            assert format_duration(seconds) == format_duration(seconds).strip()


class TestDuration:
    """Tests for the Duration breakdown."""

    def test_from_seconds(self):
        assert Duration.from_seconds(93784) == Duration(days=1, hours=2, minutes=3, seconds=4)

    def test_negative_seconds_rejected(self):
        with pytest.raises(ValueError):
            Duration.from_seconds(-1)


class TestParseTTL:
    """Tests for pulling the seconds out of a ttl line."""

    def test_debug_ttl_line(self):
        assert parse_ttl_seconds("\tttl = 3600") == 3600

    def test_compact_ttl_line(self):
        assert parse_ttl_seconds("ttl=42") == 42

    def test_first_match_wins(self):
        assert parse_ttl_seconds("ttl = 300 (5 mins) minimum = 60") == 300

    def test_missing_value_raises(self):
        with pytest.raises(TTLParseFailure):
            parse_ttl_seconds("ttl = n/a")

    def test_format_ttl(self):
        assert format_ttl("\tttl = 86400") == "1 day"

    def test_ttl_parse_failure_is_value_error(self):
        """Callers catching ValueError also catch TTL failures."""
        with pytest.raises(ValueError):
            format_ttl("no ttl here")
