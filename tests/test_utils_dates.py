"""Tests for timestamp formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from helm_list_charts.models import UNSPECIFIED
from helm_list_charts.utils.dates import format_created, humanize, parse_rfc3339


class TestParseRfc3339:
    """Test parse_rfc3339 function."""

    def test_nanosecond_fraction(self) -> None:
        """Should truncate fractions beyond microseconds."""
        parsed = parse_rfc3339("2025-02-13T12:42:23.967760696Z")

        assert parsed == datetime(2025, 2, 13, 12, 42, 23, 967760, tzinfo=timezone.utc)

    def test_numeric_offset(self) -> None:
        """Should honour an explicit offset."""
        parsed = parse_rfc3339("2025-03-01T10:30:00-05:30")

        assert parsed is not None
        assert parsed.utcoffset() == -timedelta(hours=5, minutes=30)

    def test_lowercase_and_space_separator(self) -> None:
        """Should accept lowercase designators and a space separator."""
        assert parse_rfc3339("2025-03-01t10:30:00z") is not None
        assert parse_rfc3339("2025-03-01 10:30:00+00:00") is not None

    def test_leap_second(self) -> None:
        """Should clamp a leap second instead of rejecting it."""
        parsed = parse_rfc3339("2016-12-31T23:59:60Z")

        assert parsed is not None
        assert parsed.second == 59

    @pytest.mark.parametrize(
        "value",
        [
            "2025-02-13",
            "2025-02-13T12:42:23",
            "2025-13-01T00:00:00Z",
            "2025-02-30T00:00:00Z",
            "13/02/2025 12:42",
            "yesterday",
            "",
            "\u0662\u0660\u0662\u0665-02-13T12:42:23Z",
            " 2025-02-13T12:42:23Z",
            "2025-02-13T12:42:23Z\n",
        ],
    )
    def test_rejects_non_rfc3339(self, value: str) -> None:
        """Should return None for anything that is not RFC 3339."""
        assert parse_rfc3339(value) is None


class TestHumanize:
    """Test humanize function."""

    @pytest.mark.parametrize(
        ("moment", "expected"),
        [
            (datetime(2025, 2, 13, 12, 42), "Feb 13, 2025 12:42 pm"),
            (datetime(2025, 1, 5, 9, 3), "Jan 5, 2025 9:03 am"),
            (datetime(2024, 12, 31, 0, 0), "Dec 31, 2024 12:00 am"),
            (datetime(2024, 7, 4, 23, 59), "Jul 4, 2024 11:59 pm"),
        ],
    )
    def test_format(self, moment: datetime, expected: str) -> None:
        """Should render month, day, year and a 12-hour clock."""
        assert humanize(moment) == expected


class TestFormatCreated:
    """Test format_created function."""

    def test_absent(self) -> None:
        """Should return the placeholder when the value is missing."""
        assert format_created(None) == UNSPECIFIED

    def test_converts_to_given_zone(self) -> None:
        """Should convert to the requested time zone before formatting."""
        assert format_created("2025-02-13T12:42:23.967760696Z", tz=timezone.utc) == "Feb 13, 2025 12:42 pm"
        assert format_created("2025-03-01T00:05:00+02:00", tz=timezone.utc) == "Feb 28, 2025 10:05 pm"

    def test_local_time_by_default(self) -> None:
        """Should use the local time zone when none is given."""
        value = "2025-02-13T12:42:23Z"
        expected = humanize(datetime(2025, 2, 13, 12, 42, 23, tzinfo=timezone.utc).astimezone())

        assert format_created(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "not a date",
            "2025-02-13",
            "",
            "2025-02-13T12:42:23",
            "\u0662\u0660\u0662\u0665-02-13T12:42:23Z",
            "2025-02-13T12:42:23Z ",
        ],
    )
    def test_passthrough(self, value: str) -> None:
        """Should return unparseable values unchanged."""
        assert format_created(value) == value
