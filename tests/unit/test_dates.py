"""
Unit tests for report date handling.

Tests cover:
- parse_date_range() - required parameters and calendar date validation
- start_of_day() / end_of_day() - inclusive timestamp bounds
"""
import pytest
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from backoffice.common.dates import (
    parse_calendar_date,
    parse_date_range,
    start_of_day,
    end_of_day,
    get_zone,
)
from backoffice.common.exceptions import InvalidDateError, MissingParameterError


class TestParseDateRange:
    """Tests for parse_date_range() function."""

    @pytest.mark.unit
    def test_valid_range(self):
        assert parse_date_range("2024-01-01", "2024-01-31") == (date(2024, 1, 1), date(2024, 1, 31))

    @pytest.mark.unit
    def test_start_after_end_is_accepted(self):
        start, end = parse_date_range("2024-02-10", "2024-02-01")
        assert start > end

    @pytest.mark.parametrize(
        "start,end",
        [
            (None, "2024-01-31"),
            ("2024-01-01", None),
            (None, None),
            ("", "2024-01-31"),
            ("2024-01-01", "   "),
        ],
    )
    @pytest.mark.unit
    def test_missing_parameter(self, start, end):
        with pytest.raises(MissingParameterError) as exc_info:
            parse_date_range(start, end)
        assert exc_info.value.message == "Both startDate and endDate are required."

    @pytest.mark.parametrize(
        "value",
        [
            "2024-13-40",
            "2024-02-30",
            "2023-02-29",
            "2024/01/05",
            "05-01-2024",
            "20240105",
            "2024-1-5",
            "yesterday",
            "2024-01-05T10:00:00",
        ],
    )
    @pytest.mark.unit
    def test_invalid_end_date(self, value):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date_range("2024-01-01", value)
        assert exc_info.value.parameter == "endDate"
        assert exc_info.value.value == value

    @pytest.mark.unit
    def test_invalid_start_date_reported_first(self):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date_range("2024-13-40", "not-a-date")
        assert exc_info.value.parameter == "startDate"

    @pytest.mark.unit
    def test_leap_day(self):
        assert parse_calendar_date("startDate", "2024-02-29") == date(2024, 2, 29)

    @pytest.mark.unit
    def test_surrounding_whitespace_is_ignored(self):
        assert parse_calendar_date("startDate", " 2024-01-05 ") == date(2024, 1, 5)


class TestDayBounds:
    """Tests for start_of_day() and end_of_day()."""

    @pytest.mark.unit
    def test_start_of_day_is_midnight(self):
        assert start_of_day(date(2024, 1, 5), timezone.utc) == datetime(2024, 1, 5, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_end_of_day_is_last_instant(self):
        end = end_of_day(date(2024, 1, 31), timezone.utc)
        assert end.time() == time.max
        assert end + timedelta(microseconds=1) == datetime(2024, 2, 1, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_bounds_use_the_given_zone(self):
        warsaw = get_zone("Europe/Warsaw")
        assert warsaw == ZoneInfo("Europe/Warsaw")
        start = start_of_day(date(2024, 1, 5), warsaw)
        # CET is UTC+1 in January
        assert start.astimezone(timezone.utc) == datetime(2024, 1, 4, 23, 0, tzinfo=timezone.utc)
