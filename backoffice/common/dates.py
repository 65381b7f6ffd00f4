"""
Calendar-date helpers shared by the reporting and statistics services.
"""

import re
from datetime import date, datetime, time, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from backoffice.common.exceptions import InvalidDateError, MissingParameterError

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_calendar_date(parameter: str, value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` query parameter.

    Args:
        parameter: Name of the query parameter (used in the error message)
        value: Raw parameter value

    Returns:
        The parsed date

    Raises:
        InvalidDateError: If the value is not a valid calendar date
    """
    value = value.strip()
    if not _ISO_DATE_RE.match(value):
        raise InvalidDateError(parameter, value)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(parameter, value) from e


def parse_date_range(start: Optional[str], end: Optional[str]) -> Tuple[date, date]:
    """
    Validate the ``startDate``/``endDate`` pair of a report request.

    Both parameters are required. A start date after the end date is
    accepted and simply selects nothing.

    Raises:
        MissingParameterError: If either parameter is absent or blank
        InvalidDateError: If either parameter is not a valid calendar date
    """
    if not start or not start.strip() or not end or not end.strip():
        raise MissingParameterError("Both startDate and endDate are required.")
    return parse_calendar_date("startDate", start), parse_calendar_date("endDate", end)


def get_zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def start_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo) -> datetime:
    """Last representable instant of ``day`` (23:59:59.999999)."""
    return datetime.combine(day, time.max, tzinfo=tz)


def today_in(tz: tzinfo) -> date:
    return datetime.now(tz).date()
