"""
Date normalization — day-granular date arithmetic.

All billing arithmetic is done on calendar dates with no time component.
Inputs arrive as datetime.date, datetime.datetime or ISO-8601 strings
(storage format is YYYY-MM-DD); everything is reduced to datetime.date
before comparison or subtraction.

INVARIANTS:
1. normalize() never returns a value carrying time-of-day
2. Booking windows are inclusive: [start, end] spans (end - start) + 1 days
3. Unparseable or calendar-invalid input raises InvalidDateError
"""

from datetime import date, datetime, timedelta
from typing import Union

from dateutil.parser import isoparse

DateInput = Union[date, datetime, str]


class InvalidDateError(ValueError):
    """Date input that cannot be read as a calendar date."""

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        message = f"Invalid date input: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def normalize(value: DateInput) -> date:
    """
    Reduce a date-like input to a DateOnly (datetime.date).

    Time-of-day is dropped, not converted: 2025-01-15T23:30:00+05:30 is
    2025-01-15.

    Args:
        value: date, datetime or ISO-8601 string

    Returns:
        Calendar date

    Raises:
        InvalidDateError: Unparseable string, impossible calendar date
            (2025-02-30) or unsupported type

    Examples:
        >>> normalize("2025-01-15")
        datetime.date(2025, 1, 15)
        >>> normalize(datetime(2025, 1, 15, 18, 45))
        datetime.date(2025, 1, 15)
    """
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDateError(value, "empty string")
        try:
            return isoparse(text).date()
        except (ValueError, OverflowError) as e:
            raise InvalidDateError(value, str(e)) from e
    raise InvalidDateError(value, f"unsupported type {type(value).__name__}")


def days_between(start: DateInput, end: DateInput) -> int:
    """Signed difference end - start in whole days."""
    return (normalize(end) - normalize(start)).days


def inclusive_day_count(start: DateInput, end: DateInput) -> int:
    """
    Inclusive number of days in [start, end], minimum 1.

    An end before the start is absorbed as a 1-day window.

    Examples:
        >>> inclusive_day_count("2025-01-01", "2025-01-31")
        31
        >>> inclusive_day_count("2025-01-10", "2025-01-01")
        1
    """
    return max(days_between(start, end) + 1, 1)


def end_date_for(start: DateInput, duration_days: int) -> date:
    """End date of an inclusive window of duration_days starting at start."""
    return normalize(start) + timedelta(days=duration_days - 1)


def to_iso(value: DateInput) -> str:
    """Storage representation (YYYY-MM-DD)."""
    return normalize(value).isoformat()
