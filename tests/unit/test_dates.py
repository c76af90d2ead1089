"""
Tests for date normalization

Checks:
1. Time-of-day is dropped for every accepted input type
2. Inclusive day counting with the 1-day minimum
3. Invalid input raises InvalidDateError
"""

from datetime import date, datetime, timezone

import pytest

from src.core.math.dates import (
    InvalidDateError,
    days_between,
    end_date_for,
    inclusive_day_count,
    normalize,
    to_iso,
)


class TestNormalize:
    """Tests for normalize"""

    def test_date_unchanged(self) -> None:
        assert normalize(date(2025, 1, 15)) == date(2025, 1, 15)

    def test_datetime_time_dropped(self) -> None:
        result = normalize(datetime(2025, 1, 15, 23, 59, 59, 999000))
        assert result == date(2025, 1, 15)
        assert type(result) is date

    def test_iso_date_string(self) -> None:
        assert normalize("2025-03-14") == date(2025, 3, 14)

    def test_iso_datetime_string(self) -> None:
        assert normalize("2025-03-14T18:30:00") == date(2025, 3, 14)

    def test_iso_datetime_with_offset_keeps_local_day(self) -> None:
        """The calendar day written in the string wins, no timezone shift"""
        assert normalize("2025-03-14T00:30:00+05:30") == date(2025, 3, 14)

    def test_aware_datetime(self) -> None:
        assert normalize(datetime(2025, 3, 14, 22, 0, tzinfo=timezone.utc)) == date(2025, 3, 14)

    def test_surrounding_whitespace(self) -> None:
        assert normalize("  2025-03-14 ") == date(2025, 3, 14)

    def test_garbage_string_rejected(self) -> None:
        with pytest.raises(InvalidDateError):
            normalize("not-a-date")

    def test_impossible_calendar_date_rejected(self) -> None:
        with pytest.raises(InvalidDateError):
            normalize("2025-02-30")

    def test_empty_string_rejected(self) -> None:
        with pytest.raises(InvalidDateError, match="empty string"):
            normalize("")

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(InvalidDateError, match="unsupported type"):
            normalize(20250314)  # type: ignore[arg-type]

    def test_invalid_date_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            normalize("2025-13-01")


class TestDayArithmetic:
    """Tests for days_between / inclusive_day_count / end_date_for"""

    def test_same_day_is_one_day(self) -> None:
        assert inclusive_day_count("2025-01-01", "2025-01-01") == 1

    def test_full_january(self) -> None:
        assert inclusive_day_count("2025-01-01", "2025-01-31") == 31

    def test_leap_february(self) -> None:
        assert inclusive_day_count("2024-02-01", "2024-02-29") == 29

    def test_end_before_start_is_one_day(self) -> None:
        assert inclusive_day_count("2025-01-10", "2025-01-01") == 1

    def test_time_of_day_ignored(self) -> None:
        start = datetime(2025, 1, 1, 23, 0)
        end = datetime(2025, 1, 2, 1, 0)
        assert inclusive_day_count(start, end) == 2

    def test_days_between_signed(self) -> None:
        assert days_between("2025-01-10", "2025-01-01") == -9

    def test_end_date_for_inclusive(self) -> None:
        assert end_date_for("2025-01-15", 59) == date(2025, 3, 14)
        assert end_date_for("2025-01-15", 1) == date(2025, 1, 15)

    def test_end_date_roundtrip_with_count(self) -> None:
        """Invariant: inclusive_day_count(start, end_date_for(start, D)) == D"""
        start = date(2024, 12, 20)
        for days in (1, 2, 28, 30, 31, 59, 90, 365, 366):
            assert inclusive_day_count(start, end_date_for(start, days)) == days


class TestToIso:
    """Tests for to_iso"""

    def test_storage_format(self) -> None:
        assert to_iso(date(2025, 1, 5)) == "2025-01-05"

    def test_datetime_storage_format(self) -> None:
        assert to_iso(datetime(2025, 1, 5, 13, 45)) == "2025-01-05"
