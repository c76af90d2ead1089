"""Duration Synchronizer — keeps a line item's booking window consistent.

The tuple {start_date, end_date, duration_days, months_count, duration_mode}
has one invariant: end_date == start_date + (duration_days - 1). Each entry
point handles an edit of exactly one field and returns a DurationPatch with
the edited field and every field recomputed from it. The caller merges the
patch with DurationState.apply().

Rules:
- MONTH mode: months_count is what the user types, days = round(months × 30)
- DAYS mode: duration_days is what the user types, months = round(days / 30, 2)
- Numeric input is clamped (days in [1, 36500], months in [0.5, 1216.67]),
  never rejected; a window is also cut so it ends by date.max
- Switching to MONTH resets to 30 days / 1 month; switching to DAYS keeps
  the current window
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from src.core.config import (
    BILLING_CYCLE_DAYS,
    DEFAULT_MONTH_DAYS,
    MAX_DURATION_DAYS,
    MAX_MONTHS_COUNT,
    MIN_DURATION_DAYS,
    MIN_MONTHS_COUNT,
    MONTHS_COUNT_DECIMALS,
)
from src.core.domain.duration import DurationMode, DurationPatch, DurationState
from src.core.math.dates import DateInput, days_between, end_date_for, normalize
from src.core.math.numerical_safeguards import round_half_up, sanitize_float

logger = logging.getLogger(__name__)


# =============================================================================
# CONVERSIONS
# =============================================================================


def months_from_days(duration_days: int) -> float:
    """
    Months (2 decimals) for a day count under the 30-day convention.

    Examples:
        >>> months_from_days(30)
        1.0
        >>> months_from_days(59)
        1.97
    """
    return round_half_up(duration_days / BILLING_CYCLE_DAYS, MONTHS_COUNT_DECIMALS)


def days_from_months(months_count: float) -> int:
    """
    Whole days for a month count under the 30-day convention, within
    [MIN_DURATION_DAYS, MAX_DURATION_DAYS].

    Examples:
        >>> days_from_months(1.5)
        45
        >>> days_from_months(0.5)
        15
    """
    months = min(months_count, MAX_MONTHS_COUNT)
    days = int(round_half_up(months * BILLING_CYCLE_DAYS))
    return min(max(days, MIN_DURATION_DAYS), MAX_DURATION_DAYS)


def clamp_duration_days(value: float | int | None) -> int:
    """Bring a day count edit to an integer in [MIN_DURATION_DAYS, MAX_DURATION_DAYS]."""
    if value is None:
        return MIN_DURATION_DAYS
    if not isinstance(value, int):
        value = sanitize_float(float(value), fallback=MIN_DURATION_DAYS)
    if value < MIN_DURATION_DAYS:
        logger.debug("duration_days %r clamped to %d", value, MIN_DURATION_DAYS)
        return MIN_DURATION_DAYS
    if value > MAX_DURATION_DAYS:
        logger.debug("duration_days %r clamped to %d", value, MAX_DURATION_DAYS)
        return MAX_DURATION_DAYS
    return int(value)


def clamp_months_count(value: float | int | None) -> float:
    """Bring a month count edit into [MIN_MONTHS_COUNT, MAX_MONTHS_COUNT]."""
    if value is None:
        return MIN_MONTHS_COUNT
    if not isinstance(value, int):
        value = sanitize_float(float(value), fallback=MIN_MONTHS_COUNT)
    if value < MIN_MONTHS_COUNT:
        logger.debug("months_count %r clamped to %s", value, MIN_MONTHS_COUNT)
        return MIN_MONTHS_COUNT
    if value > MAX_MONTHS_COUNT:
        logger.debug("months_count %r clamped to %s", value, MAX_MONTHS_COUNT)
        return MAX_MONTHS_COUNT
    return float(value)


def fit_window(start: DateInput, duration_days: int) -> int:
    """
    Largest day count ≤ duration_days whose window still ends on or
    before date.max.
    """
    room = (date.max - normalize(start)).days + 1
    if duration_days > room:
        logger.debug("duration_days %d cut to %d to end by %s", duration_days, room, date.max)
        return room
    return duration_days


# =============================================================================
# ENTRY POINTS
# =============================================================================


def sync_from_start_date(new_start: DateInput, current_days: int) -> DurationPatch:
    """
    Start date edited: shift the window, keep the day count.

    Args:
        new_start: New first booked day
        current_days: Day count to keep

    Returns:
        Patch with start_date and end_date
    """
    start = normalize(new_start)
    days = clamp_duration_days(current_days)
    fitted = fit_window(start, days)
    if fitted != days:
        return DurationPatch(
            start_date=start,
            end_date=end_date_for(start, fitted),
            duration_days=fitted,
            months_count=months_from_days(fitted),
        )
    return DurationPatch(start_date=start, end_date=end_date_for(start, days))


def sync_from_end_date(
    start: DateInput, new_end: DateInput, mode: DurationMode = DurationMode.DAYS
) -> DurationPatch:
    """
    End date edited: recompute day and month counts.

    An end before the start is absorbed as a 1-day window; the patched
    end_date is then pulled back to the start so the invariant holds.
    mode is accepted for symmetry with the other edits and does not change
    the result.

    Args:
        start: Current first booked day
        new_end: New last booked day
        mode: Current duration mode

    Returns:
        Patch with end_date, duration_days and months_count
    """
    start_day = normalize(start)
    end_day = normalize(new_end)

    duration_days = max(MIN_DURATION_DAYS, days_between(start_day, end_day) + 1)
    if end_day < start_day:
        logger.debug(
            "end_date %s before start_date %s, window clamped to %d day",
            end_day, start_day, duration_days,
        )
        end_day = end_date_for(start_day, duration_days)

    return DurationPatch(
        end_date=end_day,
        duration_days=duration_days,
        months_count=months_from_days(duration_days),
    )


def sync_from_duration_days(start: DateInput, new_days: float | int | None) -> DurationPatch:
    """
    Day count edited: recompute end date and months.

    Args:
        start: Current first booked day
        new_days: New day count (clamped to [1, MAX_DURATION_DAYS])

    Returns:
        Patch with duration_days, end_date and months_count
    """
    days = fit_window(start, clamp_duration_days(new_days))
    return DurationPatch(
        duration_days=days,
        end_date=end_date_for(start, days),
        months_count=months_from_days(days),
    )


def sync_from_months_count(start: DateInput, new_months: float | int | None) -> DurationPatch:
    """
    Month count edited (MONTH mode): recompute day count and end date.

    Args:
        start: Current first booked day
        new_months: New month count (clamped to [0.5, MAX_MONTHS_COUNT])

    Returns:
        Patch with months_count, duration_days and end_date
    """
    months = clamp_months_count(new_months)
    days = days_from_months(months)
    fitted = fit_window(start, days)
    if fitted != days:
        days, months = fitted, months_from_days(fitted)
    return DurationPatch(
        months_count=months,
        duration_days=days,
        end_date=end_date_for(start, days),
    )


def switch_mode(new_mode: DurationMode, start: DateInput) -> DurationPatch:
    """
    Duration mode switched.

    To MONTH: reset to the OOH default of exactly 30 days / 1 month.
    To DAYS: only the mode tag changes. Idempotent in both directions.

    Args:
        new_mode: Target mode
        start: Current first booked day

    Returns:
        Patch with duration_mode (and the reset window for MONTH)
    """
    if new_mode == DurationMode.MONTH:
        days = fit_window(start, DEFAULT_MONTH_DAYS)
        return DurationPatch(
            duration_mode=DurationMode.MONTH,
            duration_days=days,
            months_count=months_from_days(days),
            end_date=end_date_for(start, days),
        )
    return DurationPatch(duration_mode=new_mode)


def new_duration_state(
    start: DateInput,
    duration_days: int = DEFAULT_MONTH_DAYS,
    mode: DurationMode = DurationMode.MONTH,
) -> DurationState:
    """Initial window of a line item added to a plan or campaign."""
    start_day = normalize(start)
    patch = sync_from_duration_days(start_day, duration_days)
    return DurationState(
        start_date=start_day,
        end_date=patch.end_date,
        duration_days=patch.duration_days,
        duration_mode=mode,
        months_count=patch.months_count,
    )


# =============================================================================
# VALIDATION
# =============================================================================


@dataclass(frozen=True)
class DurationValidation:
    """Outcome of validate_duration()."""

    is_valid: bool
    message: Optional[str] = None


def validate_duration(
    duration_days: Optional[int] = None,
    duration_mode: Optional[DurationMode] = None,
    months_count: Optional[float] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> DurationValidation:
    """
    Report raw user input that the synchronizer would silently clamp.

    Forms call this before applying an edit to show a message instead of
    a quietly adjusted amount. Only the fields passed are checked.

    Returns:
        DurationValidation(is_valid, message)
    """
    if duration_days is not None and duration_days < MIN_DURATION_DAYS:
        return DurationValidation(False, "Duration must be at least 1 day")

    if duration_mode == DurationMode.MONTH and months_count is not None:
        if months_count < MIN_MONTHS_COUNT:
            return DurationValidation(False, "Months must be at least 0.5")

    if start_date is not None and end_date is not None:
        if normalize(end_date) < normalize(start_date):
            return DurationValidation(False, "End date must be after start date")

    return DurationValidation(True)
