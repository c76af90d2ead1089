"""
Billing configuration — OOH billing conventions.

Module-level constants are the fixed industry conventions; BillingConfig
carries the tunables of schedule generation.
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# BILLING CONVENTIONS
# =============================================================================

# 1 billing month = 30 days, regardless of the calendar month length
BILLING_CYCLE_DAYS: Final[int] = 30

# Default length of a booking when switching to month-wise entry
DEFAULT_MONTH_DAYS: Final[int] = 30

# Lower bounds applied to user edits (clamped, never rejected)
MIN_DURATION_DAYS: Final[int] = 1
MIN_MONTHS_COUNT: Final[float] = 0.5

# Upper bounds applied to user edits (100 years)
MAX_DURATION_DAYS: Final[int] = 36500
MAX_MONTHS_COUNT: Final[float] = MAX_DURATION_DAYS / BILLING_CYCLE_DAYS

# Precision of months_count derived from a day count
MONTHS_COUNT_DECIMALS: Final[int] = 2

# Hard stop for schedule generation (10 years of monthly periods)
MAX_BILLING_PERIODS: Final[int] = 120


@dataclass(frozen=True)
class BillingConfig:
    """Configuration of recurring billing schedule generation.

    - cycle_days: divisor for pro-rata factors (30)
    - max_periods: cap on generated periods
    - full_calendar_month_as_cycle: a period covering a whole calendar
      month reports cycle_days billed days and a factor of 1.0 (multi-period
      schedules only; a single-period booking keeps its actual days)
    - include_one_time_charges: attach printing/mounting to the period
      containing the booking start
    - true_up_last_period: bill the last period as the full-booking rent
      minus the earlier periods, so per-period rounding never leaves the
      invoices a cent away from the booking total (PRORATA_30 / DAILY)
    """
    cycle_days: int = BILLING_CYCLE_DAYS
    max_periods: int = MAX_BILLING_PERIODS
    full_calendar_month_as_cycle: bool = True
    include_one_time_charges: bool = True
    true_up_last_period: bool = True

    def __post_init__(self) -> None:
        if self.cycle_days < 1:
            raise ValueError(f"cycle_days must be >= 1, got {self.cycle_days}")
        if self.max_periods < 1:
            raise ValueError(f"max_periods must be >= 1, got {self.max_periods}")
