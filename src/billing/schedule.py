"""
Billing Schedule — recurring monthly invoicing of one booking

Splits a booking window into calendar-month billing periods and allocates
rent and one-time charges to each:

1. Bookings of at most one billing cycle (30 days) form a single period
   spanning the whole window, reported on its actual day count even when
   it covers a whole calendar month
2. Longer bookings get one period per calendar month touched, clipped to
   the window (first and last periods are usually partial)
3. Each period is billed through the period allocator; printing and
   mounting go to the period containing the booking start

INVARIANT (PRORATA_30 / DAILY): sum of period rents == full-booking
rent_amount of the rent engine. Each period is rounded on its own, which
can leave the sum a cent or two off; with true_up_last_period (default)
the last period absorbs that difference. FULL_MONTH bills whole 30-day blocks up front, so its per-period split is
informational and is not expected to reconcile.
"""

import logging
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, Field

from src.core.config import BillingConfig
from src.core.domain.pricing import BillingMode, BillingPeriod, RentResult
from src.core.math.dates import DateInput, inclusive_day_count, normalize
from src.core.math.numerical_safeguards import EPS_MONEY, round_half_up, round_money

from .one_time_charges import one_time_charges_for_period
from .period_allocator import compute_period_rent_amount, overlap_days_in
from .rent_engine import compute_rent_amount

logger = logging.getLogger(__name__)


# =============================================================================
# MODELS
# =============================================================================


class BillingPeriodInfo(BaseModel):
    """
    One generated billing period with its presentation attributes.

    days_in_period / pro_rata_factor follow the calendar-month rule of
    BillingConfig.full_calendar_month_as_cycle; rent itself is always
    allocated on actual overlap days.
    """

    month_key: str = Field(..., description="YYYY-MM of the period start")
    label: str = Field(..., description="e.g. 'January 2025'")
    period_start: date
    period_end: date
    days_in_period: int = Field(..., ge=1)
    pro_rata_factor: float = Field(..., ge=0)
    is_first_month: bool
    is_last_month: bool

    model_config = {"frozen": True}

    def as_period(self) -> BillingPeriod:
        return BillingPeriod(period_start=self.period_start, period_end=self.period_end)


class PeriodAllocation(BaseModel):
    """Amounts billed for one period."""

    period: BillingPeriodInfo
    overlap_days: int = Field(..., ge=0)
    rent_amount: float = Field(..., ge=0)
    one_time_charges: float = Field(0.0, ge=0)

    model_config = {"frozen": True}

    @property
    def total(self) -> float:
        return round_money(self.rent_amount + self.one_time_charges)


class BillingSchedule(BaseModel):
    """All period allocations of one booking."""

    billing_mode: BillingMode
    allocations: list[PeriodAllocation]

    model_config = {"frozen": True}

    @property
    def total_rent(self) -> float:
        return round_money(sum(a.rent_amount for a in self.allocations))

    @property
    def total_one_time_charges(self) -> float:
        return round_money(sum(a.one_time_charges for a in self.allocations))

    @property
    def grand_total(self) -> float:
        return round_money(self.total_rent + self.total_one_time_charges)

    def reconciliation_difference(self, rent_result: RentResult) -> float:
        """Full-booking rent minus the sum of period rents."""
        return round_money(rent_result.rent_amount - self.total_rent)

    def reconciles_with(self, rent_result: RentResult, tolerance: float = EPS_MONEY) -> bool:
        """True if the period rents add up to the full-booking rent."""
        return abs(self.reconciliation_difference(rent_result)) < tolerance


# =============================================================================
# PERIOD GENERATION
# =============================================================================


def _is_full_calendar_month(period_start: date, period_end: date) -> bool:
    month_end = period_start + relativedelta(day=31)
    return period_start.day == 1 and period_end == month_end


def _period_info(
    period_start: date,
    period_end: date,
    index: int,
    config: BillingConfig,
    full_month_rule: bool = True,
) -> BillingPeriodInfo:
    actual_days = inclusive_day_count(period_start, period_end)

    if (
        full_month_rule
        and config.full_calendar_month_as_cycle
        and _is_full_calendar_month(period_start, period_end)
    ):
        days_in_period = config.cycle_days
        factor = 1.0
    else:
        days_in_period = actual_days
        factor = round_half_up(actual_days / config.cycle_days, 2)

    return BillingPeriodInfo(
        month_key=period_start.strftime("%Y-%m"),
        label=period_start.strftime("%B %Y"),
        period_start=period_start,
        period_end=period_end,
        days_in_period=days_in_period,
        pro_rata_factor=factor,
        is_first_month=index == 0,
        is_last_month=False,
    )


def generate_billing_periods(
    start: DateInput,
    end: DateInput,
    config: Optional[BillingConfig] = None,
) -> list[BillingPeriodInfo]:
    """
    Calendar-month billing periods covering a booking window.

    Args:
        start: First booked day
        end: Last booked day (inclusive); an end before start is a 1-day window
        config: Schedule configuration (default: BillingConfig())

    Returns:
        Periods in chronological order; the last one has is_last_month=True
    """
    config = config or BillingConfig()
    start_day = normalize(start)
    end_day = max(normalize(end), start_day)

    total_days = inclusive_day_count(start_day, end_day)
    if total_days <= config.cycle_days:
        single = _period_info(start_day, end_day, 0, config, full_month_rule=False)
        return [single.model_copy(update={"is_last_month": True})]

    periods: list[BillingPeriodInfo] = []
    month_start = start_day.replace(day=1)

    while month_start <= end_day:
        if len(periods) >= config.max_periods:
            logger.warning(
                "Billing schedule %s..%s truncated at %d periods",
                start_day, end_day, config.max_periods,
            )
            break

        month_end = month_start + relativedelta(day=31)
        period_start = max(start_day, month_start)
        period_end = min(end_day, month_end)
        periods.append(_period_info(period_start, period_end, len(periods), config))

        month_start = month_start + relativedelta(months=1)

    if periods:
        periods[-1] = periods[-1].model_copy(update={"is_last_month": True})

    return periods


# =============================================================================
# SCHEDULE
# =============================================================================


def build_billing_schedule(
    monthly_rate: float,
    start: DateInput,
    end: DateInput,
    mode: BillingMode = BillingMode.PRORATA_30,
    printing_charges: float | None = None,
    mounting_charges: float | None = None,
    provided_daily_rate: Optional[float] = None,
    config: Optional[BillingConfig] = None,
) -> BillingSchedule:
    """
    Allocate a booking's rent and one-time charges to its billing periods.

    Args:
        monthly_rate: Monthly rate of the asset
        start: First booked day
        end: Last booked day (inclusive)
        mode: Billing mode (default: PRORATA_30)
        printing_charges: One-time printing charge
        mounting_charges: One-time mounting charge
        provided_daily_rate: Explicit daily rate for DAILY mode
        config: Schedule configuration (default: BillingConfig())

    Returns:
        BillingSchedule with one PeriodAllocation per period
    """
    config = config or BillingConfig()
    start_day = normalize(start)
    end_day = max(normalize(end), start_day)

    allocations = []
    for info in generate_billing_periods(start_day, end_day, config):
        rent = compute_period_rent_amount(
            monthly_rate,
            start_day,
            end_day,
            info.period_start,
            info.period_end,
            mode,
            provided_daily_rate,
        )
        charges = 0.0
        if config.include_one_time_charges:
            charges = one_time_charges_for_period(
                printing_charges,
                mounting_charges,
                start_day,
                info.period_start,
                info.period_end,
            )
        allocations.append(
            PeriodAllocation(
                period=info,
                overlap_days=overlap_days_in(start_day, end_day, info.as_period()),
                rent_amount=rent,
                one_time_charges=charges,
            )
        )

    reaches_end = bool(allocations) and allocations[-1].period.period_end == end_day
    if config.true_up_last_period and mode != BillingMode.FULL_MONTH and reaches_end:
        full_rent = compute_rent_amount(
            monthly_rate, start_day, end_day, mode, provided_daily_rate
        ).rent_amount
        earlier = sum(a.rent_amount for a in allocations[:-1])
        last_rent = max(round_money(full_rent - earlier), 0.0)
        if last_rent != allocations[-1].rent_amount:
            logger.debug(
                "Last period rent trued up from %.2f to %.2f",
                allocations[-1].rent_amount, last_rent,
            )
            allocations[-1] = allocations[-1].model_copy(update={"rent_amount": last_rent})

    return BillingSchedule(billing_mode=mode, allocations=allocations)
