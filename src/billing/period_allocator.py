"""
Period Allocator — rent of a booking inside one billing period

Used by recurring (monthly) invoicing: each (asset, period) pair is billed
for the days where the booking window and the period overlap.

    overlap_start = max(asset_start, period_start)
    overlap_end   = min(asset_end, period_end)
    overlap_days  = 0 if overlap_end < overlap_start
                    else (overlap_end - overlap_start) + 1
    period_rent   = round(rate_raw × overlap_days, 2)

The per-day rate is taken at RAW precision, the same discipline as the
rent engine, so the period rents of a PRORATA_30 booking add up to its
full-booking rent_amount up to one rounding step per period. The billing
schedule trues up the last period to close that gap.
"""

from typing import Optional

from src.core.domain.pricing import BillingMode, BillingPeriod
from src.core.math.dates import DateInput, normalize
from src.core.math.numerical_safeguards import round_money

from .rates import raw_daily_rate


def compute_overlap_days(
    asset_start: DateInput,
    asset_end: DateInput,
    period_start: DateInput,
    period_end: DateInput,
) -> int:
    """
    Inclusive number of days shared by a booking window and a period.

    Examples:
        >>> compute_overlap_days("2025-01-15", "2025-03-14", "2025-01-01", "2025-01-31")
        17
        >>> compute_overlap_days("2025-01-15", "2025-01-20", "2025-02-01", "2025-02-28")
        0
    """
    overlap_start = max(normalize(asset_start), normalize(period_start))
    overlap_end = min(normalize(asset_end), normalize(period_end))

    if overlap_end < overlap_start:
        return 0

    return (overlap_end - overlap_start).days + 1


def compute_period_rent_amount(
    monthly_rate: float,
    asset_start: DateInput,
    asset_end: DateInput,
    period_start: DateInput,
    period_end: DateInput,
    mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: Optional[float] = None,
) -> float:
    """
    Rent of a booking for one billing period.

    Args:
        monthly_rate: Monthly rate of the asset
        asset_start: First booked day
        asset_end: Last booked day (inclusive)
        period_start: First day of the billing period
        period_end: Last day of the billing period (inclusive)
        mode: Billing mode (default: PRORATA_30)
        provided_daily_rate: Explicit daily rate for DAILY mode

    Returns:
        Period rent rounded to 2 decimals (0.0 without overlap)
    """
    overlap_days = compute_overlap_days(asset_start, asset_end, period_start, period_end)

    if overlap_days == 0:
        return 0.0

    rate = raw_daily_rate(monthly_rate, mode, provided_daily_rate)
    return round_money(rate * overlap_days)


def overlap_days_in(
    asset_start: DateInput, asset_end: DateInput, period: BillingPeriod
) -> int:
    """compute_overlap_days() against a BillingPeriod."""
    return compute_overlap_days(asset_start, asset_end, period.period_start, period.period_end)
