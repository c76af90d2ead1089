"""
Rent Engine — rent of one booking window

FORMULAS (days = inclusive booked days, rate_raw = unrounded daily rate):
    FULL_MONTH:  rent = monthly_rate × ceil(days / 30)
    DAILY:       rent = rate_raw × days
    PRORATA_30:  rent = rate_raw × days

CRITICAL INVARIANTS:
1. booked_days ≥ 1 (an end before the start bills one day)
2. Only the final product is rounded; the per-day rate used in the
   multiplication is never rounded first.
   50000 / 30 × 180 = 300000.00, not 1666.67 × 180 = 300000.60
3. RentResult.daily_rate is the display tier and is never fed back into
   a multiplication
"""

import math
from typing import Optional

from src.core.config import BILLING_CYCLE_DAYS
from src.core.domain.pricing import BillingMode, PricingInput, RentResult
from src.core.math.dates import DateInput, inclusive_day_count
from src.core.math.numerical_safeguards import round_money, sanitize_money

from .rates import daily_rates


def compute_booked_days(start: DateInput, end: DateInput) -> int:
    """
    Inclusive booked days between two dates (minimum 1).

    Examples:
        >>> compute_booked_days("2025-01-15", "2025-03-14")
        59
    """
    return inclusive_day_count(start, end)


def full_months_for(booked_days: int) -> int:
    """Number of 30-day blocks started by a booking (31 days → 2)."""
    return math.ceil(booked_days / BILLING_CYCLE_DAYS)


def compute_rent_amount(
    monthly_rate: float,
    start: DateInput,
    end: DateInput,
    mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: Optional[float] = None,
) -> RentResult:
    """
    Rent of a booking window under a billing mode.

    Args:
        monthly_rate: Monthly rate of the asset
        start: First booked day
        end: Last booked day (inclusive)
        mode: Billing mode (default: PRORATA_30)
        provided_daily_rate: Explicit daily rate for DAILY mode

    Returns:
        RentResult with booked days, display daily rate and rounded rent

    Raises:
        InvalidDateError: If start or end is not a readable date
    """
    booked_days = compute_booked_days(start, end)
    rates = daily_rates(monthly_rate, mode, provided_daily_rate)

    if mode == BillingMode.FULL_MONTH:
        rent = sanitize_money(monthly_rate) * full_months_for(booked_days)
    else:
        # DAILY and PRORATA_30 share the formula; they differ only in rate source
        rent = rates.raw * booked_days

    return RentResult(
        booked_days=booked_days,
        daily_rate=rates.display,
        rent_amount=round_money(rent),
        billing_mode=mode,
    )


def compute_rent_for_pricing(
    pricing: PricingInput, start: DateInput, end: DateInput
) -> RentResult:
    """compute_rent_amount() for a PricingInput."""
    return compute_rent_amount(
        pricing.monthly_rate,
        start,
        end,
        pricing.billing_mode,
        pricing.daily_rate,
    )
