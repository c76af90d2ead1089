"""
Rate Calculator — daily rate from a monthly rate

The daily rate exists in two precision tiers:
- RAW: full precision, the only value allowed in multi-day multiplication
- DISPLAY: rounded to 2 decimals, the value shown to users and on documents

FORMULA:
    DAILY with provided_daily_rate > 0:  daily = provided_daily_rate
    otherwise:                           daily = monthly_rate / 30

The 30-day divisor is fixed regardless of calendar month length.
"""

import logging
from enum import Enum
from typing import NamedTuple, Optional

from src.core.config import BILLING_CYCLE_DAYS
from src.core.domain.pricing import BillingMode
from src.core.math.numerical_safeguards import round_money, sanitize_money

logger = logging.getLogger(__name__)


class RatePrecision(str, Enum):
    """Precision tier of a computed daily rate"""

    RAW = "raw"
    DISPLAY = "display"


class DailyRates(NamedTuple):
    """Both precision tiers of one daily rate."""

    raw: float
    display: float


def compute_daily_rate(
    monthly_rate: float,
    mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: Optional[float] = None,
    precision: RatePrecision = RatePrecision.DISPLAY,
) -> float:
    """
    Daily rate for a monthly rate and billing mode.

    Args:
        monthly_rate: Monthly rate (negative / NaN treated as 0)
        mode: Billing mode (default: PRORATA_30)
        provided_daily_rate: Explicit daily rate, used only under DAILY
        precision: RAW for calculations, DISPLAY for presentation

    Returns:
        Daily rate in the requested precision tier

    Examples:
        >>> compute_daily_rate(50000, precision=RatePrecision.RAW)
        1666.6666666666667
        >>> compute_daily_rate(50000)
        1666.67
        >>> compute_daily_rate(30000, BillingMode.DAILY, 1250.0)
        1250.0
    """
    provided = sanitize_money(provided_daily_rate)

    if mode == BillingMode.DAILY and provided > 0:
        rate = provided
    else:
        if mode == BillingMode.DAILY:
            logger.debug("DAILY mode without daily rate, falling back to monthly/%d", BILLING_CYCLE_DAYS)
        rate = sanitize_money(monthly_rate) / BILLING_CYCLE_DAYS

    if precision == RatePrecision.DISPLAY:
        return round_money(rate)
    return rate


def raw_daily_rate(
    monthly_rate: float,
    mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: Optional[float] = None,
) -> float:
    """Unrounded daily rate, for multiplication by a day count."""
    return compute_daily_rate(monthly_rate, mode, provided_daily_rate, RatePrecision.RAW)


def display_daily_rate(
    monthly_rate: float,
    mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: Optional[float] = None,
) -> float:
    """Daily rate rounded to 2 decimals. Never multiply this by days."""
    return compute_daily_rate(monthly_rate, mode, provided_daily_rate, RatePrecision.DISPLAY)


def daily_rates(
    monthly_rate: float,
    mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: Optional[float] = None,
) -> DailyRates:
    """Raw and display tiers in one call."""
    return DailyRates(
        raw=raw_daily_rate(monthly_rate, mode, provided_daily_rate),
        display=display_daily_rate(monthly_rate, mode, provided_daily_rate),
    )
