"""
Line Item Pricing — plan/campaign line totals from monthly rates

A line item carries several monthly rates (base cost, card rate,
negotiated rate, printing, mounting). Each is scaled by the duration
factor of the line's DurationState:

    MONTH mode:  factor = months_count
    DAYS mode:   factor = duration_days / 30

Each scaled rate is rounded once; line_subtotal is what the client pays
(negotiated + printing + mounting).
"""

from typing import NamedTuple, Optional

from pydantic import BaseModel, Field

from src.core.config import BILLING_CYCLE_DAYS
from src.core.domain.duration import DurationMode, DurationState
from src.core.math.numerical_safeguards import (
    round_half_up,
    round_money,
    safe_divide,
    sanitize_money,
)


# =============================================================================
# MODELS
# =============================================================================


class LineItemRates(BaseModel):
    """Monthly rates of one line item."""

    base_rate_month: float = Field(0.0, ge=0, description="Owner cost per month")
    card_rate_month: float = Field(0.0, ge=0, description="Published card rate per month")
    negotiated_rate_month: float = Field(..., ge=0, description="Agreed rate per month")
    printing_rate_month: float = Field(0.0, ge=0, description="Printing per month")
    mounting_rate_month: float = Field(0.0, ge=0, description="Mounting per month")

    model_config = {"frozen": True}


class LineItemTotals(BaseModel):
    """Monthly rates scaled to the line item's duration."""

    line_base_rate: float
    line_card_rate: float
    line_negotiation_rate: float
    line_printing_charge: float
    line_mounting_charge: float
    line_subtotal: float
    duration_factor: float

    model_config = {"frozen": True}


class Adjustment(NamedTuple):
    """Money difference and its percentage of the reference total."""

    value: float
    percent: float


# =============================================================================
# FACTORS
# =============================================================================


def duration_factor(
    duration_days: int,
    duration_mode: DurationMode,
    months_count: Optional[float] = None,
) -> float:
    """
    Multiplier applied to monthly rates.

    Examples:
        >>> duration_factor(45, DurationMode.MONTH, 1.5)
        1.5
        >>> duration_factor(45, DurationMode.DAYS)
        1.5
    """
    if duration_mode == DurationMode.MONTH and months_count is not None:
        return months_count
    return duration_days / BILLING_CYCLE_DAYS


def compute_pro_rata_factor(booked_days: int) -> float:
    """Pro-rata factor rounded to 2 decimals (1.0 = 30 days)."""
    return round_half_up(booked_days / BILLING_CYCLE_DAYS, 2)


# =============================================================================
# TOTALS
# =============================================================================


def calculate_line_item_totals(
    rates: LineItemRates, duration: DurationState
) -> LineItemTotals:
    """
    Scale every monthly rate of a line item to its booked duration.

    Args:
        rates: Monthly rates of the line item
        duration: Booking window of the line item

    Returns:
        LineItemTotals (each amount rounded to 2 decimals)
    """
    factor = duration_factor(
        duration.duration_days, duration.duration_mode, duration.months_count
    )

    line_base_rate = round_money(rates.base_rate_month * factor)
    line_card_rate = round_money(rates.card_rate_month * factor)
    line_negotiation_rate = round_money(rates.negotiated_rate_month * factor)
    line_printing_charge = round_money(rates.printing_rate_month * factor)
    line_mounting_charge = round_money(rates.mounting_rate_month * factor)

    return LineItemTotals(
        line_base_rate=line_base_rate,
        line_card_rate=line_card_rate,
        line_negotiation_rate=line_negotiation_rate,
        line_printing_charge=line_printing_charge,
        line_mounting_charge=line_mounting_charge,
        line_subtotal=round_money(
            line_negotiation_rate + line_printing_charge + line_mounting_charge
        ),
        duration_factor=factor,
    )


def calculate_discount(
    card_rate_month: float, negotiated_rate_month: float, factor: float
) -> Adjustment:
    """
    Discount granted against the card rate over a duration.

    The value is never negative: a negotiated rate above the card rate
    is reported as a 0 discount.
    """
    card_total = sanitize_money(card_rate_month) * factor
    negotiated_total = sanitize_money(negotiated_rate_month) * factor
    discount_value = max(0.0, card_total - negotiated_total)
    discount_percent = safe_divide(discount_value, card_total) * 100

    return Adjustment(
        value=round_money(discount_value),
        percent=round_half_up(discount_percent, 2),
    )


def calculate_profit(
    base_rate_month: float, negotiated_rate_month: float, factor: float
) -> Adjustment:
    """
    Margin of the negotiated rate over the owner cost; may be negative.
    """
    base_total = sanitize_money(base_rate_month) * factor
    negotiated_total = sanitize_money(negotiated_rate_month) * factor
    profit_value = negotiated_total - base_total
    profit_percent = safe_divide(profit_value, base_total) * 100

    return Adjustment(
        value=round_money(profit_value),
        percent=round_half_up(profit_percent, 2),
    )
