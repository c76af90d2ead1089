"""
Pricing — Rent inputs and results

Immutable Pydantic models for the monthly pricing of one booked asset,
the computed rent of a booking window, and one invoicing period.
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.dates import normalize


# =============================================================================
# ENUMS
# =============================================================================


class BillingMode(str, Enum):
    """How rent is derived from the monthly rate"""

    FULL_MONTH = "FULL_MONTH"  # Every started 30-day block billed in full
    PRORATA_30 = "PRORATA_30"  # monthly_rate / 30 per booked day
    DAILY = "DAILY"  # Explicit daily rate, pro-rata fallback


BILLING_MODE_LABELS: dict[BillingMode, str] = {
    BillingMode.FULL_MONTH: "Full Month",
    BillingMode.DAILY: "Daily",
    BillingMode.PRORATA_30: "Pro-rata (30-day)",
}


def format_billing_mode(mode: BillingMode) -> str:
    """Human-readable billing mode label for tables and exports"""
    return BILLING_MODE_LABELS.get(mode, BILLING_MODE_LABELS[BillingMode.PRORATA_30])


# =============================================================================
# PRICING MODELS
# =============================================================================


class PricingInput(BaseModel):
    """
    Monthly pricing of one booked asset.

    daily_rate is only meaningful under BillingMode.DAILY.
    """

    monthly_rate: float = Field(..., ge=0, description="Negotiated monthly rate")
    billing_mode: BillingMode = Field(
        BillingMode.PRORATA_30, description="Rent derivation mode"
    )
    daily_rate: float | None = Field(None, ge=0, description="Explicit daily rate (DAILY)")

    model_config = {"frozen": True}


class RentResult(BaseModel):
    """
    Rent of one booking window.

    daily_rate is the display-rounded rate; rent_amount was computed from
    the unrounded rate and rounded once.
    """

    booked_days: int = Field(..., ge=1, description="Inclusive booked day count")
    daily_rate: float = Field(..., ge=0, description="Daily rate rounded for display")
    rent_amount: float = Field(..., ge=0, description="Rent rounded to 2 decimals")
    billing_mode: BillingMode = Field(..., description="Mode the rent was computed with")

    model_config = {"frozen": True}


class BillingPeriod(BaseModel):
    """One invoicing cycle (typically a calendar month), inclusive."""

    period_start: date = Field(..., description="First day of the period")
    period_end: date = Field(..., description="Last day of the period")

    model_config = {"frozen": True}

    @field_validator("period_start", "period_end", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> date:
        return normalize(v)

    @field_validator("period_end")
    @classmethod
    def validate_period_order(cls, v: date, info) -> date:
        """period_end must not precede period_start"""
        if "period_start" in info.data and v < info.data["period_start"]:
            raise ValueError(
                f"period_end {v.isoformat()} before period_start "
                f"{info.data['period_start'].isoformat()}"
            )
        return v

    def contains(self, day: date) -> bool:
        """Inclusive membership test"""
        return self.period_start <= day <= self.period_end
