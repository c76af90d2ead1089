"""
Domain models and value objects.

Contains the booking window (DurationState), its edit patches, and the
pricing inputs/results of the billing engine.
"""

from src.core.domain.duration import DurationMode, DurationPatch, DurationState
from src.core.domain.pricing import (
    BILLING_MODE_LABELS,
    BillingMode,
    BillingPeriod,
    PricingInput,
    RentResult,
    format_billing_mode,
)

__all__ = [
    # Duration
    "DurationMode",
    "DurationPatch",
    "DurationState",
    # Pricing
    "BILLING_MODE_LABELS",
    "BillingMode",
    "BillingPeriod",
    "PricingInput",
    "RentResult",
    "format_billing_mode",
]
