"""Billing — rent computation for OOH bookings.

- Daily rates in raw / display precision
- Full-booking rent under FULL_MONTH / PRORATA_30 / DAILY
- Period overlap rent and one-time charge attribution for monthly invoices
- Line item totals, discount and profit
"""

from .line_items import (
    Adjustment,
    LineItemRates,
    LineItemTotals,
    calculate_discount,
    calculate_line_item_totals,
    calculate_profit,
    compute_pro_rata_factor,
    duration_factor,
)
from .one_time_charges import asset_starts_in_period, one_time_charges_for_period
from .period_allocator import (
    compute_overlap_days,
    compute_period_rent_amount,
    overlap_days_in,
)
from .rates import (
    DailyRates,
    RatePrecision,
    compute_daily_rate,
    daily_rates,
    display_daily_rate,
    raw_daily_rate,
)
from .rent_engine import (
    compute_booked_days,
    compute_rent_amount,
    compute_rent_for_pricing,
    full_months_for,
)
from .schedule import (
    BillingPeriodInfo,
    BillingSchedule,
    PeriodAllocation,
    build_billing_schedule,
    generate_billing_periods,
)

__all__ = [
    # Rates
    "DailyRates",
    "RatePrecision",
    "compute_daily_rate",
    "daily_rates",
    "display_daily_rate",
    "raw_daily_rate",
    # Rent engine
    "compute_booked_days",
    "compute_rent_amount",
    "compute_rent_for_pricing",
    "full_months_for",
    # Period allocation
    "compute_overlap_days",
    "compute_period_rent_amount",
    "overlap_days_in",
    # One-time charges
    "asset_starts_in_period",
    "one_time_charges_for_period",
    # Schedule
    "BillingPeriodInfo",
    "BillingSchedule",
    "PeriodAllocation",
    "build_billing_schedule",
    "generate_billing_periods",
    # Line items
    "Adjustment",
    "LineItemRates",
    "LineItemTotals",
    "calculate_discount",
    "calculate_line_item_totals",
    "calculate_profit",
    "compute_pro_rata_factor",
    "duration_factor",
]
