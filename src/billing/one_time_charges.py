"""
One-Time Charge Gate

Printing and mounting are billed once per booking, on the invoice of the
period that contains the booking's start date (boundaries inclusive).
"""

from src.core.math.dates import DateInput, normalize
from src.core.math.numerical_safeguards import round_money, sanitize_money


def asset_starts_in_period(
    asset_start: DateInput,
    period_start: DateInput,
    period_end: DateInput,
) -> bool:
    """
    True iff period_start ≤ asset_start ≤ period_end.

    Examples:
        >>> asset_starts_in_period("2025-01-31", "2025-01-01", "2025-01-31")
        True
        >>> asset_starts_in_period("2025-02-01", "2025-01-01", "2025-01-31")
        False
    """
    start = normalize(asset_start)
    return normalize(period_start) <= start <= normalize(period_end)


def one_time_charges_for_period(
    printing_charges: float | None,
    mounting_charges: float | None,
    asset_start: DateInput,
    period_start: DateInput,
    period_end: DateInput,
) -> float:
    """
    Printing + mounting attributable to a billing period.

    Returns:
        Sum of both charges if the booking starts in the period, else 0.0
    """
    if not asset_starts_in_period(asset_start, period_start, period_end):
        return 0.0
    return round_money(sanitize_money(printing_charges) + sanitize_money(mounting_charges))
