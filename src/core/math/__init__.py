"""
Core math modules

Money-safe numeric primitives and day-granular date arithmetic.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Precision constants
    EPS_CALC,
    EPS_MONEY,
    MONEY_DECIMALS,
    # Sanitization
    is_valid_float,
    sanitize_float,
    sanitize_money,
    # Utilities
    clamp,
    money_equal,
    round_half_up,
    round_money,
    safe_divide,
)

# Dates
from src.core.math.dates import (
    DateInput,
    InvalidDateError,
    days_between,
    end_date_for,
    inclusive_day_count,
    normalize,
    to_iso,
)

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_CALC",
    "EPS_MONEY",
    "MONEY_DECIMALS",
    # Numerical Safeguards — Sanitization
    "is_valid_float",
    "sanitize_float",
    "sanitize_money",
    # Numerical Safeguards — Utilities
    "clamp",
    "money_equal",
    "round_half_up",
    "round_money",
    "safe_divide",
    # Dates
    "DateInput",
    "InvalidDateError",
    "days_between",
    "end_date_for",
    "inclusive_day_count",
    "normalize",
    "to_iso",
]
