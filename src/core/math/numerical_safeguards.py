"""
Numerical Safeguards — Safe Money Primitives

Every monetary computation in the engine goes through this module:
- NaN/Inf sanitization so invalid values never reach an invoice
- Clamping of out-of-range inputs instead of rejecting them
- Half-up rounding to the 2-decimal money convention
- Safe division for ratios (discount / profit percentages)

CRITICAL INVARIANTS:
1. Division by zero never happens (fallback is returned)
2. NaN/Inf never propagate (replaced by fallback)
3. Money is rounded exactly once, half away from zero, at 2 decimals
4. All operations are deterministic and reproducible
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# EPSILON / PRECISION PARAMETERS
# =============================================================================

# Number of decimal places for money values
MONEY_DECIMALS: Final[int] = 2

# Quantum used when rounding money values
MONEY_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-MONEY_DECIMALS)

# Absolute tolerance for money comparisons (half a paisa/cent)
EPS_MONEY: Final[float] = 0.005

# Epsilon for generic float comparisons
EPS_CALC: Final[float] = 1e-12


# =============================================================================
# NaN/Inf SANITIZATION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is usable (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if finite, False for NaN or Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Replace NaN/Inf with a fallback value.

    Args:
        value: Raw value
        fallback: Replacement for NaN/Inf (default: 0.0)

    Returns:
        value if finite, otherwise fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# CLAMPING
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Restrict a value to [min_value, max_value].

    Args:
        value: Raw value
        min_value: Lower bound (optional)
        max_value: Upper bound (optional)

    Returns:
        Value restricted to the range

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def sanitize_money(value: float | int | None) -> float:
    """
    Bring a caller-supplied money value into the engine's domain.

    None, NaN and Inf become 0.0; negative amounts are clamped to 0.0.

    Args:
        value: Money amount as received from the caller

    Returns:
        Non-negative finite float
    """
    if value is None:
        return 0.0
    return clamp(sanitize_float(float(value)), min_value=0.0)


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round half away from zero to a fixed number of decimals.

    Python's round() uses banker's rounding on the binary value, so
    round(2.675, 2) == 2.67. Going through the shortest decimal repr
    gives the commercial result (2.68) instead.

    Args:
        value: Value to round
        decimals: Number of decimal places (default: 0)

    Returns:
        Rounded value; NaN/Inf are returned as 0.0

    Examples:
        >>> round_half_up(2.675, 2)
        2.68
        >>> round_half_up(44.5)
        45.0
        >>> round_half_up(-0.125, 2)
        -0.13
    """
    if not is_valid_float(value):
        return 0.0

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def round_money(value: float) -> float:
    """
    Round a money amount to MONEY_DECIMALS places (half up).

    This is the single final rounding step of every rent computation.

    Examples:
        >>> round_money(300000.00000000006)
        300000.0
        >>> round_money(1666.6666666666667)
        1666.67
    """
    return round_half_up(value, MONEY_DECIMALS)


# =============================================================================
# SAFE DIVISION AND COMPARISON
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Division that never raises and never returns NaN/Inf.

    Args:
        numerator: Numerator
        denominator: Denominator
        fallback: Returned when denominator is zero (default: 0.0)

    Returns:
        numerator / denominator or fallback

    Examples:
        >>> safe_divide(10.0, 4.0)
        2.5
        >>> safe_divide(10.0, 0.0)
        0.0
    """
    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_clean = sanitize_float(denominator, fallback=0.0)

    if abs(denom_clean) <= EPS_CALC:
        return fallback

    return sanitize_float(num_clean / denom_clean, fallback=fallback)


def money_equal(a: float, b: float, tol: float = EPS_MONEY) -> bool:
    """
    Compare two money amounts to within half of the smallest unit.

    Args:
        a: First amount
        b: Second amount
        tol: Absolute tolerance (default: EPS_MONEY)

    Returns:
        True if abs(a - b) < tol
    """
    return abs(a - b) < tol
