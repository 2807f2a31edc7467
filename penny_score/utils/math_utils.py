"""Numeric helpers shared by scoring and the request layer"""

import math


def clamp01(x: float) -> float:
    """Clamp x into [0, 1]"""
    return max(0.0, min(1.0, x))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Python's round() rounds halves to even (round(0.5) == 0); the score
    widget rounds 0.5 up and 2.5 to 3. The fraction is compared against
    0.5 instead of flooring x + 0.5, which rounds 0.49999999999999994 up.

    Raises:
        ValueError: x is NaN or infinite
    """
    if not math.isfinite(x):
        raise ValueError(f"Cannot round non-finite value {x!r}")
    floor = math.floor(x)
    return floor + 1 if x - floor >= 0.5 else floor


def savings_rate_from_amount(monthly_amount: float, net_income: float) -> int:
    """Convert a monthly savings amount in kr to a whole-percent savings rate"""
    return round_half_up(monthly_amount / max(net_income, 1) * 100)


def monthly_savings_amount(savings_rate_pct: float, net_income: float) -> int:
    """Monthly savings in kr implied by a savings rate"""
    return round_half_up(savings_rate_pct / 100 * net_income)
