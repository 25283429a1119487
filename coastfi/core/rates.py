"""Rate conversions shared by the calculator and the projection generator.

Plain float arithmetic in Python raises on ``x / 0.0`` and on ``0.0 ** -n``, and
a negative base with a fractional exponent yields a complex number. These helpers
return ``inf``/``nan`` instead so that degenerate inputs surface as non-finite
results rather than exceptions.
"""

from __future__ import annotations

import math

MONTHS_PER_YEAR = 12


def to_fraction(percent: float) -> float:
    """7 -> 0.07"""
    return percent / 100


def divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def growth_factor(rate: float, years: float) -> float:
    """Compound factor ``(1 + rate) ** years``."""
    base = 1 + rate
    if base == 0 and years < 0:
        return math.inf
    if base < 0 and not float(years).is_integer():
        return math.nan
    try:
        return base**years
    except OverflowError:
        return math.inf


def monthly_rate(annual_rate: float) -> float:
    """Monthly rate that compounds to ``annual_rate`` over a year."""
    return growth_factor(annual_rate, 1 / MONTHS_PER_YEAR) - 1
