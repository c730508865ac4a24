"""Conversion factors between scale vectors.

``compute_factor(a, b)`` is the multiplier taking a value expressed at scale
``a`` to the same quantity expressed at scale ``b``. Pure decimal deltas go
through an exact power of ten; every other delta is evaluated as an exact
rational times a float power of π. Either way the result carries a relative
error of at most ``FACTOR_RTOL`` while the π exponent stays below a few
thousand (the rational part is rounded once; ``math.pi ** k`` drifts by about
``k * 1e-16``), so ``compute_factor(a, b) * compute_factor(b, a)`` equals
1 within ``2 * FACTOR_RTOL``. Deltas beyond the float range overflow to
``inf`` or underflow to ``0.0``.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any

import sympy

from ..config import FACTOR_RTOL
from ..core.scales import ScaleVector


def scale_delta(from_scale: ScaleVector, to_scale: ScaleVector) -> ScaleVector:
    """Exponent difference ``from - to``."""
    return from_scale / to_scale


def compute_factor(from_scale: ScaleVector, to_scale: ScaleVector) -> float:
    """Return the factor such that ``value_in_to = value_in_from * factor``.

    Dimension compatibility is the caller's responsibility.
    """
    delta = scale_delta(from_scale, to_scale)
    power = delta.log10()
    if power is not None:
        return _pow10(power)
    rational = _fraction_to_float(delta.rational_part())
    if delta.pi == 0:
        return rational
    try:
        return rational * math.pi**delta.pi
    except OverflowError:
        return math.inf


def _pow10(power: int) -> float:
    if power >= 0:
        return _fraction_to_float(Fraction(10**power))
    return _fraction_to_float(Fraction(1, 10**-power))


def _fraction_to_float(value: Fraction) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf


def exact_factor(from_scale: ScaleVector, to_scale: ScaleVector) -> sympy.Expr:
    """The conversion factor as an exact SymPy expression (``Rational * pi**k``)."""
    delta = scale_delta(from_scale, to_scale)
    rational = delta.rational_part()
    return sympy.Rational(rational.numerator, rational.denominator) * sympy.pi**delta.pi


def convert_value(value: Any, from_scale: ScaleVector, to_scale: ScaleVector) -> Any:
    """Multiply ``value`` by the conversion factor; identical scales are a no-op."""
    if from_scale == to_scale:
        return value
    return value * compute_factor(from_scale, to_scale)


def factors_consistent(a: ScaleVector, b: ScaleVector, rtol: float = FACTOR_RTOL) -> bool:
    """Check that the round-trip factor between ``a`` and ``b`` is 1 within tolerance."""
    product = compute_factor(a, b) * compute_factor(b, a)
    return math.isclose(product, 1.0, rel_tol=2 * rtol)


__all__ = [
    "scale_delta",
    "compute_factor",
    "exact_factor",
    "convert_value",
    "factors_consistent",
]
