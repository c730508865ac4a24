"""Tests for prime-factorized scale vectors."""

import math
from fractions import Fraction

import pytest

from dimscale.core.exponents import add, as_pow10, negate, scale_by
from dimscale.core.scales import IDENTITY, ScaleVector


def test_power_constructors():
    assert ScaleVector.power_of_ten(3) == ScaleVector(3, 0, 3, 0)
    assert ScaleVector.power_of_six(2) == ScaleVector(2, 2, 0, 0)
    assert ScaleVector.power_of_two(-1) == ScaleVector(p2=-1)
    assert ScaleVector.power_of_pi(1) == ScaleVector(pi=1)


def test_as_pow10_recognises_pure_decimal_scales():
    assert as_pow10(ScaleVector(3, 0, 3, 0)) == 3
    assert as_pow10(ScaleVector(-6, 0, -6, 0)) == -6
    assert as_pow10(IDENTITY) == 0


@pytest.mark.parametrize(
    "scale",
    [ScaleVector(3, 0, 0, 0), ScaleVector(1, 1, 1, 0), ScaleVector(0, 0, 0, 1), ScaleVector(2, 0, 3, 0)],
)
def test_as_pow10_rejects_non_decimal_scales(scale):
    assert as_pow10(scale) is None
    assert not scale.is_decimal()


def test_algebra_operations():
    km = ScaleVector.power_of_ten(3)
    minute = ScaleVector.power_of_ten(1) * ScaleVector.power_of_six(1)
    assert add(km, minute) == ScaleVector(5, 1, 4, 0)
    assert negate(km) == ScaleVector.power_of_ten(-3)
    assert scale_by(minute, 2) == ScaleVector(4, 2, 2, 0)
    assert km / km == IDENTITY


def test_scale_by_requires_integer():
    with pytest.raises(TypeError):
        scale_by(IDENTITY, 1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        scale_by(IDENTITY, Fraction(1, 2))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        scale_by(IDENTITY, True)


def test_rational_part_is_exact():
    degree = ScaleVector(-2, -2, -1, 1)
    assert degree.rational_part() == Fraction(1, 180)
    assert ScaleVector.power_of_ten(-3).rational_part() == Fraction(1, 1000)


def test_from_rational_factors_over_two_three_five():
    assert ScaleVector.from_rational(60) == ScaleVector(2, 1, 1, 0)
    assert ScaleVector.from_rational(Fraction(1, 1000)) == ScaleVector.power_of_ten(-3)
    assert ScaleVector.from_rational(Fraction(5, 18)) == ScaleVector(-1, -2, 1, 0)


@pytest.mark.parametrize("value", [7, Fraction(1, 14), 0, -10])
def test_from_rational_rejects_other_values(value):
    with pytest.raises(ValueError):
        ScaleVector.from_rational(value)


def test_log_magnitude_orders_scales():
    assert ScaleVector.power_of_ten(-3).log_magnitude() < IDENTITY.log_magnitude()
    assert math.isclose(ScaleVector.power_of_ten(3).log_magnitude(), math.log(1000))
    assert math.isclose(ScaleVector.power_of_pi(1).log_magnitude(), math.log(math.pi))


def test_string_form():
    assert str(IDENTITY) == "1"
    assert str(ScaleVector.power_of_ten(3)) == "2^3·5^3"
