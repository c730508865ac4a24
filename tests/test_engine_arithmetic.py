from fractions import Fraction

import hypothesis.strategies as st
import pytest
from hypothesis import given

from dimscale.core.dimensions import (
    AREA,
    DIMENSIONLESS,
    FORCE,
    LENGTH,
    MASS,
    TIME,
    VELOCITY,
    DimensionVector,
)
from dimscale.core.scales import IDENTITY, ScaleVector
from dimscale.engine.arithmetic import Combination, Descriptor, apply_values, combine, power
from dimscale.engine.policies import Operator
from dimscale.errors import IncompatibleDimensions, ScaleMismatch, UnknownUnit

KM = ScaleVector.power_of_ten(3)
CM = ScaleVector.power_of_ten(-2)

_EXPONENT = st.integers(min_value=-40, max_value=40)
_DIMENSIONS = st.lists(_EXPONENT, min_size=8, max_size=8).map(lambda exponents: DimensionVector(*exponents))
_SCALES = st.lists(_EXPONENT, min_size=4, max_size=4).map(lambda exponents: ScaleVector(*exponents))


def test_descriptor_from_unit():
    assert Descriptor.from_unit("km") == Descriptor(LENGTH, KM)
    assert Descriptor.from_unit("N") == Descriptor(FORCE, IDENTITY)
    with pytest.raises(UnknownUnit):
        Descriptor.from_unit("zorkmid")


@given(_DIMENSIONS, _SCALES)
def test_dimension_times_its_negation_is_dimensionless(dimension, scale):
    lhs = Descriptor(dimension, scale)
    rhs = Descriptor(dimension.reciprocal(), scale.reciprocal())
    result = combine(lhs, rhs, Operator.MULTIPLY, "strict").result
    assert result == Descriptor(DIMENSIONLESS, IDENTITY)
    assert combine(lhs, lhs, Operator.DIVIDE, "strict").result == Descriptor(DIMENSIONLESS, IDENTITY)


def test_strict_add_of_unequal_scales_fails():
    km = Descriptor(LENGTH, KM)
    metre = Descriptor(LENGTH, IDENTITY)
    with pytest.raises(ScaleMismatch):
        combine(km, metre, Operator.ADD, "strict")


def test_strict_multiply_of_unequal_scales_sums_scales():
    km = Descriptor(LENGTH, KM)
    cm = Descriptor(LENGTH, CM)
    combination = combine(km, cm, Operator.MULTIPLY, "strict")
    assert combination == Combination(Descriptor(AREA, ScaleVector.power_of_ten(1)), 1.0, 1.0)


def test_add_across_dimensions_fails():
    with pytest.raises(IncompatibleDimensions) as excinfo:
        combine(Descriptor(LENGTH), Descriptor(MASS), Operator.ADD, "left_hand_wins")
    assert excinfo.value.lhs == LENGTH
    assert excinfo.value.rhs == MASS


def test_left_hand_wins_km_m_cm():
    km = Descriptor(LENGTH, KM)
    metre = Descriptor(LENGTH, IDENTITY)
    cm = Descriptor(LENGTH, CM)

    first = combine(km, metre, Operator.ADD, "left_hand_wins")
    value = apply_values(first, Operator.ADD, 1.0, 1.0)
    second = combine(first.result, cm, Operator.ADD, "left_hand_wins")
    value = apply_values(second, Operator.ADD, value, 1.0)

    assert second.result == km
    assert value == pytest.approx(1.00101)


def test_apply_values_for_multiplicative_operators():
    combination = combine(Descriptor(LENGTH), Descriptor(TIME), Operator.DIVIDE, "strict")
    assert combination.result.dimension == VELOCITY
    assert apply_values(combination, Operator.DIVIDE, 10.0, 4.0) == 2.5


def test_power_scales_both_vectors():
    cubed = power(Descriptor(LENGTH, CM), 3)
    assert cubed == Descriptor(LENGTH**3, ScaleVector.power_of_ten(-6))
    assert power(Descriptor(TIME, KM), -1) == Descriptor(TIME**-1, KM.reciprocal())
    assert power(Descriptor(MASS, KM), 0) == Descriptor(DIMENSIONLESS, IDENTITY)


@pytest.mark.parametrize("exponent", [0.5, 2.0, Fraction(1, 2), True, "2"])
def test_non_integer_power_is_rejected(exponent):
    with pytest.raises(TypeError):
        power(Descriptor(LENGTH), exponent)


def test_power_is_not_binary():
    with pytest.raises(ValueError):
        combine(Descriptor(LENGTH), Descriptor(LENGTH), Operator.POWER)
