"""Tests for dimension exponent vectors."""

import pytest

from dimscale.core.dimensions import (
    ACCELERATION,
    ANGLE,
    BASIS,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    MOMENTUM,
    POWER,
    SOLID_ANGLE,
    TIME,
    VELOCITY,
    DimensionVector,
)
from dimscale.errors import ExponentOverflow


def test_dimension_creation():
    length = DimensionVector(length=1)
    assert length.length == 1
    assert not length.is_dimensionless()
    assert len(length) == 8


def test_dimension_multiplication():
    result = LENGTH * TIME
    assert result.length == 1
    assert result.time == 1


def test_dimension_division():
    assert LENGTH / TIME == VELOCITY


def test_dimension_power():
    area = LENGTH**2
    assert area.length == 2
    assert area.mass == 0
    assert (TIME**-1).time == -1


def test_force_and_energy_construction():
    assert MASS * (LENGTH / (TIME**2)) == FORCE
    assert FORCE * LENGTH == ENERGY


@pytest.mark.parametrize("dimension", [*BASIS, FORCE, ENERGY, POWER, MOMENTUM, SOLID_ANGLE])
def test_product_with_reciprocal_is_exactly_dimensionless(dimension):
    assert (dimension * dimension.reciprocal()).is_dimensionless()
    assert (dimension / dimension) == DIMENSIONLESS


def test_dimensionless_check():
    assert DIMENSIONLESS.is_dimensionless()
    assert not LENGTH.is_dimensionless()
    assert (LENGTH / LENGTH).is_dimensionless()


def test_angle_is_its_own_axis():
    assert not ANGLE.is_dimensionless()
    assert ANGLE.is_pure_angle()
    assert SOLID_ANGLE.is_pure_angle()
    assert not (ANGLE / TIME).is_pure_angle()


def test_as_basis():
    assert MASS.as_basis() == 0
    assert ANGLE.as_basis() == 7
    assert VELOCITY.as_basis() is None
    assert DIMENSIONLESS.as_basis() is None


def test_dimension_string_repr():
    assert str(DIMENSIONLESS) == "dimensionless"
    assert str(VELOCITY) == "L * T^-1"
    assert str(FORCE) == "M * L * T^-2"


def test_invalid_dimension_exponent():
    with pytest.raises(ValueError):
        DimensionVector(length=1.5)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        DimensionVector(length=True)  # type: ignore[arg-type]


def test_dimension_immutability():
    dim = DimensionVector(length=1)
    with pytest.raises(AttributeError):
        dim.length = 2  # type: ignore[misc]


def test_fractional_power_is_rejected():
    with pytest.raises(TypeError):
        LENGTH**0.5  # type: ignore[operator]


def test_exponent_overflow_is_fatal():
    with pytest.raises(ExponentOverflow):
        DimensionVector(length=40000)
    with pytest.raises(ExponentOverflow):
        DimensionVector(length=20000) ** 2


def test_mixing_vector_kinds_is_rejected():
    from dimscale.core.scales import ScaleVector

    with pytest.raises(TypeError):
        LENGTH * ScaleVector(p2=1)  # type: ignore[operator]


def test_predefined_dimensions():
    assert ACCELERATION.length == 1
    assert ACCELERATION.time == -2
    assert MOMENTUM.mass == 1
    assert MOMENTUM.time == -1
    assert POWER.time == -3
