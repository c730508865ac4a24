import json

import hypothesis.strategies as st
import numpy as np
import pytest
from hypothesis import given

from dimscale.core.dimensions import (
    ACCELERATION,
    ANGLE,
    AREA,
    DENSITY,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    FREQUENCY,
    LENGTH,
    MASS,
    TEMPERATURE,
    TIME,
    VELOCITY,
    DimensionVector,
)
from dimscale.core.scales import IDENTITY, ScaleVector
from dimscale.engine.quantity import Quantity
from dimscale.errors import SerializationError, UnitParseError, UnknownUnit
from dimscale.printing.ucum import (
    from_json,
    from_standard_unit_code,
    from_string,
    serialize,
    serialize_quantity,
    to_standard_unit_code,
)
from dimscale.units.table import DEFAULT_TABLE

KM = ScaleVector.power_of_ten(3)

_EXPONENT = st.integers(min_value=-40, max_value=40)
_DIMENSIONS = st.lists(_EXPONENT, min_size=8, max_size=8).map(lambda exponents: DimensionVector(*exponents))
_SCALES = st.lists(_EXPONENT, min_size=4, max_size=4).map(lambda exponents: ScaleVector(*exponents))


@pytest.mark.parametrize(
    "dimension, scale, code",
    [
        (LENGTH, KM, "km"),
        (LENGTH, ScaleVector.power_of_ten(-6), "um"),
        (MASS, IDENTITY, "kg"),
        (MASS, ScaleVector.power_of_ten(-6), "mg"),
        (TEMPERATURE, IDENTITY, "K"),
        (FORCE, IDENTITY, "N"),
        (ANGLE, ScaleVector(-2, -2, -1, 1), "deg"),
        (TIME, ScaleVector(4, 2, 2, 0), "h"),
        (DIMENSIONLESS, ScaleVector.power_of_ten(-2), "%"),
    ],
)
def test_named_atoms(dimension, scale, code):
    assert to_standard_unit_code(dimension, scale) == code


@pytest.mark.parametrize(
    "dimension, scale, code",
    [
        (VELOCITY, IDENTITY, "m/s"),
        (ACCELERATION, IDENTITY, "m/s2"),
        (DENSITY, IDENTITY, "kg/m3"),
        (MASS * AREA, IDENTITY, "kg.m2"),
        (ANGLE / TIME, IDENTITY, "rad/s"),
        (VELOCITY, ScaleVector(-1, -2, 1, 0), "5.m/18/s"),
        (LENGTH, ScaleVector.power_of_ten(16), "10*16.m"),
        (ENERGY, ScaleVector.power_of_ten(-19), "10*-19.kg.m2/s2"),
        (DIMENSIONLESS, IDENTITY, "1"),
        (DIMENSIONLESS, ScaleVector.power_of_pi(1), "[pi]"),
        (FREQUENCY, ScaleVector.power_of_pi(-2), "1/[pi]2/s"),
    ],
)
def test_composite_codes(dimension, scale, code):
    assert to_standard_unit_code(dimension, scale) == code


@pytest.mark.parametrize("entry", list(DEFAULT_TABLE), ids=lambda entry: entry.name)
def test_every_table_entry_round_trips(entry):
    code = to_standard_unit_code(entry.dimension, entry.scale)
    parsed = from_standard_unit_code(code)
    assert (parsed.dimension, parsed.scale) == (entry.dimension, entry.scale)


@given(_DIMENSIONS, _SCALES)
def test_any_dimension_and_scale_round_trips(dimension, scale):
    parsed = from_standard_unit_code(to_standard_unit_code(dimension, scale))
    assert (parsed.dimension, parsed.scale) == (dimension, scale)


def test_parse_codes():
    assert from_standard_unit_code("kg.m/s2").dimension == FORCE
    assert from_standard_unit_code("kg/m/s").dimension == MASS / LENGTH / TIME
    assert from_standard_unit_code("/s").dimension == FREQUENCY
    assert from_standard_unit_code("m.s-1").dimension == VELOCITY
    assert from_standard_unit_code("10*3.m").scale == KM
    assert from_standard_unit_code("kg.(m/s)").dimension == MASS * VELOCITY
    assert from_standard_unit_code("dbar").scale == ScaleVector.power_of_ten(4)


def test_parse_non_storage_and_affine_atoms():
    inch = from_standard_unit_code("[in_i]")
    assert inch.scale == ScaleVector.power_of_ten(-2)
    assert inch.conversion_factor == pytest.approx(2.54)
    assert from_standard_unit_code("Cel").affine_offset == pytest.approx(273.15)
    assert from_standard_unit_code("Cel/s").affine_offset == 0.0


@pytest.mark.parametrize("code", ["", "m/", "m$", "7.m", "(m"])
def test_malformed_codes(code):
    with pytest.raises(UnitParseError):
        from_standard_unit_code(code)


def test_unknown_atom():
    with pytest.raises(UnknownUnit):
        from_standard_unit_code("kg.furlong")


def test_serialize():
    assert json.loads(serialize(5, LENGTH, KM)) == {"value": 5.0, "unit": "km"}
    payload = json.loads(serialize(np.array([1, 2]), VELOCITY, IDENTITY))
    assert payload == {"value": [1.0, 2.0], "unit": "m/s"}
    assert json.loads(serialize_quantity(Quantity.from_unit(3, "mg"))) == {"value": 3.0, "unit": "mg"}


@pytest.mark.parametrize("value", [float("nan"), float("inf"), "abc", np.array([1.0, np.nan])])
def test_serialize_rejects_bad_values(value):
    with pytest.raises(SerializationError):
        serialize(value, LENGTH, KM)


def test_from_json():
    quantity = from_json('{"value": 5, "unit": "km"}')
    assert quantity == Quantity(5.0, LENGTH, KM)
    assert from_json('{"value": 5, "unit": "km"}', target="m").value == 5000.0
    assert from_json('{"value": 20, "unit": "Cel"}').value == pytest.approx(293.15)
    assert from_json(serialize(2.5, FORCE, KM)) == Quantity(2.5, FORCE, KM)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"value": 5}',
        '{"value": 5, "unit": "km", "extra": 1}',
        '{"value": "x", "unit": "km"}',
        '{"value": 5, "unit": "nonsense"}',
    ],
)
def test_from_json_rejects_invalid_payloads(text):
    with pytest.raises(SerializationError):
        from_json(text)


def test_from_json_target_dimension_mismatch():
    with pytest.raises(SerializationError) as excinfo:
        from_json('{"value": 5, "unit": "km"}', target="kg")
    assert "Dimension mismatch: cannot convert from km to kg" in str(excinfo.value)


def test_from_string():
    assert from_string("5.0 km") == Quantity(5.0, LENGTH, KM)
    assert from_string("5.0km") == Quantity(5.0, LENGTH, KM)
    assert from_string("2eV").dimension == ENERGY
    assert from_string("1 km", target="m").value == 1000.0
    assert from_string("42") == Quantity(42.0)
    with pytest.raises(SerializationError):
        from_string("km")
    with pytest.raises(SerializationError):
        from_string("5 zorkmids")
