import numpy as np
import pytest
from pydantic import ValidationError

from dimscale.core.dimensions import (
    AREA,
    DENSITY,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    TIME,
    VELOCITY,
)
from dimscale.core.scales import IDENTITY, ScaleVector
from dimscale.printing.pretty import (
    FormatOptions,
    decompose,
    format_as,
    format_number,
    format_quantity,
    superscript,
    unit_label,
)

KM = ScaleVector.power_of_ten(3)


def test_exact_table_match():
    assert format_quantity(5, LENGTH, KM) == "5 km"
    assert format_quantity(2, MASS, ScaleVector.power_of_ten(-6)) == "2 mg"
    assert format_quantity(1, FORCE, IDENTITY) == "1 N"
    assert format_quantity(3, FORCE, KM) == "3 kN"
    assert format_quantity(1.5, TIME, ScaleVector(2, 1, 1, 0)) == "1.5 min"
    assert format_quantity(50, DIMENSIONLESS, ScaleVector.power_of_ten(-2)) == "50 %"


def test_decomposition_unicode_and_ascii():
    millis = ScaleVector.power_of_ten(-3)
    assert format_quantity(4, VELOCITY, millis, unicode=True) == "4 mm·s⁻¹"
    assert format_quantity(4, VELOCITY, millis, unicode=False) == "4 mm*s^-1"
    assert unit_label(VELOCITY, IDENTITY) == "m·s⁻¹"
    assert unit_label(DENSITY, IDENTITY, unicode=False) == "kg*m^-3"


def test_decomposition_folds_decimal_scale_into_mass_prefix():
    assert decompose(DENSITY, KM) == "Mg·m⁻³"
    assert decompose(MASS * AREA, ScaleVector.power_of_ten(2)) == "kg·dam²"


def test_residual_factor_is_rendered_in_front():
    assert unit_label(MASS * AREA, ScaleVector.power_of_ten(1)) == "10·kg·m²"
    km_per_hour = ScaleVector(-1, -2, 1, 0)
    assert unit_label(VELOCITY, km_per_hour) == "(0.27778)·m·s⁻¹"


def test_dimensionless_unity_renders_value_only():
    assert format_quantity(3, DIMENSIONLESS, IDENTITY) == "3"
    assert format_quantity(1 / 3, DIMENSIONLESS, IDENTITY, precision=3) == "0.333"


def test_verbose_output():
    assert format_quantity(1, LENGTH, KM, verbose=True) == "1 km [2³, 5³] [length¹]"
    assert format_quantity(1, LENGTH, KM, verbose=True, unicode=False) == "1 km [2^3, 5^3] [length^1]"
    assert format_quantity(1, FORCE, IDENTITY, verbose=True) == "1 N (Force) [mass¹, length¹, time⁻²]"


def test_include_raw():
    options = FormatOptions(include_raw=True)
    assert format_quantity(1, LENGTH, KM, options) == (
        "1 km <dimension=(0, 1, 0, 0, 0, 0, 0, 0) scale=(3, 0, 3, 0)>"
    )


def test_format_as_converts():
    assert format_as(1, LENGTH, KM, "m") == "1000 m"
    assert format_as(1, LENGTH, IDENTITY, "cm") == "100 cm"
    mile = float(format_as(1, LENGTH, KM, "mi").split()[0])
    assert mile == pytest.approx(0.621371192237)


def test_format_as_dimension_mismatch_is_a_string():
    assert format_as(1, LENGTH, IDENTITY, "kg") == "Dimension mismatch: cannot convert from m to kg"


def test_format_number():
    assert format_number(5) == "5"
    assert format_number(2.0) == "2"
    assert format_number(np.float64(0.5)) == "0.5"
    assert format_number(np.array([1.5, 2.0])) == "[1.5, 2]"


def test_superscript():
    assert superscript(-12) == "⁻¹²"
    assert superscript(3) == "³"


def test_options_reject_unknown_fields():
    with pytest.raises(ValidationError):
        FormatOptions(colour=True)


def test_format_as_unparseable_target_is_a_string():
    assert format_as(1, LENGTH, IDENTITY, "bogus") == "Error: Failed to parse unit: bogus"
    assert format_as(1, LENGTH, IDENTITY, "m/") == "Error: Failed to parse unit: m/"


def test_composite_dimension_falls_back_to_its_named_unit():
    assert unit_label(FORCE, ScaleVector.power_of_ten(4)) == "10⁴·N"
    assert unit_label(FORCE, ScaleVector.power_of_ten(4), unicode=False) == "10^4*N"
    assert format_quantity(2, ENERGY, ScaleVector(2, 1, 1, 0)) == "2 (60)·J"


def test_residual_beyond_float_range_shows_magnitude():
    assert format_quantity(1, LENGTH, ScaleVector(pi=700)) == "1 (~10³⁴⁸)·m"
    assert format_quantity(1, LENGTH, ScaleVector(pi=-700), unicode=False) == "1 (~10^-348)*m"
