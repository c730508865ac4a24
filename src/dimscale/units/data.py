"""Canonical unit dataset.

This module is the single source of truth for every named unit. The unit table
in :mod:`dimscale.units.table` is derived from it once at import time and never
mutated afterwards.

Each unit is declared inside its dimension family. ``scale`` is the coherent SI
unit per storage unit, restricted to powers of 2, 3, 5 and π. Units whose size
cannot be written that way are "non-storage" units: they are stored at their
nearest power-of-ten scale and carry a float ``factor`` (storage units per unit
of this kind), e.g. the inch is stored in centimetres with factor ``2.54``.
``offset`` is the affine zero-point shift added after scaling (``degC``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from ..core.scales import ScaleVector

_10 = ScaleVector.power_of_ten
_6 = ScaleVector.power_of_six

SI_BASE = "si_base"
SI_DERIVED = "si_derived"
METRIC = "metric"
IMPERIAL = "imperial"
ASTRONOMICAL = "astronomical"

# Preference order used when choosing a default unit for a dimension.
CATEGORY_ORDER: Tuple[str, ...] = (SI_BASE, SI_DERIVED, METRIC, IMPERIAL, ASTRONOMICAL)


def _unit(
    name: str,
    symbols: Sequence[str],
    scale: ScaleVector = ScaleVector(),
    *,
    category: str = METRIC,
    factor: float = 1.0,
    offset: float = 0.0,
    prefixable: bool = False,
    ucum: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "name": name,
        "symbols": tuple(symbols),
        "scale": scale,
        "category": category,
        "factor": factor,
        "offset": offset,
        "prefixable": prefixable,
        "ucum": ucum,
    }


# (name, exponents over (M, L, T, I, Θ, N, J, A), units)
DIMENSIONS: Tuple[Tuple[str, Tuple[int, ...], Tuple[Dict[str, Any], ...]], ...] = (
    ("Mass", (1, 0, 0, 0, 0, 0, 0, 0), (
        _unit("kilogram", ["kg"], category=SI_BASE, ucum="kg"),
        _unit("gram", ["g"], _10(-3), prefixable=True, ucum="g"),
        _unit("tonne", ["t"], _10(3), ucum="t"),
        _unit("carat", ["ct"], _10(-4) * ScaleVector.power_of_two(1), ucum="[car_m]"),
        _unit("grain", ["gr"], _10(-4), category=IMPERIAL, factor=0.6479891, ucum="[gr]"),
        _unit("ounce", ["oz"], _10(-2), category=IMPERIAL, factor=2.8349523125, ucum="[oz_av]"),
        _unit("pound", ["lb"], category=IMPERIAL, factor=0.45359237, ucum="[lb_av]"),
        _unit("stone", ["st"], _10(1), category=IMPERIAL, factor=0.635029318, ucum="[stone_av]"),
        _unit("slug", ["slug"], _10(1), category=IMPERIAL, factor=1.4593902937206365),
        _unit("long_ton", ["ton"], _10(3), category=IMPERIAL, factor=1.0160469088, ucum="[lton_av]"),
    )),
    ("Length", (0, 1, 0, 0, 0, 0, 0, 0), (
        _unit("meter", ["m"], category=SI_BASE, prefixable=True, ucum="m"),
        _unit("angstrom", ["Å"], _10(-10), ucum="Ao"),
        _unit("inch", ["in"], _10(-2), category=IMPERIAL, factor=2.54, ucum="[in_i]"),
        _unit("foot", ["ft"], _10(-1), category=IMPERIAL, factor=3.048, ucum="[ft_i]"),
        _unit("yard", ["yd"], category=IMPERIAL, factor=0.9144, ucum="[yd_i]"),
        _unit("fathom", ["ftm"], category=IMPERIAL, factor=1.8288, ucum="[fth_i]"),
        _unit("furlong", ["fur"], _10(2), category=IMPERIAL, factor=2.01168),
        _unit("mile", ["mi"], _10(3), category=IMPERIAL, factor=1.609344, ucum="[mi_i]"),
        _unit("nautical_mile", ["nmi"], _10(3), category=IMPERIAL, factor=1.852, ucum="[nmi_i]"),
        _unit("astronomical_unit", ["AU"], _10(11), category=ASTRONOMICAL, factor=1.495978707, ucum="AU"),
        _unit("light_year", ["ly"], _10(16), category=ASTRONOMICAL, factor=0.94607304725808, ucum="[ly]"),
        _unit("parsec", ["pc"], _10(16), category=ASTRONOMICAL, factor=3.08567758128, ucum="pc"),
    )),
    ("Time", (0, 0, 1, 0, 0, 0, 0, 0), (
        _unit("second", ["s", "sec"], category=SI_BASE, prefixable=True, ucum="s"),
        _unit("minute", ["min"], _10(1) * _6(1), ucum="min"),
        _unit("hour", ["h", "hr"], _10(2) * _6(2), ucum="h"),
        _unit("day", ["d", "day"], ScaleVector(7, 3, 2, 0), ucum="d"),
        _unit("week", ["wk"], ScaleVector(8, 3, 3, 0), factor=0.7, ucum="wk"),
        _unit("month", ["mo"], ScaleVector(8, 4, 3, 0)),
        _unit("year", ["yr"], _10(7), factor=3.1556926),
    )),
    ("Current", (0, 0, 0, 1, 0, 0, 0, 0), (
        _unit("ampere", ["A", "amp"], category=SI_BASE, prefixable=True, ucum="A"),
    )),
    ("Temperature", (0, 0, 0, 0, 1, 0, 0, 0), (
        _unit("kelvin", ["K"], category=SI_BASE, prefixable=True, ucum="K"),
        _unit("celsius", ["degC", "°C"], offset=273.15, ucum="Cel"),
        _unit("rankine", ["degR", "°R"], ScaleVector(p3=-2, p5=1), category=IMPERIAL, ucum="[degR]"),
        _unit("fahrenheit", ["degF", "°F"], ScaleVector(p3=-2, p5=1), category=IMPERIAL, offset=459.67, ucum="[degF]"),
    )),
    ("Amount", (0, 0, 0, 0, 0, 1, 0, 0), (
        _unit("mole", ["mol"], category=SI_BASE, prefixable=True, ucum="mol"),
    )),
    ("Luminosity", (0, 0, 0, 0, 0, 0, 1, 0), (
        _unit("candela", ["cd"], category=SI_BASE, prefixable=True, ucum="cd"),
    )),
    ("Angle", (0, 0, 0, 0, 0, 0, 0, 1), (
        _unit("radian", ["rad"], category=SI_BASE, prefixable=True, ucum="rad"),
        _unit("degree", ["deg", "°"], ScaleVector(-2, -2, -1, 1), ucum="deg"),
        _unit("gradian", ["grad", "gon"], ScaleVector(-3, 0, -2, 1), ucum="gon"),
        _unit("turn", ["turn", "rot"], ScaleVector(1, 0, 0, 1), ucum="circ"),
        _unit("arcminute", ["arcmin"], ScaleVector(-4, -3, -2, 1), ucum="'"),
        _unit("arcsecond", ["arcsec"], ScaleVector(-6, -4, -3, 1), ucum="''"),
    )),
    ("Solid Angle", (0, 0, 0, 0, 0, 0, 0, 2), (
        _unit("steradian", ["sr"], category=SI_DERIVED, prefixable=True, ucum="sr"),
    )),
    ("Area", (0, 2, 0, 0, 0, 0, 0, 0), (
        _unit("hectare", ["ha"], _10(4), ucum="har"),
        _unit("acre", ["ac"], _10(3), category=IMPERIAL, factor=4.0468564224),
    )),
    ("Volume", (0, 3, 0, 0, 0, 0, 0, 0), (
        _unit("liter", ["L", "l"], _10(-3), prefixable=True, ucum="L"),
        _unit("gallon_us", ["gal"], _10(-3), category=IMPERIAL, factor=3.785411784, ucum="[gal_us]"),
        _unit("quart_us", ["qt"], _10(-3), category=IMPERIAL, factor=0.946352946, ucum="[qt_us]"),
        _unit("pint_us", ["pt"], _10(-3), category=IMPERIAL, factor=0.473176473, ucum="[pt_us]"),
        _unit("fluid_ounce_us", ["floz"], _10(-5), category=IMPERIAL, factor=2.95735295625, ucum="[foz_us]"),
        _unit("gallon_uk", ["gal_uk"], _10(-3), category=IMPERIAL, factor=4.54609, ucum="[gal_br]"),
    )),
    ("Frequency", (0, 0, -1, 0, 0, 0, 0, 0), (
        _unit("hertz", ["Hz"], category=SI_DERIVED, prefixable=True, ucum="Hz"),
    )),
    ("Velocity", (0, 1, -1, 0, 0, 0, 0, 0), ()),
    ("Acceleration", (0, 1, -2, 0, 0, 0, 0, 0), ()),
    ("Momentum", (1, 1, -1, 0, 0, 0, 0, 0), ()),
    ("Angular Velocity", (0, 0, -1, 0, 0, 0, 0, 1), ()),
    ("Force", (1, 1, -2, 0, 0, 0, 0, 0), (
        _unit("newton", ["N"], category=SI_DERIVED, prefixable=True, ucum="N"),
        _unit("dyne", ["dyn"], _10(-5), ucum="dyn"),
        _unit("pound_force", ["lbf"], category=IMPERIAL, factor=4.4482216152605, ucum="[lbf_av]"),
    )),
    ("Energy", (1, 2, -2, 0, 0, 0, 0, 0), (
        _unit("joule", ["J"], category=SI_DERIVED, prefixable=True, ucum="J"),
        _unit("erg", ["erg"], _10(-7), ucum="erg"),
        _unit("kilowatt_hour", ["kWh"], _10(5) * _6(2)),
        _unit("electron_volt", ["eV"], _10(-19), factor=1.602176634, ucum="eV"),
        _unit("calorie", ["cal"], _10(1), factor=0.4184, ucum="cal"),
    )),
    ("Power", (1, 2, -3, 0, 0, 0, 0, 0), (
        _unit("watt", ["W"], category=SI_DERIVED, prefixable=True, ucum="W"),
        _unit("horsepower", ["hp"], _10(3), category=IMPERIAL, factor=0.7456998715822702, ucum="[HP]"),
    )),
    ("Pressure", (1, -1, -2, 0, 0, 0, 0, 0), (
        _unit("pascal", ["Pa"], category=SI_DERIVED, prefixable=True, ucum="Pa"),
        _unit("bar", ["bar"], _10(5), prefixable=True, ucum="bar"),
        _unit("atmosphere", ["atm"], _10(5), factor=1.01325, ucum="atm"),
        _unit("torr", ["Torr"], _10(2), factor=1.3332236842105263),
        _unit("psi", ["psi"], _10(4), category=IMPERIAL, factor=0.6894757293168361, ucum="[psi]"),
    )),
    ("Electric Charge", (0, 0, 1, 1, 0, 0, 0, 0), (
        _unit("coulomb", ["C"], category=SI_DERIVED, prefixable=True, ucum="C"),
    )),
    ("Electric Potential", (1, 2, -3, -1, 0, 0, 0, 0), (
        _unit("volt", ["V"], category=SI_DERIVED, prefixable=True, ucum="V"),
    )),
    ("Capacitance", (-1, -2, 4, 2, 0, 0, 0, 0), (
        _unit("farad", ["F"], category=SI_DERIVED, prefixable=True, ucum="F"),
    )),
    ("Electric Resistance", (1, 2, -3, -2, 0, 0, 0, 0), (
        _unit("ohm", ["Ω", "ohm"], category=SI_DERIVED, prefixable=True, ucum="Ohm"),
    )),
    ("Electric Conductance", (-1, -2, 3, 2, 0, 0, 0, 0), (
        _unit("siemens", ["S"], category=SI_DERIVED, prefixable=True, ucum="S"),
    )),
    ("Inductance", (1, 2, -2, -2, 0, 0, 0, 0), (
        _unit("henry", ["H"], category=SI_DERIVED, prefixable=True, ucum="H"),
    )),
    ("Magnetic Flux", (1, 2, -2, -1, 0, 0, 0, 0), (
        _unit("weber", ["Wb"], category=SI_DERIVED, prefixable=True, ucum="Wb"),
    )),
    ("Magnetic Field", (1, 0, -2, -1, 0, 0, 0, 0), (
        _unit("tesla", ["T"], category=SI_DERIVED, prefixable=True, ucum="T"),
        _unit("gauss", ["G"], _10(-4), ucum="G"),
    )),
    ("Luminous Flux", (0, 0, 0, 0, 0, 0, 1, 2), (
        _unit("lumen", ["lm"], category=SI_DERIVED, prefixable=True, ucum="lm"),
    )),
    ("Illuminance", (0, -2, 0, 0, 0, 0, 1, 2), (
        _unit("lux", ["lx"], category=SI_DERIVED, prefixable=True, ucum="lx"),
    )),
    ("Catalytic Activity", (0, 0, -1, 0, 0, 1, 0, 0), (
        _unit("katal", ["kat"], category=SI_DERIVED, prefixable=True, ucum="kat"),
    )),
    ("Volume Mass Density", (1, -3, 0, 0, 0, 0, 0, 0), ()),
    ("Kinematic Viscosity", (0, 2, -1, 0, 0, 0, 0, 0), (
        _unit("stokes", ["St"], _10(-4), ucum="St"),
    )),
    ("Dynamic Viscosity", (1, -1, -1, 0, 0, 0, 0, 0), (
        _unit("poise", ["P"], _10(-1), ucum="P"),
    )),
    ("Dimensionless", (0, 0, 0, 0, 0, 0, 0, 0), (
        _unit("percent", ["%"], _10(-2), ucum="%"),
    )),
)

# (name, symbol, power of ten), BIPM/CGPM, smallest first.
PREFIXES: Tuple[Tuple[str, str, int], ...] = (
    ("quecto", "q", -30),
    ("ronto", "r", -27),
    ("yocto", "y", -24),
    ("zepto", "z", -21),
    ("atto", "a", -18),
    ("femto", "f", -15),
    ("pico", "p", -12),
    ("nano", "n", -9),
    ("micro", "µ", -6),
    ("milli", "m", -3),
    ("centi", "c", -2),
    ("deci", "d", -1),
    ("deca", "da", 1),
    ("hecto", "h", 2),
    ("kilo", "k", 3),
    ("mega", "M", 6),
    ("giga", "G", 9),
    ("tera", "T", 12),
    ("peta", "P", 15),
    ("exa", "E", 18),
    ("zetta", "Z", 21),
    ("yotta", "Y", 24),
    ("ronna", "R", 27),
    ("quetta", "Q", 30),
)

# Alternative spellings of the micro prefix accepted on input.
MICRO_ALIASES: Tuple[str, ...] = ("μ", "u")

# The unit-code standard has no prefixes beyond yocto/yotta and spells micro "u".
UCUM_PREFIX_RANGE = (-24, 24)
UCUM_MICRO = "u"

__all__ = [
    "SI_BASE",
    "SI_DERIVED",
    "METRIC",
    "IMPERIAL",
    "ASTRONOMICAL",
    "CATEGORY_ORDER",
    "DIMENSIONS",
    "PREFIXES",
    "MICRO_ALIASES",
    "UCUM_PREFIX_RANGE",
    "UCUM_MICRO",
]
