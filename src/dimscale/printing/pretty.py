"""Human-readable rendering of (value, dimension, scale) triples."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..config import UNICODE_OUTPUT, VALUE_PRECISION
from ..core.dimensions import BASE_FIELDS, DimensionVector
from ..core.scales import PRIME_LABELS, ScaleVector
from ..engine.conversion import convert_value
from ..errors import UnitParseError
from ..units.data import SI_DERIVED
from ..units.parser import parse_unit
from ..units.table import DEFAULT_TABLE, UnitTable

logger = logging.getLogger(__name__)

# One symbol per base axis; mass is built on the gram so prefixes compose (kg, mg).
_AXIS_SYMBOLS: Tuple[str, ...] = ("g", "m", "s", "A", "K", "mol", "cd", "rad")
_MASS_OFFSET = 3

_SUPERSCRIPT_TRANS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


class FormatOptions(BaseModel):
    """Rendering switches."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    verbose: bool = False
    unicode: bool = Field(default=UNICODE_OUTPUT)
    include_raw: bool = False
    precision: int = Field(default=VALUE_PRECISION, ge=1, le=17)


def superscript(power: int) -> str:
    return str(power).translate(_SUPERSCRIPT_TRANS)


def _power_suffix(power: int, unicode: bool) -> str:
    if power == 1:
        return ""
    return superscript(power) if unicode else f"^{power}"


def format_number(value: Any, precision: int = VALUE_PRECISION) -> str:
    """Render a scalar or array value."""
    if isinstance(value, np.ndarray):
        return np.array2string(
            value,
            separator=", ",
            formatter={"float_kind": lambda item: format_number(float(item), precision)},
        )
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return f"{float(value):.{precision}g}"
    return str(value)


def _join(parts: List[str], unicode: bool) -> str:
    return ("·" if unicode else "*").join(parts)


def _terms(dimension: DimensionVector, prefixes: dict, unicode: bool) -> List[str]:
    terms = []
    for index, (symbol, power) in enumerate(zip(_AXIS_SYMBOLS, dimension)):
        if power == 0:
            continue
        if index == 0 and 0 not in prefixes:
            symbol = "kg"
        terms.append(prefixes.get(index, "") + symbol + _power_suffix(power, unicode))
    return terms


def _attach_prefix(
    dimension: DimensionVector,
    residual: Optional[int],
    axes: List[int],
    table: UnitTable,
) -> Optional[dict]:
    if residual is None:
        return None
    for index in axes:
        power = tuple(dimension)[index]
        if power == 0 or residual % power != 0:
            continue
        prefix = table.prefix_for(residual // power)
        if residual == 0 or prefix is not None:
            return {index: prefix.symbol if prefix else ""}
    return None


def _residual_factor(scale: ScaleVector, unicode: bool) -> str:
    power = scale.log10()
    if power is not None:
        return "10" + _power_suffix(power, unicode)
    try:
        factor = float(scale.rational_part()) * math.pi**scale.pi
    except OverflowError:
        factor = math.inf
    if factor == 0.0 or math.isinf(factor):
        # outside the float range: order of magnitude only
        magnitude = round(scale.log_magnitude() / math.log(10))
        return "(~10" + (superscript(magnitude) if unicode else f"^{magnitude}") + ")"
    return f"({factor:.5g})"


def decompose(
    dimension: DimensionVector,
    scale: ScaleVector,
    *,
    unicode: bool = True,
    table: Optional[UnitTable] = None,
) -> str:
    """Product-of-powers label over the per-axis symbols, e.g. ``mm·s⁻¹``.

    A decimal scale is folded into an SI prefix on the mass term (as grams)
    or else on the first other term whose power divides it. Anything left over
    is rendered as a leading factor: ``10³·kg·m²`` or ``(0.27778)·m·s⁻¹``.
    """
    table = table or DEFAULT_TABLE
    axes = [index for index, power in enumerate(dimension) if power != 0]

    if scale.is_zero():
        return _join(_terms(dimension, {}, unicode), unicode)

    prefixes = None
    if dimension.mass != 0:
        gram_scale = scale * ScaleVector.power_of_ten(_MASS_OFFSET * dimension.mass)
        prefixes = _attach_prefix(dimension, gram_scale.log10(), [0], table)
    if prefixes is None:
        prefixes = _attach_prefix(dimension, scale.log10(), [i for i in axes if i != 0], table)
    if prefixes is not None:
        return _join(_terms(dimension, prefixes, unicode), unicode)

    return _join([_residual_factor(scale, unicode), *_terms(dimension, {}, unicode)], unicode)


def unit_label(
    dimension: DimensionVector,
    scale: ScaleVector,
    *,
    unicode: bool = True,
    table: Optional[UnitTable] = None,
) -> str:
    """Symbol for ``(dimension, scale)``.

    A table unit on exact match. Otherwise a composite dimension whose default
    unit is a named SI unit is written as a factor of that unit (``10⁴·N``,
    ``(60)·J``), and anything else is decomposed per axis.
    """
    table = table or DEFAULT_TABLE
    match = table.find_exact(dimension, scale)
    if match is not None:
        return match.symbol
    if dimension.is_dimensionless():
        return "" if scale.is_zero() else decompose(dimension, scale, unicode=unicode, table=table)
    default = table.default_unit(dimension) if dimension.as_basis() is None else None
    if default is not None and default.category == SI_DERIVED:
        return _join([_residual_factor(scale / default.scale, unicode), default.symbol], unicode)
    return decompose(dimension, scale, unicode=unicode, table=table)


def _bracket(labels, values, unicode: bool) -> str:
    items = [f"{label}{superscript(v) if unicode else '^' + str(v)}" for label, v in zip(labels, values) if v != 0]
    return "[" + ", ".join(items) + "]"


def format_quantity(
    value: Any,
    dimension: DimensionVector,
    scale: ScaleVector,
    options: Optional[FormatOptions] = None,
    *,
    table: Optional[UnitTable] = None,
    **overrides: Any,
) -> str:
    """Render ``value`` denominated at ``(dimension, scale)``.

    ``overrides`` are :class:`FormatOptions` fields, e.g.
    ``format_quantity(1, LENGTH, km, verbose=True)``.
    """
    options = options or FormatOptions()
    if overrides:
        options = options.model_copy(update=overrides)
    table = table or DEFAULT_TABLE

    label = unit_label(dimension, scale, unicode=options.unicode, table=table)
    text = format_number(value, options.precision)
    if label:
        text = f"{text} {label}"

    if options.verbose:
        name = table.dimension_name(dimension)
        if name and dimension.as_basis() is None:
            text = f"{text} ({name})"
        if not scale.is_zero():
            text = f"{text} {_bracket(PRIME_LABELS, scale, options.unicode)}"
        if not dimension.is_dimensionless():
            text = f"{text} {_bracket(BASE_FIELDS, dimension, options.unicode)}"

    if options.include_raw:
        text = f"{text} <dimension={tuple(dimension)} scale={tuple(scale)}>"
    return text


def format_as(
    value: Any,
    dimension: DimensionVector,
    scale: ScaleVector,
    target: str,
    options: Optional[FormatOptions] = None,
    *,
    table: Optional[UnitTable] = None,
) -> str:
    """Render ``value`` converted into the unit expression ``target``.

    A target that does not parse, or has a different dimension, yields a
    descriptive message as the result instead of raising.
    """
    options = options or FormatOptions()
    table = table or DEFAULT_TABLE
    try:
        parsed = parse_unit(target, table=table)
    except UnitParseError as exc:
        logger.info("Cannot format as %r: %s", target, exc)
        return f"Error: Failed to parse unit: {target}"
    if parsed.dimension != dimension:
        source = unit_label(dimension, scale, unicode=options.unicode, table=table) or "1"
        logger.info("Cannot format %s as %s: dimension mismatch", source, target)
        return f"Dimension mismatch: cannot convert from {source} to {target}"

    converted = convert_value(value, scale, parsed.scale)
    if parsed.conversion_factor != 1.0:
        converted = converted / parsed.conversion_factor
    if parsed.affine_offset:
        converted = converted - parsed.affine_offset
    return f"{format_number(converted, options.precision)} {target.strip()}"


__all__ = [
    "FormatOptions",
    "decompose",
    "format_as",
    "format_number",
    "format_quantity",
    "superscript",
    "unit_label",
]
