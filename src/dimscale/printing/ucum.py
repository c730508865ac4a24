"""UCUM unit codes and the structured ``{"value", "unit"}`` encoding.

Codes follow the case-sensitive UCUM grammar: ``.`` multiplies, ``/`` divides,
both with equal precedence and left associativity, exponents are integers
written directly after the unit (``m2``, ``s-1``) and ``10*n`` is a power of
ten. A named atom, possibly prefixed, is used whenever one matches exactly
(``km``, ``[car_m]``); otherwise the code is a product of coherent base atoms
with the residual scale in front, e.g. ``10*3.kg.m2/s2`` or ``5.m/18/s``.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Dict, List, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.dimensions import DimensionVector
from ..core.scales import ScaleVector
from ..engine.quantity import Quantity
from ..errors import SerializationError, UnitParseError, UnknownUnit
from ..units import data
from ..units.parser import ParsedUnit, parse_unit
from ..units.table import DEFAULT_TABLE, UnitMetadataEntry, UnitTable

logger = logging.getLogger(__name__)

_AXIS_ATOMS: Tuple[str, ...] = ("kg", "m", "s", "A", "K", "mol", "cd", "rad")
_PI_ATOM = "[pi]"


class SerializedQuantity(BaseModel):
    """Wire shape of a quantity."""

    model_config = ConfigDict(extra="forbid")

    value: Union[float, List[float]]
    unit: str


def _ucum_prefixes() -> Dict[int, str]:
    low, high = data.UCUM_PREFIX_RANGE
    prefixes = {}
    for _, symbol, power in data.PREFIXES:
        if low <= power <= high:
            prefixes[power] = data.UCUM_MICRO if power == -6 else symbol
    return prefixes


_UCUM_PREFIX_BY_POWER: Dict[int, str] = _ucum_prefixes()
_UCUM_PREFIX_BY_SYMBOL: Dict[str, int] = {symbol: power for power, symbol in _UCUM_PREFIX_BY_POWER.items()}
_SORTED_UCUM_PREFIXES = sorted(_UCUM_PREFIX_BY_SYMBOL, key=len, reverse=True)


def _atoms(table: UnitTable) -> Dict[str, UnitMetadataEntry]:
    return {entry.ucum: entry for entry in table if entry.ucum}


_DEFAULT_ATOMS = _atoms(DEFAULT_TABLE)


def _atoms_for(table: UnitTable) -> Dict[str, UnitMetadataEntry]:
    return _DEFAULT_ATOMS if table is DEFAULT_TABLE else _atoms(table)


# -- Encoding -------------------------------------------------------------
def _named_code(dimension: DimensionVector, scale: ScaleVector, table: UnitTable) -> Optional[str]:
    match = table.find_exact(dimension, scale)
    if match is None or not match.entry.ucum:
        return None
    if match.prefix is None:
        return match.entry.ucum
    prefix = _UCUM_PREFIX_BY_POWER.get(match.prefix.power)
    if prefix is None:
        return None
    return prefix + match.entry.ucum


def _residual_terms(scale: ScaleVector) -> Tuple[List[str], List[str]]:
    power = scale.log10()
    if power is not None:
        return ([f"10*{power}"] if power else []), []
    numerator: List[str] = []
    denominator: List[str] = []
    rational = scale.rational_part()
    if rational.numerator != 1:
        numerator.append(str(rational.numerator))
    if rational.denominator != 1:
        denominator.append(str(rational.denominator))
    if scale.pi > 0:
        numerator.append(_PI_ATOM + (str(scale.pi) if scale.pi != 1 else ""))
    elif scale.pi < 0:
        denominator.append(_PI_ATOM + (str(-scale.pi) if scale.pi != -1 else ""))
    return numerator, denominator


def to_standard_unit_code(
    dimension: DimensionVector,
    scale: ScaleVector,
    *,
    table: Optional[UnitTable] = None,
) -> str:
    """UCUM code for ``(dimension, scale)``."""
    table = table or DEFAULT_TABLE
    named = _named_code(dimension, scale, table)
    if named is not None:
        return named

    numerator, denominator = _residual_terms(scale)
    for atom, power in zip(_AXIS_ATOMS, dimension):
        if power > 0:
            numerator.append(atom + (str(power) if power != 1 else ""))
        elif power < 0:
            denominator.append(atom + (str(-power) if power != -1 else ""))

    code = ".".join(numerator) if numerator else "1"
    for term in denominator:
        code += "/" + term
    return code


def serialize(value, dimension: DimensionVector, scale: ScaleVector, *, table: Optional[UnitTable] = None) -> str:
    """Encode as ``{"value": ..., "unit": <UCUM code>}``.

    Raises :class:`SerializationError` for non-finite or non-numeric values.
    """
    if isinstance(value, np.ndarray):
        if not np.all(np.isfinite(value)):
            raise SerializationError("Cannot serialize non-finite values")
        payload_value = value.astype(float).tolist()
    else:
        try:
            payload_value = float(value)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot serialize value {value!r}") from exc
        if not math.isfinite(payload_value):
            raise SerializationError(f"Cannot serialize non-finite value {value!r}")
    model = SerializedQuantity(value=payload_value, unit=to_standard_unit_code(dimension, scale, table=table))
    return model.model_dump_json()


def serialize_quantity(quantity: Quantity, *, table: Optional[UnitTable] = None) -> str:
    return serialize(quantity.value, quantity.dimension, quantity.scale, table=table)


# -- Decoding -------------------------------------------------------------
_TOKEN_RE = re.compile(
    r"""
    (?P<ten>10[*^](?P<ten_exp>[+-]?\d+))
    |(?P<int>\d+)(?![A-Za-z\[])
    |(?P<atom>(?:[A-Za-z%]*\[[^\]]+\]|''|'|[A-Za-z%]+))(?P<exp>[+-]?\d+)?
    |(?P<op>[./])
    |(?P<lpar>\()
    |(?P<rpar>\))
    """,
    re.VERBOSE,
)

_UNITY = ParsedUnit(DimensionVector(), ScaleVector())


def _resolve_atom(symbol: str, code: str, position: int, table: UnitTable) -> ParsedUnit:
    if symbol == _PI_ATOM:
        return ParsedUnit(DimensionVector(), ScaleVector.power_of_pi(1))
    atoms = _atoms_for(table)
    entry = atoms.get(symbol)
    scale = None
    if entry is None:
        for prefix in _SORTED_UCUM_PREFIXES:
            if symbol.startswith(prefix) and len(symbol) > len(prefix):
                candidate = atoms.get(symbol[len(prefix) :])
                if candidate is not None and candidate.prefixable:
                    entry = candidate
                    scale = candidate.scale * ScaleVector.power_of_ten(_UCUM_PREFIX_BY_SYMBOL[prefix])
                    break
    if entry is None:
        raise UnknownUnit(symbol, code, position)
    return ParsedUnit(
        entry.dimension,
        scale if scale is not None else entry.scale,
        entry.conversion_factor,
        entry.affine_offset,
    )


class _CodeParser:
    """Recursive descent over UCUM tokens: ``term := '/'? component (('.' | '/') component)*``."""

    def __init__(self, text: str, table: UnitTable) -> None:
        self.text = text
        self.table = table
        self.tokens: List[re.Match[str]] = []
        self.index = 0
        pos = 0
        while pos < len(text):
            match = _TOKEN_RE.match(text, pos)
            if not match:
                raise UnitParseError(f"Unexpected character '{text[pos]}' in unit code", text, pos)
            self.tokens.append(match)
            pos = match.end()

    def peek(self) -> Optional[re.Match[str]]:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def parse(self) -> ParsedUnit:
        # A lone atom keeps its affine offset (Cel, [degF]).
        if len(self.tokens) == 1 and self.tokens[0].group("atom") and not self.tokens[0].group("exp"):
            token = self.tokens[0]
            return _resolve_atom(token.group("atom"), self.text, token.start(), self.table)
        result = self.parse_term()
        token = self.peek()
        if token is not None:
            raise UnitParseError(f"Unexpected token '{token.group(0)}'", self.text, token.start())
        return result

    def parse_term(self) -> ParsedUnit:
        token = self.peek()
        if token is not None and token.group("op") == "/":
            self.index += 1
            result = _UNITY / self.parse_component()
        else:
            result = self.parse_component()
        while True:
            token = self.peek()
            if token is None or token.group("op") is None:
                return result
            self.index += 1
            if token.group("op") == ".":
                result = result * self.parse_component()
            else:
                result = result / self.parse_component()

    def parse_component(self) -> ParsedUnit:
        token = self.peek()
        if token is None:
            raise UnitParseError("Unexpected end of unit code", self.text, len(self.text))
        self.index += 1
        if token.group("ten") is not None:
            return ParsedUnit(DimensionVector(), ScaleVector.power_of_ten(int(token.group("ten_exp"))))
        if token.group("int") is not None:
            try:
                scale = ScaleVector.from_rational(int(token.group("int")))
            except ValueError as exc:
                raise UnitParseError(f"Invalid factor: {exc}", self.text, token.start()) from None
            return ParsedUnit(DimensionVector(), scale)
        if token.group("lpar") is not None:
            inner = self.parse_term()
            closing = self.peek()
            if closing is None or closing.group("rpar") is None:
                position = len(self.text) if closing is None else closing.start()
                raise UnitParseError("Expected ')'", self.text, position)
            self.index += 1
            return inner
        if token.group("atom") is not None:
            unit = _resolve_atom(token.group("atom"), self.text, token.start(), self.table)
            if token.group("exp") is not None:
                unit = unit ** int(token.group("exp"))
            return unit
        raise UnitParseError(f"Unexpected token '{token.group(0)}'", self.text, token.start())


def from_standard_unit_code(code: str, *, table: Optional[UnitTable] = None) -> ParsedUnit:
    """Parse a UCUM code back into dimension and scale."""
    text = code.strip()
    if not text:
        raise UnitParseError("Unit code is empty", code, 0)
    if text == "1":
        return _UNITY
    return _CodeParser(text, table or DEFAULT_TABLE).parse()


def _convert_to_target(quantity: Quantity, target: Optional[str]) -> Quantity:
    if target is None:
        return quantity
    try:
        parsed = parse_unit(target)
    except UnitParseError as exc:
        raise SerializationError(f"Invalid target unit '{target}': {exc}") from exc
    if parsed.dimension != quantity.dimension:
        source = to_standard_unit_code(quantity.dimension, quantity.scale)
        raise SerializationError(f"Dimension mismatch: cannot convert from {source} to {target}")
    return quantity.rescale(parsed.scale)


def from_json(text: str, target: Optional[str] = None, *, table: Optional[UnitTable] = None) -> Quantity:
    """Decode ``{"value": 5, "unit": "km"}``, optionally rescaled into ``target``."""
    try:
        model = SerializedQuantity.model_validate_json(text)
    except ValidationError as exc:
        raise SerializationError(f"Invalid serialized quantity: {exc}") from exc
    try:
        unit = from_standard_unit_code(model.unit, table=table)
    except UnitParseError as exc:
        raise SerializationError(f"Invalid unit code '{model.unit}': {exc}") from exc
    quantity = Quantity.from_parsed(model.value, unit)
    logger.debug("Decoded %s -> %r", text, quantity)
    return _convert_to_target(quantity, target)


_VALUE_UNIT_RE = re.compile(r"^\s*(?P<value>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*(?P<unit>.*?)\s*$")


def from_string(text: str, target: Optional[str] = None) -> Quantity:
    """Parse ``"5.0 km"`` or ``"5.0km"``; the unit part is a human-readable expression."""
    match = _VALUE_UNIT_RE.match(text)
    if not match:
        raise SerializationError(f"Cannot parse quantity from '{text}'")
    value = float(match.group("value"))
    unit_text = match.group("unit")
    if not unit_text:
        quantity = Quantity(value)
    else:
        try:
            quantity = Quantity.from_unit(value, unit_text)
        except UnitParseError as exc:
            raise SerializationError(f"Cannot parse quantity from '{text}': {exc}") from exc
    return _convert_to_target(quantity, target)


__all__ = [
    "SerializedQuantity",
    "to_standard_unit_code",
    "from_standard_unit_code",
    "serialize",
    "serialize_quantity",
    "from_json",
    "from_string",
]
