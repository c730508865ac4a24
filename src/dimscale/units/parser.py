"""Human-readable unit expression parsing.

Grammar (whitespace ignored)::

    expr   := term ('/' term)*
    term   := factor (('*' | <implicit>) factor)*
    factor := atom ('^' integer)?
    atom   := symbol | number | '(' expr ')'

``·`` and ``×`` are accepted for ``*``, superscript digits for ``^n`` and a
trailing integer on a symbol (``m2``, ``s-1``) as an implicit exponent. Numbers
must factor over ``{2, 3, 5}``; ``pi`` and ``π`` denote the constant.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional

from ..core.dimensions import DimensionVector
from ..core.scales import ScaleVector
from ..errors import UnitParseError, UnknownUnit
from .table import DEFAULT_TABLE, UnitTable

logger = logging.getLogger(__name__)

_PI_SYMBOLS = {"pi", "π"}


@dataclass(frozen=True)
class ParsedUnit:
    """Dimension and scale of a parsed unit expression.

    ``conversion_factor`` is the float multiplier contributed by non-storage
    units; ``affine_offset`` is only ever non-zero for a bare affine unit such
    as ``degC``.
    """

    dimension: DimensionVector
    scale: ScaleVector
    conversion_factor: float = 1.0
    affine_offset: float = 0.0

    def __mul__(self, other: "ParsedUnit") -> "ParsedUnit":
        return ParsedUnit(
            self.dimension * other.dimension,
            self.scale * other.scale,
            self.conversion_factor * other.conversion_factor,
        )

    def __truediv__(self, other: "ParsedUnit") -> "ParsedUnit":
        return ParsedUnit(
            self.dimension / other.dimension,
            self.scale / other.scale,
            self.conversion_factor / other.conversion_factor,
        )

    def __pow__(self, exponent: int) -> "ParsedUnit":
        if exponent == 1:
            return self
        return ParsedUnit(
            self.dimension**exponent,
            self.scale**exponent,
            self.conversion_factor**exponent,
        )

    @property
    def is_exact(self) -> bool:
        return self.conversion_factor == 1.0 and self.affine_offset == 0.0


_SUPERSCRIPTS = "⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻"
_FROM_SUPERSCRIPT = str.maketrans(_SUPERSCRIPTS, "0123456789+-")

_LETTERS = "A-Za-zµμΩ°Åπ"

_TOKEN_RE = re.compile(
    rf"""
    (?P<space>\s+)
    |(?P<lpar>\()
    |(?P<rpar>\))
    |(?P<mul>\*)
    |(?P<div>/)
    |(?P<pow>\^)
    |(?P<num>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    |(?P<sym>%|[{_LETTERS}_][{_LETTERS}0-9_]*)
    """,
    re.VERBOSE,
)

# Tokens that may start a factor, so two in a row mean implicit multiplication.
_FACTOR_START = {"sym", "num", "lpar"}


def _normalize_input(text: str) -> str:
    """Rewrite ``·``/``×``, superscripts and implicit exponents into ``*`` and ``^``."""
    text = text.replace("·", "*").replace("×", "*").replace("⋅", "*")
    text = re.sub(
        rf"([{_LETTERS}0-9\)])([{_SUPERSCRIPTS}]+)",
        lambda match: f"{match.group(1)}^{match.group(2).translate(_FROM_SUPERSCRIPT)}",
        text,
    )
    return re.sub(rf"(?<![{_LETTERS}0-9_^])([{_LETTERS}]+)([-+]?\d+)(?![\d.])", r"\1^\2", text)


class _ExpressionParser:
    """Recursive descent over ``_TOKEN_RE`` matches of a normalized expression."""

    def __init__(self, text: str, table: UnitTable) -> None:
        self.text = text
        self.table = table
        self.tokens: List[re.Match[str]] = []
        self.index = 0
        pos = 0
        while pos < len(text):
            match = _TOKEN_RE.match(text, pos)
            if not match:
                raise UnitParseError(f"Unexpected character '{text[pos]}' in unit expression", text, pos)
            if match.lastgroup != "space":
                self.tokens.append(match)
            pos = match.end()

    def _kind(self) -> Optional[str]:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index].lastgroup

    def _take(self, kind: str) -> re.Match[str]:
        if self.index >= len(self.tokens):
            raise UnitParseError("Unexpected end of unit expression", self.text, len(self.text))
        token = self.tokens[self.index]
        if token.lastgroup != kind:
            raise UnitParseError(f"Expected {kind} but found '{token.group(0)}'", self.text, token.start())
        self.index += 1
        return token

    def parse(self) -> ParsedUnit:
        parsed = self.expr()
        if self._kind() is not None:
            token = self.tokens[self.index]
            raise UnitParseError(f"Unexpected token '{token.group(0)}'", self.text, token.start())
        return parsed

    def expr(self) -> ParsedUnit:
        parsed = self.term()
        while self._kind() == "div":
            self.index += 1
            parsed = parsed / self.term()
        return parsed

    def term(self) -> ParsedUnit:
        parsed = self.factor()
        while True:
            kind = self._kind()
            if kind == "mul":
                self.index += 1
            elif kind not in _FACTOR_START:
                return parsed
            parsed = parsed * self.factor()

    def factor(self) -> ParsedUnit:
        parsed = self.atom()
        if self._kind() != "pow":
            return parsed
        self.index += 1
        token = self._take("num")
        try:
            exponent = int(token.group(0))
        except ValueError:
            raise UnitParseError(
                f"Exponent '{token.group(0)}' is not an integer; fractional powers are not supported",
                self.text,
                token.start(),
            ) from None
        return parsed**exponent

    def atom(self) -> ParsedUnit:
        kind = self._kind()
        if kind == "lpar":
            self.index += 1
            inner = self.expr()
            self._take("rpar")
            return inner
        if kind == "sym":
            return self._symbol(self._take("sym"))
        if kind == "num":
            token = self._take("num")
            try:
                scale = ScaleVector.from_rational(Fraction(token.group(0)))
            except ValueError as exc:
                raise UnitParseError(
                    f"Invalid numeric factor '{token.group(0)}': {exc}", self.text, token.start()
                ) from None
            return ParsedUnit(DimensionVector(), scale)
        if kind is None:
            raise UnitParseError("Unexpected end of unit expression", self.text, len(self.text))
        token = self.tokens[self.index]
        raise UnitParseError(f"Unexpected token '{token.group(0)}'", self.text, token.start())

    def _symbol(self, token: re.Match[str]) -> ParsedUnit:
        symbol = token.group(0)
        if symbol in _PI_SYMBOLS:
            return ParsedUnit(DimensionVector(), ScaleVector.power_of_pi(1))
        try:
            unit = self.table.resolve(symbol)
        except UnknownUnit:
            raise UnknownUnit(symbol, self.text, token.start()) from None
        return ParsedUnit(unit.dimension, unit.scale, unit.conversion_factor, unit.affine_offset)


def parse_unit(text: str, *, table: UnitTable | None = None) -> ParsedUnit:
    """Parse ``text`` into its exact dimension and scale."""
    stripped = text.strip()
    if not stripped:
        raise UnitParseError("Unit expression is empty", text, 0)

    normalized = _normalize_input(stripped)
    parsed = _ExpressionParser(normalized, table or DEFAULT_TABLE).parse()
    logger.debug("Parsed unit %r -> %s / %s", text, parsed.dimension, parsed.scale)
    return parsed


__all__ = ["ParsedUnit", "parse_unit"]
