"""Error taxonomy for dimscale.

Data-condition failures derive from :class:`DimensionalError` and are raised at
the value-level API boundary. :class:`ExponentOverflow` is a programming error
and deliberately sits outside that hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .core.dimensions import DimensionVector
    from .core.scales import ScaleVector


class DimensionalError(Exception):
    """Raised when a dimensional operation is invalid."""


class UnitParseError(ValueError):
    """Raised when a unit expression cannot be parsed."""

    def __init__(self, message: str, text: str, position: int | None = None) -> None:
        pointer = ""
        if position is not None and 0 <= position <= len(text):
            pointer = f"\n{text}\n{' ' * position}^"
        super().__init__(f"{message}{pointer}")
        self.text = text
        self.position = position


class UnknownUnit(UnitParseError, DimensionalError):
    """Raised when a symbol is absent from the unit table."""

    def __init__(self, symbol: str, text: str | None = None, position: int | None = None) -> None:
        super().__init__(f"Unknown unit symbol '{symbol}'", text if text is not None else symbol, position)
        self.symbol = symbol


class IncompatibleDimensions(DimensionalError):
    """Raised when two operands (or a value and a target unit) differ in dimension."""

    def __init__(self, lhs: "DimensionVector", rhs: "DimensionVector", action: str = "combine") -> None:
        super().__init__(f"Cannot {action} quantities with different dimensions: {lhs} vs {rhs}")
        self.lhs = lhs
        self.rhs = rhs


class ScaleMismatch(DimensionalError):
    """Raised by the strict policy when add/subtract operands differ in scale."""

    def __init__(self, lhs: "ScaleVector", rhs: "ScaleVector") -> None:
        super().__init__(
            f"Scale mismatch: {lhs} vs {rhs}; rescale explicitly or choose another resolution policy"
        )
        self.lhs = lhs
        self.rhs = rhs


class ExponentOverflow(OverflowError):
    """Raised when an exponent leaves the signed 16-bit range."""

    def __init__(self, value: int, limit: int) -> None:
        super().__init__(f"Exponent {value} exceeds the representable range ±{limit}")
        self.value = value


class SerializationError(ValueError):
    """Raised when a quantity cannot be encoded or decoded."""


__all__ = [
    "DimensionalError",
    "UnitParseError",
    "UnknownUnit",
    "IncompatibleDimensions",
    "ScaleMismatch",
    "ExponentOverflow",
    "SerializationError",
]
