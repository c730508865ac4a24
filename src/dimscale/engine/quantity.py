"""Immutable quantity values checked at combination time."""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

from ..core.dimensions import DIMENSIONLESS, DimensionVector
from ..core.scales import IDENTITY, ScaleVector
from ..errors import IncompatibleDimensions
from ..printing.pretty import FormatOptions, format_as, format_quantity
from ..units.parser import ParsedUnit, parse_unit
from .arithmetic import Descriptor, apply_values, combine, power
from .conversion import convert_value
from .policies import LEFT_HAND_WINS, Operator, ResolutionPolicy


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.generic)) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class Quantity:
    """A numeric value denominated at ``(dimension, scale)``.

    The value is never converted implicitly: arithmetic goes through
    :func:`~dimscale.engine.arithmetic.combine` under a resolution policy
    (the configured default unless one is passed), and rescaling is always an
    explicit :meth:`to` or :meth:`rescale` call. Lists and tuples are stored
    as float numpy arrays.
    """

    value: Any
    dimension: DimensionVector = DIMENSIONLESS
    scale: ScaleVector = IDENTITY

    # ndarray operands defer to the reflected operators below
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        if isinstance(self.value, (list, tuple)):
            object.__setattr__(self, "value", np.asarray(self.value, dtype=float))

    # -- Construction ------------------------------------------------------
    @classmethod
    def from_parsed(cls, value: Any, unit: ParsedUnit) -> Quantity:
        """Store ``value`` given in ``unit`` at the unit's storage scale."""
        if isinstance(value, (list, tuple)):
            value = np.asarray(value, dtype=float)
        if unit.affine_offset:
            value = value + unit.affine_offset
        if unit.conversion_factor != 1.0:
            value = value * unit.conversion_factor
        return cls(value, unit.dimension, unit.scale)

    @classmethod
    def from_unit(cls, value: Any, unit: str) -> Quantity:
        """``Quantity.from_unit(5, "km")``; ``unit`` is any unit expression."""
        return cls.from_parsed(value, parse_unit(unit))

    @property
    def descriptor(self) -> Descriptor:
        return Descriptor(self.dimension, self.scale)

    # -- Conversion --------------------------------------------------------
    def rescale(self, scale: ScaleVector) -> Quantity:
        """Same quantity expressed at ``scale``."""
        return Quantity(convert_value(self.value, self.scale, scale), self.dimension, scale)

    def to(self, unit: str) -> Quantity:
        """Rescale to the storage scale of ``unit``.

        For non-storage and affine units use :meth:`value_in` to obtain the
        number in that unit.
        """
        parsed = parse_unit(unit)
        if parsed.dimension != self.dimension:
            raise IncompatibleDimensions(self.dimension, parsed.dimension, "convert")
        return self.rescale(parsed.scale)

    def value_in(self, unit: str) -> Any:
        """The numeric value expressed in ``unit``."""
        parsed = parse_unit(unit)
        if parsed.dimension != self.dimension:
            raise IncompatibleDimensions(self.dimension, parsed.dimension, "convert")
        value = convert_value(self.value, self.scale, parsed.scale)
        if parsed.conversion_factor != 1.0:
            value = value / parsed.conversion_factor
        if parsed.affine_offset:
            value = value - parsed.affine_offset
        return value

    def erase(self) -> Any:
        """Drop the units of a dimensionless or pure-angle quantity.

        The value is first rescaled to unity (radians for angles).
        """
        if not (self.dimension.is_dimensionless() or self.dimension.is_pure_angle()):
            raise IncompatibleDimensions(self.dimension, DIMENSIONLESS, "erase")
        return convert_value(self.value, self.scale, IDENTITY)

    def __float__(self) -> float:
        return float(self.erase())

    # -- Arithmetic --------------------------------------------------------
    def combine(self, other: Quantity, op: Operator | str, policy: ResolutionPolicy | str | None = None) -> Quantity:
        """Combine with ``other`` under an explicit policy."""
        combination = combine(self.descriptor, other.descriptor, op, policy)
        value = apply_values(combination, op, self.value, other.value)
        return Quantity(value, combination.result.dimension, combination.result.scale)

    def add(self, other: Quantity, policy: ResolutionPolicy | str | None = None) -> Quantity:
        return self.combine(other, Operator.ADD, policy)

    def sub(self, other: Quantity, policy: ResolutionPolicy | str | None = None) -> Quantity:
        return self.combine(other, Operator.SUBTRACT, policy)

    def __add__(self, other: Any) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.combine(other, Operator.ADD)

    def __sub__(self, other: Any) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.combine(other, Operator.SUBTRACT)

    def __mul__(self, other: Any) -> Quantity:
        if isinstance(other, Quantity):
            return self.combine(other, Operator.MULTIPLY)
        if _is_scalar(other) or isinstance(other, np.ndarray):
            return Quantity(self.value * other, self.dimension, self.scale)
        return NotImplemented

    def __rmul__(self, other: Any) -> Quantity:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Quantity:
        if isinstance(other, Quantity):
            return self.combine(other, Operator.DIVIDE)
        if _is_scalar(other) or isinstance(other, np.ndarray):
            return Quantity(self.value / other, self.dimension, self.scale)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Quantity:
        if _is_scalar(other) or isinstance(other, np.ndarray):
            return Quantity(other / self.value, self.dimension.reciprocal(), self.scale.reciprocal())
        return NotImplemented

    def __pow__(self, exponent: int) -> Quantity:
        result = power(self.descriptor, exponent)
        return Quantity(self.value**exponent, result.dimension, result.scale)

    def __neg__(self) -> Quantity:
        return Quantity(-self.value, self.dimension, self.scale)

    def __abs__(self) -> Quantity:
        return Quantity(abs(self.value), self.dimension, self.scale)

    # -- Comparison --------------------------------------------------------
    def _aligned(self, other: Quantity) -> Any:
        if self.dimension != other.dimension:
            raise IncompatibleDimensions(self.dimension, other.dimension, "compare")
        resolution = LEFT_HAND_WINS.resolve(self.scale, other.scale, Operator.SUBTRACT)
        return other.value * resolution.rhs_factor if resolution.rhs_factor != 1.0 else other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        rhs = self._aligned(other)
        if isinstance(self.value, np.ndarray) or isinstance(rhs, np.ndarray):
            return bool(np.array_equal(self.value, rhs))
        return bool(self.value == rhs)

    __hash__ = None  # type: ignore[assignment]

    def _compare(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        if not isinstance(other, Quantity):
            return NotImplemented
        return op(self.value, self._aligned(other))

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def isclose(self, other: Quantity, rel_tol: float = 1e-9) -> bool:
        """Approximate equality after aligning ``other`` to this scale."""
        rhs = self._aligned(other)
        return bool(np.all(np.isclose(self.value, rhs, rtol=rel_tol, atol=0.0)))

    # -- Rendering ---------------------------------------------------------
    def fmt(self, target: Optional[str] = None, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
        """Render; with ``target`` the value is converted into that unit first."""
        if target is not None:
            if overrides:
                options = (options or FormatOptions()).model_copy(update=overrides)
            return format_as(self.value, self.dimension, self.scale, target, options)
        return format_quantity(self.value, self.dimension, self.scale, options, **overrides)

    def __str__(self) -> str:
        return self.fmt()

    def __repr__(self) -> str:
        return f"Quantity({self.value!r}, {self.dimension!r}, {self.scale!r})"


__all__ = ["Quantity"]
