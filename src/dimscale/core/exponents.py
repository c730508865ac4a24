"""Integer exponent algebra shared by dimension and scale vectors.

Both vector kinds are immutable tuples of signed 16-bit integers. Multiplying
two quantities adds their exponent vectors, taking a reciprocal negates them and
raising to an integer power scales them. Every result is range checked; leaving
the 16-bit range raises :class:`~dimscale.errors.ExponentOverflow`.
"""

from __future__ import annotations

import numbers
from typing import ClassVar, Iterable, Optional, Tuple, TypeVar

from ..config import EXPONENT_MAX, EXPONENT_MIN
from ..errors import ExponentOverflow

V = TypeVar("V", bound="ExponentVector")


def _checked(value: int) -> int:
    if value < EXPONENT_MIN or value > EXPONENT_MAX:
        raise ExponentOverflow(value, EXPONENT_MAX)
    return value


def _require_integer(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return int(value)


class ExponentVector:
    """Base for the frozen exponent dataclasses."""

    _FIELDS: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        """Ensure all exponents are integers inside the representable range."""
        for field in self._FIELDS:
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(
                    f"{type(self).__name__} exponent {field} must be an integer, got {type(value)}"
                )
            object.__setattr__(self, field, _checked(int(value)))

    # -- Helpers ----------------------------------------------------------
    def _as_tuple(self) -> Tuple[int, ...]:
        return tuple(getattr(self, field) for field in self._FIELDS)

    @classmethod
    def _from_tuple(cls: type[V], values: Iterable[int]) -> V:
        return cls(*values)

    def __iter__(self):
        return iter(self._as_tuple())

    def __len__(self) -> int:
        return len(self._FIELDS)

    def is_zero(self) -> bool:
        """Return ``True`` when every exponent is zero."""
        return all(value == 0 for value in self._as_tuple())

    # -- Multiplicative notation -----------------------------------------
    def __mul__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return add(self, other)

    def __truediv__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return add(self, negate(other))

    def __pow__(self: V, exponent: int) -> V:
        return scale_by(self, exponent)

    def reciprocal(self: V) -> V:
        return negate(self)


def add(a: V, b: V) -> V:
    """Elementwise sum; the exponent vector of a product."""
    if type(a) is not type(b):
        raise TypeError(f"Cannot add {type(a).__name__} and {type(b).__name__}")
    return a._from_tuple(x + y for x, y in zip(a._as_tuple(), b._as_tuple()))


def negate(a: V) -> V:
    """Elementwise negation; the exponent vector of a reciprocal."""
    return a._from_tuple(-x for x in a._as_tuple())


def scale_by(a: V, k: int) -> V:
    """Elementwise multiplication by the integer power ``k``.

    Only integers are accepted: fractional powers have no representation.
    """
    k = _require_integer(k, "Power")
    return a._from_tuple(x * k for x in a._as_tuple())


def as_pow10(scale) -> Optional[int]:
    """Return ``n`` when ``scale`` is exactly ``10**n``, otherwise ``None``."""
    return scale.log10()


__all__ = ["ExponentVector", "add", "negate", "scale_by", "as_pow10"]
