"""Scale exponent vectors.

A measurement scale is the factor between a unit and the coherent SI unit of
the same dimension, restricted to products of powers of 2, 3, 5 and π. The
kilometre is ``10**3 = 2**3 * 5**3`` and so ``ScaleVector(3, 0, 3, 0)``; the
degree is ``π/180 = 2**-2 * 3**-2 * 5**-1 * π`` and so
``ScaleVector(-2, -2, -1, 1)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar, Optional, Tuple

from .exponents import ExponentVector

PRIME_FIELDS: Tuple[str, ...] = ("p2", "p3", "p5", "pi")
PRIME_LABELS: Tuple[str, ...] = ("2", "3", "5", "π")
_LOGS: Tuple[float, ...] = (math.log(2), math.log(3), math.log(5), math.log(math.pi))


@dataclass(frozen=True)
class ScaleVector(ExponentVector):
    """Exponents of the primes ``(2, 3, 5, π)`` in a scale factor."""

    _FIELDS: ClassVar[Tuple[str, ...]] = PRIME_FIELDS

    p2: int = 0
    p3: int = 0
    p5: int = 0
    pi: int = 0

    # -- Constructors -----------------------------------------------------
    @classmethod
    def power_of_two(cls, power: int) -> ScaleVector:
        return cls(p2=power)

    @classmethod
    def power_of_six(cls, power: int) -> ScaleVector:
        # 6 = 2 * 3
        return cls(p2=power, p3=power)

    @classmethod
    def power_of_ten(cls, power: int) -> ScaleVector:
        # 10 = 2 * 5
        return cls(p2=power, p5=power)

    @classmethod
    def power_of_pi(cls, power: int) -> ScaleVector:
        return cls(pi=power)

    @classmethod
    def from_rational(cls, value: Fraction | int) -> ScaleVector:
        """Factor a positive rational over ``{2, 3, 5}``.

        Raises ``ValueError`` when ``value`` is not positive or has any other
        prime factor.
        """
        value = Fraction(value)
        if value <= 0:
            raise ValueError(f"Scale factor must be positive, got {value}")
        exponents = []
        numerator, denominator = value.numerator, value.denominator
        for prime in (2, 3, 5):
            power = 0
            while numerator % prime == 0:
                numerator //= prime
                power += 1
            while denominator % prime == 0:
                denominator //= prime
                power -= 1
            exponents.append(power)
        if numerator != 1 or denominator != 1:
            raise ValueError(f"{value} is not a product of powers of 2, 3 and 5")
        return cls(*exponents)

    # -- Queries ----------------------------------------------------------
    def log10(self) -> Optional[int]:
        """Return ``n`` iff this vector is ``(n, 0, n, 0)``."""
        if self.p3 == 0 and self.pi == 0 and self.p2 == self.p5:
            return self.p2
        return None

    def is_decimal(self) -> bool:
        return self.log10() is not None

    def rational_part(self) -> Fraction:
        """Exact value of ``2**p2 * 3**p3 * 5**p5``."""
        return Fraction(2) ** self.p2 * Fraction(3) ** self.p3 * Fraction(5) ** self.p5

    def log_magnitude(self) -> float:
        """Natural logarithm of the factor; orders scales by size."""
        return sum(exp * log for exp, log in zip(self._as_tuple(), _LOGS))

    def __str__(self) -> str:
        terms = [
            f"{label}^{exp}"
            for label, exp in zip(PRIME_LABELS, self._as_tuple())
            if exp != 0
        ]
        return "·".join(terms) if terms else "1"


IDENTITY = ScaleVector()

__all__ = ["PRIME_FIELDS", "PRIME_LABELS", "ScaleVector", "IDENTITY"]
