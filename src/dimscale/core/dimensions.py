"""Dimension exponent vectors.

Physical dimensions are modelled as integer exponent vectors over eight axes:
the seven SI base quantities (mass, length, time, electric current,
temperature, amount of substance, luminous intensity) plus plane angle, which
is kept as its own axis so that angles are distinguishable from pure numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from .exponents import ExponentVector

BASE_FIELDS: Tuple[str, ...] = (
    "mass",
    "length",
    "time",
    "current",
    "temperature",
    "amount",
    "luminosity",
    "angle",
)

BASE_SYMBOLS: Tuple[str, ...] = ("M", "L", "T", "I", "Θ", "N", "J", "A")


@dataclass(frozen=True)
class DimensionVector(ExponentVector):
    """Representation of physical dimensions using integer exponents.

    Each instance stores the exponent of the corresponding base quantity in the
    order ``(M, L, T, I, Θ, N, J, A)``. The zero vector is dimensionless.
    """

    _FIELDS: ClassVar[Tuple[str, ...]] = BASE_FIELDS

    mass: int = 0
    length: int = 0
    time: int = 0
    current: int = 0
    temperature: int = 0
    amount: int = 0
    luminosity: int = 0
    angle: int = 0

    def is_dimensionless(self) -> bool:
        """Return ``True`` when all exponents are zero."""
        return self.is_zero()

    @classmethod
    def dimensionless(cls) -> DimensionVector:
        """Construct the dimensionless vector."""
        return cls()

    def as_basis(self) -> Optional[int]:
        """Index of the single base axis this vector equals, if any."""
        values = self._as_tuple()
        if sorted(values) == [0] * (len(values) - 1) + [1]:
            return values.index(1)
        return None

    def is_pure_angle(self) -> bool:
        """True for vectors that only carry an angle exponent."""
        return self.angle != 0 and all(value == 0 for value in self._as_tuple()[:-1])

    def __str__(self) -> str:
        if self.is_dimensionless():
            return "dimensionless"

        parts = []
        for symbol, power in zip(BASE_SYMBOLS, self._as_tuple()):
            if power == 0:
                continue
            if power == 1:
                parts.append(symbol)
            else:
                parts.append(f"{symbol}^{power}")

        return " * ".join(parts)


DIMENSIONLESS = DimensionVector.dimensionless()
MASS = DimensionVector(mass=1)
LENGTH = DimensionVector(length=1)
TIME = DimensionVector(time=1)
CURRENT = DimensionVector(current=1)
TEMPERATURE = DimensionVector(temperature=1)
AMOUNT = DimensionVector(amount=1)
LUMINOSITY = DimensionVector(luminosity=1)
ANGLE = DimensionVector(angle=1)

BASIS: Tuple[DimensionVector, ...] = (
    MASS,
    LENGTH,
    TIME,
    CURRENT,
    TEMPERATURE,
    AMOUNT,
    LUMINOSITY,
    ANGLE,
)

AREA = LENGTH**2
VOLUME = LENGTH**3
FREQUENCY = TIME**-1
VELOCITY = LENGTH / TIME
ACCELERATION = LENGTH / (TIME**2)
FORCE = MASS * ACCELERATION
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
PRESSURE = FORCE / AREA
MOMENTUM = MASS * VELOCITY
CHARGE = CURRENT * TIME
VOLTAGE = POWER / CURRENT
CAPACITANCE = CHARGE / VOLTAGE
RESISTANCE = VOLTAGE / CURRENT
CONDUCTANCE = RESISTANCE**-1
INDUCTANCE = RESISTANCE * TIME
MAGNETIC_FLUX = VOLTAGE * TIME
MAGNETIC_FIELD = MAGNETIC_FLUX / AREA
SOLID_ANGLE = ANGLE**2
LUMINOUS_FLUX = LUMINOSITY * SOLID_ANGLE
ILLUMINANCE = LUMINOUS_FLUX / AREA
DENSITY = MASS / VOLUME
KINEMATIC_VISCOSITY = AREA / TIME
DYNAMIC_VISCOSITY = PRESSURE * TIME
ANGULAR_VELOCITY = ANGLE / TIME

__all__ = [
    "BASE_FIELDS",
    "BASE_SYMBOLS",
    "BASIS",
    "DimensionVector",
    "DIMENSIONLESS",
    "MASS",
    "LENGTH",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOSITY",
    "ANGLE",
    "AREA",
    "VOLUME",
    "FREQUENCY",
    "VELOCITY",
    "ACCELERATION",
    "FORCE",
    "ENERGY",
    "POWER",
    "PRESSURE",
    "MOMENTUM",
    "CHARGE",
    "VOLTAGE",
    "CAPACITANCE",
    "RESISTANCE",
    "CONDUCTANCE",
    "INDUCTANCE",
    "MAGNETIC_FLUX",
    "MAGNETIC_FIELD",
    "SOLID_ANGLE",
    "LUMINOUS_FLUX",
    "ILLUMINANCE",
    "DENSITY",
    "KINEMATIC_VISCOSITY",
    "DYNAMIC_VISCOSITY",
    "ANGULAR_VELOCITY",
]
