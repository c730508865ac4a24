"""Core exponent-vector primitives for dimscale."""

from .dimensions import (
    BASIS,
    DIMENSIONLESS,
    DimensionVector,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    TIME,
    VELOCITY,
)
from .exponents import add, as_pow10, negate, scale_by
from .scales import IDENTITY, ScaleVector

__all__ = [
    "BASIS",
    "DIMENSIONLESS",
    "DimensionVector",
    "ENERGY",
    "FORCE",
    "LENGTH",
    "MASS",
    "TIME",
    "VELOCITY",
    "IDENTITY",
    "ScaleVector",
    "add",
    "as_pow10",
    "negate",
    "scale_by",
]
