"""Value-level combination API.

Operands are :class:`Descriptor` pairs of a dimension and a scale vector. The
result of :func:`combine` is the result descriptor together with the factor
each operand value must be multiplied by before the numeric operation. A
static checker and the dynamic :class:`~dimscale.engine.quantity.Quantity`
consume the same functions.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Optional

from ..core.dimensions import DimensionVector
from ..core.exponents import scale_by
from ..core.scales import ScaleVector
from ..errors import IncompatibleDimensions
from ..units.table import DEFAULT_TABLE, UnitTable
from .policies import Operator, ResolutionPolicy, get_policy


@dataclass(frozen=True)
class Descriptor:
    """A (dimension, scale) pair describing the unit a value is denominated in."""

    dimension: DimensionVector
    scale: ScaleVector = ScaleVector()

    @classmethod
    def from_unit(cls, symbol: str, *, table: Optional[UnitTable] = None) -> Descriptor:
        """Descriptor of a table unit, prefixes allowed.

        Non-storage units map to their storage scale; their conversion factor
        is not part of the descriptor.
        """
        unit = (table or DEFAULT_TABLE).resolve(symbol)
        return cls(unit.dimension, unit.scale)

    def __str__(self) -> str:
        return f"{self.dimension} @ {self.scale}"


@dataclass(frozen=True)
class Combination:
    result: Descriptor
    lhs_factor: float = 1.0
    rhs_factor: float = 1.0


def combine(
    lhs: Descriptor,
    rhs: Descriptor,
    op: Operator | str,
    policy: ResolutionPolicy | str | None = None,
) -> Combination:
    """Combine two descriptors under ``policy``.

    Raises :class:`IncompatibleDimensions` for add/subtract across dimensions
    and whatever the policy raises for incompatible scales
    (:class:`~dimscale.errors.ScaleMismatch` under ``Strict``).
    """
    op = Operator(op)
    if op is Operator.POWER:
        raise ValueError("Power is unary; use power(descriptor, exponent)")
    policy = get_policy(policy)

    if op.is_additive:
        if lhs.dimension != rhs.dimension:
            raise IncompatibleDimensions(lhs.dimension, rhs.dimension, op.value)
        dimension = lhs.dimension
    elif op is Operator.MULTIPLY:
        dimension = lhs.dimension * rhs.dimension
    else:
        dimension = lhs.dimension / rhs.dimension

    resolution = policy.resolve(lhs.scale, rhs.scale, op)
    return Combination(Descriptor(dimension, resolution.target), resolution.lhs_factor, resolution.rhs_factor)


def power(descriptor: Descriptor, exponent: int) -> Descriptor:
    """Raise a descriptor to an integer power; anything else raises ``TypeError``."""
    return Descriptor(scale_by(descriptor.dimension, exponent), scale_by(descriptor.scale, exponent))


_NUMERIC_OPS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


def apply_values(combination: Combination, op: Operator | str, lhs_value: Any, rhs_value: Any) -> Any:
    """Apply the per-operand factors of ``combination`` and then ``op``."""
    if combination.lhs_factor != 1.0:
        lhs_value = lhs_value * combination.lhs_factor
    if combination.rhs_factor != 1.0:
        rhs_value = rhs_value * combination.rhs_factor
    return _NUMERIC_OPS[Operator(op)](lhs_value, rhs_value)


__all__ = ["Descriptor", "Combination", "combine", "power", "apply_values"]
