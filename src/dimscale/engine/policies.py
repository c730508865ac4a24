"""Scale resolution policies.

A policy decides the result scale when two operands of equal dimension are
combined, and the factor each operand's value must be multiplied by first.
Only addition and subtraction involve a choice: multiplication and division
compose scales exactly like the units they represent, under every policy.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict

from ..config import DEFAULT_POLICY
from ..core.scales import ScaleVector
from ..errors import ScaleMismatch
from .conversion import compute_factor

logger = logging.getLogger(__name__)


class Operator(str, enum.Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"

    @property
    def is_additive(self) -> bool:
        return self in (Operator.ADD, Operator.SUBTRACT)


@dataclass(frozen=True)
class Resolution:
    """Result scale plus the factor applied to each operand value."""

    target: ScaleVector
    lhs_factor: float = 1.0
    rhs_factor: float = 1.0


class ResolutionPolicy(ABC):
    """Contract shared by every policy.

    Subclasses implement :meth:`resolve_additive`; :meth:`resolve` handles the
    multiplicative operators identically for all of them.
    """

    name: ClassVar[str] = ""

    def resolve(self, lhs: ScaleVector, rhs: ScaleVector, op: Operator | str) -> Resolution:
        op = Operator(op)
        if op is Operator.MULTIPLY:
            return Resolution(lhs * rhs)
        if op is Operator.DIVIDE:
            return Resolution(lhs / rhs)
        if op is Operator.POWER:
            raise ValueError("Power is unary; use dimscale.engine.arithmetic.power")
        resolution = self.resolve_additive(lhs, rhs)
        if resolution.lhs_factor != 1.0 or resolution.rhs_factor != 1.0:
            logger.debug(
                "%s: %s %s %s -> %s (factors %r, %r)",
                self.name,
                lhs,
                op.value,
                rhs,
                resolution.target,
                resolution.lhs_factor,
                resolution.rhs_factor,
            )
        return resolution

    @abstractmethod
    def resolve_additive(self, lhs: ScaleVector, rhs: ScaleVector) -> Resolution:
        """Pick the target scale for add/subtract of two equal-dimension operands."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _convert_both(lhs: ScaleVector, rhs: ScaleVector, target: ScaleVector) -> Resolution:
    return Resolution(
        target,
        1.0 if lhs == target else compute_factor(lhs, target),
        1.0 if rhs == target else compute_factor(rhs, target),
    )


class Strict(ResolutionPolicy):
    """Add/subtract only across bit-identical scales."""

    name = "strict"

    def resolve_additive(self, lhs: ScaleVector, rhs: ScaleVector) -> Resolution:
        if lhs != rhs:
            raise ScaleMismatch(lhs, rhs)
        return Resolution(lhs)


class LeftHandWins(ResolutionPolicy):
    """Rescale the right operand into the left operand's scale."""

    name = "left_hand_wins"

    def resolve_additive(self, lhs: ScaleVector, rhs: ScaleVector) -> Resolution:
        return _convert_both(lhs, rhs, lhs)


class SmallerWins(ResolutionPolicy):
    """Use the finer of the two scales; ties keep the left one."""

    name = "smaller_wins"

    def resolve_additive(self, lhs: ScaleVector, rhs: ScaleVector) -> Resolution:
        target = rhs if rhs.log_magnitude() < lhs.log_magnitude() else lhs
        return _convert_both(lhs, rhs, target)


class LargerWins(ResolutionPolicy):
    """Use the coarser of the two scales; ties keep the left one."""

    name = "larger_wins"

    def resolve_additive(self, lhs: ScaleVector, rhs: ScaleVector) -> Resolution:
        target = rhs if rhs.log_magnitude() > lhs.log_magnitude() else lhs
        return _convert_both(lhs, rhs, target)


class FixedScale(ResolutionPolicy):
    """Left-hand-wins pinned to one storage scale: both operands land on ``target``."""

    name = "fixed"

    def __init__(self, target: ScaleVector) -> None:
        self.target = target

    def resolve_additive(self, lhs: ScaleVector, rhs: ScaleVector) -> Resolution:
        return _convert_both(lhs, rhs, self.target)

    def __repr__(self) -> str:
        return f"FixedScale({self.target})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixedScale) and other.target == self.target

    def __hash__(self) -> int:
        return hash((FixedScale, self.target))


STRICT = Strict()
LEFT_HAND_WINS = LeftHandWins()
SMALLER_WINS = SmallerWins()
LARGER_WINS = LargerWins()

POLICIES: Dict[str, ResolutionPolicy] = {
    policy.name: policy for policy in (STRICT, LEFT_HAND_WINS, SMALLER_WINS, LARGER_WINS)
}


def get_policy(name: str | ResolutionPolicy | None = None) -> ResolutionPolicy:
    """Look up a policy by name; ``None`` selects the configured default."""
    if isinstance(name, ResolutionPolicy):
        return name
    key = (name or DEFAULT_POLICY).lower()
    try:
        return POLICIES[key]
    except KeyError:
        raise ValueError(f"Unknown resolution policy '{key}'; expected one of {sorted(POLICIES)}") from None


__all__ = [
    "Operator",
    "Resolution",
    "ResolutionPolicy",
    "Strict",
    "LeftHandWins",
    "SmallerWins",
    "LargerWins",
    "FixedScale",
    "STRICT",
    "LEFT_HAND_WINS",
    "SMALLER_WINS",
    "LARGER_WINS",
    "POLICIES",
    "get_policy",
]
