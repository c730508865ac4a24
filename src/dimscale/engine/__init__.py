"""Conversion factors, scale resolution policies and the combination API."""

from .arithmetic import Combination, Descriptor, apply_values, combine, power
from .conversion import compute_factor, convert_value, exact_factor, factors_consistent
from .policies import (
    FixedScale,
    LargerWins,
    LeftHandWins,
    Operator,
    Resolution,
    ResolutionPolicy,
    SmallerWins,
    Strict,
    get_policy,
)

__all__ = [
    "Combination",
    "Descriptor",
    "apply_values",
    "combine",
    "power",
    "compute_factor",
    "convert_value",
    "exact_factor",
    "factors_consistent",
    "FixedScale",
    "LargerWins",
    "LeftHandWins",
    "Operator",
    "Resolution",
    "ResolutionPolicy",
    "SmallerWins",
    "Strict",
    "get_policy",
]
