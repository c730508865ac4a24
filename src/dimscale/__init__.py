"""Exact dimensional analysis over integer dimension and prime-scale exponents."""

from .core import DIMENSIONLESS, DimensionVector, ScaleVector, add, as_pow10, negate, scale_by
from .errors import (
    DimensionalError,
    ExponentOverflow,
    IncompatibleDimensions,
    ScaleMismatch,
    SerializationError,
    UnitParseError,
    UnknownUnit,
)
from .units import DEFAULT_TABLE, UnitTable, parse_unit
from .engine import (
    Descriptor,
    LeftHandWins,
    Operator,
    Strict,
    combine,
    compute_factor,
    exact_factor,
    get_policy,
    power,
)
from .printing import (
    FormatOptions,
    format_as,
    format_quantity,
    from_json,
    from_string,
    serialize,
    to_standard_unit_code,
)
from .engine.quantity import Quantity

__version__ = "0.1.0"

__all__ = [
    "DIMENSIONLESS",
    "DimensionVector",
    "ScaleVector",
    "add",
    "as_pow10",
    "negate",
    "scale_by",
    "DimensionalError",
    "ExponentOverflow",
    "IncompatibleDimensions",
    "ScaleMismatch",
    "SerializationError",
    "UnitParseError",
    "UnknownUnit",
    "DEFAULT_TABLE",
    "UnitTable",
    "parse_unit",
    "Descriptor",
    "LeftHandWins",
    "Operator",
    "Strict",
    "combine",
    "compute_factor",
    "exact_factor",
    "get_policy",
    "power",
    "FormatOptions",
    "format_as",
    "format_quantity",
    "from_json",
    "from_string",
    "serialize",
    "to_standard_unit_code",
    "Quantity",
    "__version__",
]
