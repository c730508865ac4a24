"""Human-readable rendering and UCUM serialization."""

from .pretty import FormatOptions, format_as, format_quantity, unit_label
from .ucum import (
    SerializedQuantity,
    from_json,
    from_standard_unit_code,
    from_string,
    serialize,
    serialize_quantity,
    to_standard_unit_code,
)

__all__ = [
    "FormatOptions",
    "format_as",
    "format_quantity",
    "unit_label",
    "SerializedQuantity",
    "from_json",
    "from_standard_unit_code",
    "from_string",
    "serialize",
    "serialize_quantity",
    "to_standard_unit_code",
]
