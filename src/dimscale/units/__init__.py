"""Unit metadata table and unit-expression parsing."""

from .parser import ParsedUnit, parse_unit
from .table import DEFAULT_TABLE, Prefix, ResolvedUnit, UnitMetadataEntry, UnitTable

__all__ = [
    "DEFAULT_TABLE",
    "ParsedUnit",
    "Prefix",
    "ResolvedUnit",
    "UnitMetadataEntry",
    "UnitTable",
    "parse_unit",
]
