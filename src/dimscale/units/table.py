"""Read-only unit metadata table derived from :mod:`dimscale.units.data`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..core.dimensions import DimensionVector
from ..core.scales import IDENTITY, ScaleVector
from ..errors import UnknownUnit
from . import data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitMetadataEntry:
    """A single named unit."""

    symbol: str
    name: str
    dimension: DimensionVector
    scale: ScaleVector
    category: str
    rank: int
    family: str
    aliases: Tuple[str, ...] = ()
    conversion_factor: float = 1.0
    affine_offset: float = 0.0
    prefixable: bool = False
    ucum: Optional[str] = None

    @property
    def is_storage(self) -> bool:
        """True when the unit is exactly representable by its scale vector."""
        return self.conversion_factor == 1.0 and self.affine_offset == 0.0


@dataclass(frozen=True)
class Prefix:
    name: str
    symbol: str
    power: int

    @property
    def scale(self) -> ScaleVector:
        return ScaleVector.power_of_ten(self.power)


@dataclass(frozen=True)
class ResolvedUnit:
    """A table entry, optionally carrying an SI prefix."""

    entry: UnitMetadataEntry
    prefix: Optional[Prefix] = None

    @property
    def symbol(self) -> str:
        return (self.prefix.symbol if self.prefix else "") + self.entry.symbol

    @property
    def dimension(self) -> DimensionVector:
        return self.entry.dimension

    @property
    def scale(self) -> ScaleVector:
        if self.prefix is None:
            return self.entry.scale
        return self.entry.scale * self.prefix.scale

    @property
    def conversion_factor(self) -> float:
        return self.entry.conversion_factor

    @property
    def affine_offset(self) -> float:
        return self.entry.affine_offset


class UnitTable:
    """Lookup structure over the canonical dataset.

    Built once; every index is exposed as a read-only mapping. Lookup by exact
    symbol always wins over prefix splitting, so ``"min"`` is the minute and
    ``"cd"`` the candela, never milli-inch or centi-day.
    """

    def __init__(
        self,
        dimensions=data.DIMENSIONS,
        prefixes=data.PREFIXES,
        micro_aliases=data.MICRO_ALIASES,
    ) -> None:
        entries: List[UnitMetadataEntry] = []
        by_symbol: Dict[str, UnitMetadataEntry] = {}
        by_name: Dict[str, UnitMetadataEntry] = {}
        by_dimension: Dict[DimensionVector, List[UnitMetadataEntry]] = {}
        dimension_names: Dict[DimensionVector, str] = {}

        declaration = 0
        for family, exponents, units in dimensions:
            dimension = DimensionVector(*exponents)
            if dimension in dimension_names:
                raise ValueError(f"Dimension {dimension} declared twice")
            dimension_names[dimension] = family
            for declared in units:
                category = declared["category"]
                entry = UnitMetadataEntry(
                    symbol=declared["symbols"][0],
                    name=declared["name"],
                    dimension=dimension,
                    scale=declared["scale"],
                    category=category,
                    rank=data.CATEGORY_ORDER.index(category) * 1000 + declaration,
                    family=family,
                    aliases=declared["symbols"][1:],
                    conversion_factor=declared["factor"],
                    affine_offset=declared["offset"],
                    prefixable=declared["prefixable"],
                    ucum=declared["ucum"],
                )
                declaration += 1
                for symbol in declared["symbols"]:
                    if symbol in by_symbol:
                        raise ValueError(f"Duplicate unit symbol '{symbol}'")
                    by_symbol[symbol] = entry
                by_name[entry.name] = entry
                by_dimension.setdefault(dimension, []).append(entry)
                entries.append(entry)

        prefix_map: Dict[str, Prefix] = {}
        by_power: Dict[int, Prefix] = {}
        for name, symbol, power in prefixes:
            prefix = Prefix(name, symbol, power)
            prefix_map[symbol] = prefix
            by_power[power] = prefix
            if power == -6:
                for alias in micro_aliases:
                    prefix_map[alias] = prefix

        self._entries: Tuple[UnitMetadataEntry, ...] = tuple(entries)
        self._by_symbol: Mapping[str, UnitMetadataEntry] = MappingProxyType(by_symbol)
        self._by_name: Mapping[str, UnitMetadataEntry] = MappingProxyType(by_name)
        self._by_dimension: Mapping[DimensionVector, Tuple[UnitMetadataEntry, ...]] = MappingProxyType(
            {dim: tuple(sorted(group, key=lambda e: e.rank)) for dim, group in by_dimension.items()}
        )
        self._dimension_names: Mapping[DimensionVector, str] = MappingProxyType(dimension_names)
        self._prefixes: Mapping[str, Prefix] = MappingProxyType(prefix_map)
        self._prefixes_by_power: Mapping[int, Prefix] = MappingProxyType(by_power)
        self._sorted_prefixes = sorted(prefix_map.keys(), key=len, reverse=True)
        self._prefix_names = sorted(
            ((p.name, p) for p in prefix_map.values()), key=lambda item: len(item[0]), reverse=True
        )

        logger.debug(
            "Built unit table: %d units, %d dimensions, %d prefixes",
            len(self._entries),
            len(self._dimension_names),
            len(prefixes),
        )

    # ------------------------------------------------------------------
    @property
    def entries(self) -> Tuple[UnitMetadataEntry, ...]:
        return self._entries

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def get(self, symbol: str) -> UnitMetadataEntry:
        """Exact-symbol lookup (aliases included); no prefix splitting."""
        try:
            return self._by_symbol[symbol]
        except KeyError:
            raise UnknownUnit(symbol) from None

    def resolve(self, literal: str) -> ResolvedUnit:
        """Resolve a symbol or unit name, splitting off an SI prefix if needed.

        Tried in order: exact symbol, prefix + prefixable symbol, unit name
        (``meter``, ``meters``), prefix name + unit name (``kilometers``).
        """
        entry = self._by_symbol.get(literal)
        if entry is not None:
            return ResolvedUnit(entry)

        for prefix_symbol in self._sorted_prefixes:
            if literal.startswith(prefix_symbol) and len(literal) > len(prefix_symbol):
                tail = self._by_symbol.get(literal[len(prefix_symbol) :])
                if tail is not None and tail.prefixable:
                    return ResolvedUnit(tail, self._prefixes[prefix_symbol])

        word = literal.lower()
        for candidate in (word, word[:-1] if word.endswith("s") else None):
            if not candidate:
                continue
            entry = self._lookup_name(candidate)
            if entry is not None:
                return ResolvedUnit(entry)
            for prefix_name, prefix in self._prefix_names:
                if candidate.startswith(prefix_name):
                    entry = self._lookup_name(candidate[len(prefix_name) :])
                    if entry is not None and entry.prefixable:
                        return ResolvedUnit(entry, prefix)

        raise UnknownUnit(literal)

    def _lookup_name(self, name: str) -> Optional[UnitMetadataEntry]:
        entry = self._by_name.get(name)
        if entry is None and name.endswith("re"):
            # metre, litre
            entry = self._by_name.get(name[:-2] + "er")
        return entry

    def prefix_for(self, power: int) -> Optional[Prefix]:
        """Return the prefix denoting ``10**power`` (``None`` for unknown powers)."""
        return self._prefixes_by_power.get(power)

    # ------------------------------------------------------------------
    def by_dimension(self, dimension: DimensionVector) -> Tuple[UnitMetadataEntry, ...]:
        """Units sharing ``dimension``, ordered by preference rank."""
        return self._by_dimension.get(dimension, ())

    def symbols_for(self, dimension: DimensionVector) -> Tuple[str, ...]:
        return tuple(entry.symbol for entry in self.by_dimension(dimension))

    def default_unit(self, dimension: DimensionVector) -> Optional[UnitMetadataEntry]:
        """Best-ranked storage unit of ``dimension``."""
        for entry in self.by_dimension(dimension):
            if entry.is_storage:
                return entry
        return None

    def dimension_name(self, dimension: DimensionVector) -> Optional[str]:
        return self._dimension_names.get(dimension)

    def find_exact(self, dimension: DimensionVector, scale: ScaleVector) -> Optional[ResolvedUnit]:
        """Find a storage unit (possibly prefixed) matching ``(dimension, scale)`` exactly.

        Unprefixed units are preferred, in rank order; after that the first
        prefixable unit (in rank order) whose scale differs by a known prefix.
        """
        candidates = [entry for entry in self.by_dimension(dimension) if entry.is_storage]
        for entry in candidates:
            if entry.scale == scale:
                return ResolvedUnit(entry)
        if scale == IDENTITY:
            return None
        for entry in candidates:
            if not entry.prefixable:
                continue
            power = (scale / entry.scale).log10()
            if power is None or power == 0:
                continue
            prefix = self.prefix_for(power)
            if prefix is not None:
                return ResolvedUnit(entry, prefix)
        return None


DEFAULT_TABLE = UnitTable()

__all__ = [
    "UnitMetadataEntry",
    "Prefix",
    "ResolvedUnit",
    "UnitTable",
    "DEFAULT_TABLE",
]
