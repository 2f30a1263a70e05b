"""Built-in availability zone defaults for well-known regions.

If a remote region is configured to be fetched but zone discovery has no
information for it, these defaults are used instead. If discovery returns
any real zone for the region, the defaults are not consulted at all.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

# Exact identifiers are relied on by existing deployments
DEFAULT_REGION_ZONES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "us-east-1": ("us-east-1a", "us-east-1c", "us-east-1d", "us-east-1e"),
    "us-west-1": ("us-west-1a", "us-west-1c"),
    "us-west-2": ("us-west-2a", "us-west-2b", "us-west-2c"),
    "eu-west-1": ("eu-west-1a", "eu-west-1b", "eu-west-1c"),
})


class DefaultZoneTable:
    """Immutable region -> zones lookup used as the resolution fallback.

    Example:
        >>> table = DefaultZoneTable()
        >>> table.zones_for_region("us-west-1")
        ('us-west-1a', 'us-west-1c')
        >>> table.zones_for_region("ap-south-1")
        ()
    """

    def __init__(self, entries: Optional[Mapping[str, Iterable[str]]] = None):
        """Initialize the table.

        Args:
            entries: Region -> zones mapping (default: DEFAULT_REGION_ZONES)
        """
        source = DEFAULT_REGION_ZONES if entries is None else entries

        table: Dict[str, Tuple[str, ...]] = {}
        for region, zones in source.items():
            # Repeated zones collapse, first occurrence keeps its position
            table[region] = tuple(dict.fromkeys(zones))

        self._table = MappingProxyType(table)

    def zones_for_region(self, region: str) -> Tuple[str, ...]:
        """Return the default zones for a region, empty if it has none."""
        return self._table.get(region, ())

    def has_region(self, region: str) -> bool:
        return bool(self._table.get(region))

    def regions(self) -> List[str]:
        return list(self._table.keys())

    def __repr__(self) -> str:
        return f"DefaultZoneTable(regions={self.regions()})"
