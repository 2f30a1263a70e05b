"""Availability Zone to Region Mapping

Resolves which configured region an availability zone belongs to. For every
region whose registry is fetched, zones are obtained from an injected zone
discovery strategy; regions the strategy knows nothing about fall back to the
built-in DefaultZoneTable.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from az_region_lib.models import RegionMappingConfig

from .default_zones import DefaultZoneTable
from .zone_discovery import (
    DEFAULT_ZONE,
    PropertyBasedZoneDiscovery,
    StaticZoneDiscovery,
    ZoneDiscoveryFn,
)

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """A region to fetch has neither discovered nor default zones."""

    def __init__(self, region: str):
        self.region = region
        super().__init__(
            f"No availability zone information available for remote region: {region}. "
            f"This is required if registry information for this region is configured to be fetched."
        )


def _is_degenerate(zones: Optional[List[str]]) -> bool:
    """True when discovery gave no usable zones (None, empty, or just the default marker)."""
    if not zones:
        return True
    return len(zones) == 1 and zones[0] == DEFAULT_ZONE


class AzToRegionMapper:
    """Zone -> region index built from the regions to fetch.

    Each call to set_regions_to_fetch builds a fresh index and publishes it
    with a single reference swap, so concurrent get_region_for_zone callers
    see either the previous index or the new one, never a half-built one.
    Configuration calls are serialised internally.

    Example:
        ```python
        mapper = AzToRegionMapper(StaticZoneDiscovery({"us-west-2": ["us-west-2z"]}))
        mapper.set_regions_to_fetch(["us-east-1", "us-west-2"])

        mapper.get_region_for_zone("us-east-1c")  # "us-east-1" (default table)
        mapper.get_region_for_zone("us-west-2z")  # "us-west-2" (discovered)
        mapper.get_region_for_zone("us-west-2a")  # None, defaults bypassed
        ```
    """

    def __init__(
        self,
        zone_discovery: ZoneDiscoveryFn,
        default_table: Optional[DefaultZoneTable] = None,
    ):
        """Initialize the mapper.

        Args:
            zone_discovery: Callable returning the zones of a region
            default_table: Fallback zones (default: built-in DefaultZoneTable)
        """
        self.zone_discovery = zone_discovery
        self.default_table = default_table or DefaultZoneTable()

        self._zone_to_region: Mapping[str, str] = MappingProxyType({})
        self._regions_to_fetch: Optional[List[str]] = None
        self._configure_lock = threading.Lock()

    @property
    def regions_to_fetch(self) -> Optional[List[str]]:
        """Region list from the last configuration call, None if none."""
        if self._regions_to_fetch is None:
            return None
        return list(self._regions_to_fetch)

    def set_regions_to_fetch(self, regions_to_fetch: Optional[Sequence[str]]) -> None:
        """Rebuild the zone -> region index for the given regions.

        Args:
            regions_to_fetch: Regions in resolution order, or None to erase
                the mapping

        Raises:
            ConfigurationError: If a region has no discovered zones and no
                default zones. Entries for regions before it stay published.
        """
        with self._configure_lock:
            self._configure_unlocked(regions_to_fetch)

    def refresh(self) -> None:
        """Re-run resolution for the last configured regions.

        Does nothing if set_regions_to_fetch was never called with a list.
        """
        with self._configure_lock:
            if self._regions_to_fetch is None:
                logger.debug("No regions configured, skipping refresh")
                return
            self._configure_unlocked(self._regions_to_fetch)

    def _configure_unlocked(self, regions_to_fetch: Optional[Sequence[str]]) -> None:
        # caller holds _configure_lock
        if regions_to_fetch is None:
            logger.info("Regions to fetch is None. Erasing older mapping if any.")
            self._regions_to_fetch = None
            self._publish({})
            return

        regions = list(regions_to_fetch)
        self._regions_to_fetch = regions
        logger.info(f"Fetching availability zone to region mapping for regions {regions}")

        index: Dict[str, str] = {}
        try:
            for region in regions:
                self._resolve_region(region, index)
        finally:
            self._publish(index)

        logger.info(f"Availability zone to region mapping for all remote regions: {index}")

    def get_region_for_zone(self, availability_zone: str) -> Optional[str]:
        """Get the region an availability zone belongs to.

        Returns:
            Region identifier, or None if the zone is unknown
        """
        region = self._zone_to_region.get(availability_zone)
        logger.debug(f"Resolved zone {availability_zone} -> {region}")
        return region

    def mapping(self) -> Mapping[str, str]:
        """Read-only view of the current zone -> region index."""
        return self._zone_to_region

    def __len__(self) -> int:
        return len(self._zone_to_region)

    def _resolve_region(self, region: str, index: Dict[str, str]) -> None:
        zones = self._discover(region)

        if _is_degenerate(zones):
            logger.info(
                f"No availability zone information available for remote region: {region}. "
                f"Now checking in the default mapping."
            )
            default_zones = self.default_table.zones_for_region(region)
            if not default_zones:
                error = ConfigurationError(region)
                logger.error(str(error))
                raise error
            zones = list(default_zones)

        for zone in zones:
            index[zone] = region

    def _discover(self, region: str) -> Optional[List[str]]:
        zones: Optional[Iterable[str]] = self.zone_discovery(region)
        if zones is None:
            return None
        if isinstance(zones, str):
            return [zones]
        return list(dict.fromkeys(zones))

    def _publish(self, index: Dict[str, str]) -> None:
        self._zone_to_region = MappingProxyType(index)


def build_mapper(
    config: RegionMappingConfig,
    zone_discovery: Optional[ZoneDiscoveryFn] = None,
    default_table: Optional[DefaultZoneTable] = None,
) -> AzToRegionMapper:
    """Create a mapper from config and resolve its regions.

    Args:
        config: Region mapping settings
        zone_discovery: Discovery strategy (default: static discovery when the
            config carries explicit zones, property based discovery otherwise)
        default_table: Fallback zones (default: built-in DefaultZoneTable)

    Raises:
        ConfigurationError: If a configured region cannot be resolved
    """
    if zone_discovery is None:
        if config.availability_zones:
            zone_discovery = StaticZoneDiscovery(config.availability_zones)
        else:
            zone_discovery = PropertyBasedZoneDiscovery(prefix=config.env_prefix)

    mapper = AzToRegionMapper(zone_discovery, default_table=default_table)
    mapper.set_regions_to_fetch(config.regions_to_fetch)
    return mapper


# Singleton instance for global access
_mapper_instance: Optional[AzToRegionMapper] = None


def get_region_mapper() -> AzToRegionMapper:
    """Get or create the global AzToRegionMapper instance.

    The first call builds the mapper from environment configuration.

    Example:
        ```python
        from az_region_lib.discovery import get_region_mapper

        region = get_region_mapper().get_region_for_zone("us-west-2b")
        ```
    """
    global _mapper_instance

    if _mapper_instance is None:
        _mapper_instance = build_mapper(RegionMappingConfig.from_env())

    return _mapper_instance


def reset_region_mapper():
    """Reset the global AzToRegionMapper instance.

    Used for testing or reconfiguration.
    """
    global _mapper_instance
    _mapper_instance = None
    logger.warning("AzToRegionMapper instance reset")
