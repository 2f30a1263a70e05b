"""Region lookup for registered instances."""

import logging
from typing import Optional

from az_region_lib.models import RegionMappingConfig

from .region_mapper import AzToRegionMapper, build_mapper

logger = logging.getLogger(__name__)


class InstanceRegionChecker:
    """Decides which region an instance lives in from its availability zone.

    Instances that report no zone are treated as local.
    """

    def __init__(self, mapper: AzToRegionMapper, local_region: str):
        self._mapper = mapper
        self._local_region = local_region

    @property
    def mapper(self) -> AzToRegionMapper:
        return self._mapper

    @property
    def local_region(self) -> str:
        return self._local_region

    def get_instance_region(self, availability_zone: Optional[str]) -> Optional[str]:
        """Get the region for an instance's availability zone.

        Args:
            availability_zone: Zone reported by the instance, None if unknown

        Returns:
            Region identifier; the local region when no zone is reported, None
            when the zone is not in the current mapping
        """
        if not availability_zone:
            logger.warning(
                f"Cannot get region for instance without availability zone. "
                f"Returning local region {self._local_region} by default"
            )
            return self._local_region

        return self._mapper.get_region_for_zone(availability_zone)

    def is_local_region(self, instance_region: Optional[str]) -> bool:
        # no region means local
        return instance_region is None or instance_region == self._local_region


def build_instance_region_checker(
    config: RegionMappingConfig,
    mapper: Optional[AzToRegionMapper] = None,
) -> InstanceRegionChecker:
    """Create an InstanceRegionChecker for the configured local region.

    Args:
        config: Region mapping settings (local_region is used here)
        mapper: Mapper to resolve zones with (default: build_mapper(config))

    Raises:
        ConfigurationError: If a new mapper is built and a configured region
            cannot be resolved
    """
    if mapper is None:
        mapper = build_mapper(config)

    logger.info(f"Instance region checker created for local region {config.local_region}")
    return InstanceRegionChecker(mapper, local_region=config.local_region)
