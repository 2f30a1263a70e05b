"""Zone Discovery Module

Availability zone to region resolution for remote registry fetching.
"""

from .default_zones import DEFAULT_REGION_ZONES, DefaultZoneTable
from .instance_region import InstanceRegionChecker, build_instance_region_checker
from .region_mapper import (
    AzToRegionMapper,
    ConfigurationError,
    build_mapper,
    get_region_mapper,
    reset_region_mapper,
)
from .zone_discovery import (
    DEFAULT_ZONE,
    PropertyBasedZoneDiscovery,
    RetryingZoneDiscovery,
    StaticZoneDiscovery,
    ZoneDiscovery,
    ZoneDiscoveryFn,
)

__all__ = [
    "DEFAULT_REGION_ZONES",
    "DefaultZoneTable",
    "InstanceRegionChecker",
    "build_instance_region_checker",
    "AzToRegionMapper",
    "ConfigurationError",
    "build_mapper",
    "get_region_mapper",
    "reset_region_mapper",
    "DEFAULT_ZONE",
    "PropertyBasedZoneDiscovery",
    "RetryingZoneDiscovery",
    "StaticZoneDiscovery",
    "ZoneDiscovery",
    "ZoneDiscoveryFn",
]
