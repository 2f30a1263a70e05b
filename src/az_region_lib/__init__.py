"""az-region-lib

Availability zone to region resolution for service discovery clients.
"""

__version__ = "0.1.0"

# Export config models first (no dependencies)
from az_region_lib.models import RegionMappingConfig

from az_region_lib.discovery import (
    AzToRegionMapper,
    ConfigurationError,
    DefaultZoneTable,
    InstanceRegionChecker,
    PropertyBasedZoneDiscovery,
    RetryingZoneDiscovery,
    StaticZoneDiscovery,
    ZoneDiscovery,
    build_instance_region_checker,
    build_mapper,
    get_region_mapper,
    reset_region_mapper,
)

__all__ = [
    # Config
    "RegionMappingConfig",
    # Resolution
    "AzToRegionMapper",
    "ConfigurationError",
    "DefaultZoneTable",
    "InstanceRegionChecker",
    # Discovery strategies
    "ZoneDiscovery",
    "StaticZoneDiscovery",
    "PropertyBasedZoneDiscovery",
    "RetryingZoneDiscovery",
    # Global access
    "build_mapper",
    "build_instance_region_checker",
    "get_region_mapper",
    "reset_region_mapper",
]
