"""
Configuration models for az-region-lib.
"""

from az_region_lib.models.config import (
    DEFAULT_LOCAL_REGION,
    RegionMappingConfig,
)

__all__ = [
    "DEFAULT_LOCAL_REGION",
    "RegionMappingConfig",
]
