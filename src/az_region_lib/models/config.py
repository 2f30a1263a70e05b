"""Configuration model for zone to region resolution.

Settings are read from environment variables by default, with every field
overridable in code:

    REGIONS_TO_FETCH: Comma-separated remote regions (unset = no remote fetching)
    LOCAL_REGION: Region this client runs in (default: "us-east-1")
"""

import os
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from az_region_lib.utils import split_csv

DEFAULT_LOCAL_REGION = "us-east-1"


class RegionMappingConfig(BaseModel):
    """Settings for building an AzToRegionMapper"""

    regions_to_fetch: Optional[List[str]] = Field(
        None, description="Remote regions whose registries are fetched, None disables remote fetching"
    )
    local_region: str = Field(
        DEFAULT_LOCAL_REGION, min_length=1, description="Region this client runs in"
    )
    availability_zones: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Explicit region -> zones mapping; when set it replaces property based discovery",
    )
    env_prefix: str = Field(
        "", description="Prefix for the environment variables read by property based discovery"
    )

    @field_validator("regions_to_fetch")
    @classmethod
    def _drop_blank_regions(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return None
        return [region.strip() for region in value if region and region.strip()]

    @field_validator("availability_zones")
    @classmethod
    def _drop_blank_zones(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        return {
            region: [zone.strip() for zone in zones if zone and zone.strip()]
            for region, zones in value.items()
        }

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, prefix: str = ""
    ) -> "RegionMappingConfig":
        """Build a config from environment variables.

        Args:
            environ: Variable source (default: os.environ)
            prefix: Prefix for every variable name (e.g. "DISCOVERY_")

        Example:
            >>> RegionMappingConfig.from_env({"REGIONS_TO_FETCH": "us-west-2, eu-west-1"})
            RegionMappingConfig(regions_to_fetch=['us-west-2', 'eu-west-1'], ...)
        """
        environ = os.environ if environ is None else environ

        regions = split_csv(environ.get(f"{prefix}REGIONS_TO_FETCH"))
        local_region = environ.get(f"{prefix}LOCAL_REGION", "").strip() or DEFAULT_LOCAL_REGION

        return cls(
            regions_to_fetch=regions or None,
            local_region=local_region,
            env_prefix=prefix,
        )
