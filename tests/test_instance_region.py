"""Tests for InstanceRegionChecker."""

import pytest

from az_region_lib.discovery import (
    AzToRegionMapper,
    InstanceRegionChecker,
    StaticZoneDiscovery,
    build_instance_region_checker,
)
from az_region_lib.models import RegionMappingConfig


@pytest.fixture
def checker():
    mapper = AzToRegionMapper(StaticZoneDiscovery({"eu-central-1": ["eu-central-1a"]}))
    mapper.set_regions_to_fetch(["us-east-1", "eu-central-1"])
    return InstanceRegionChecker(mapper, local_region="us-east-1")


class TestInstanceRegionChecker:

    def test_zone_resolved_through_mapper(self, checker):
        assert checker.get_instance_region("eu-central-1a") == "eu-central-1"
        assert checker.get_instance_region("us-east-1d") == "us-east-1"

    @pytest.mark.parametrize("zone", [None, ""])
    def test_missing_zone_is_local(self, checker, zone):
        assert checker.get_instance_region(zone) == "us-east-1"

    def test_unknown_zone_returns_none(self, checker):
        assert checker.get_instance_region("ap-south-1a") is None

    def test_is_local_region(self, checker):
        assert checker.is_local_region("us-east-1")
        assert checker.is_local_region(None)
        assert not checker.is_local_region("eu-central-1")

    def test_properties(self, checker):
        assert checker.local_region == "us-east-1"
        assert isinstance(checker.mapper, AzToRegionMapper)


class TestBuildInstanceRegionChecker:

    def test_local_region_from_env(self):
        config = RegionMappingConfig.from_env(
            {"LOCAL_REGION": "eu-west-1", "REGIONS_TO_FETCH": "us-east-1"}
        )
        checker = build_instance_region_checker(config)

        assert checker.local_region == "eu-west-1"
        assert checker.get_instance_region(None) == "eu-west-1"
        assert checker.is_local_region("eu-west-1")
        assert not checker.is_local_region("us-east-1")

    def test_builds_mapper_from_config(self):
        config = RegionMappingConfig(
            regions_to_fetch=["us-west-2"],
            availability_zones={"us-west-2": ["us-west-2z"]},
        )
        checker = build_instance_region_checker(config)

        assert checker.get_instance_region("us-west-2z") == "us-west-2"
        assert checker.mapper.regions_to_fetch == ["us-west-2"]

    def test_reuses_given_mapper(self, empty_discovery):
        mapper = AzToRegionMapper(empty_discovery)
        mapper.set_regions_to_fetch(["us-west-1"])

        checker = build_instance_region_checker(
            RegionMappingConfig(local_region="us-west-1"), mapper=mapper
        )

        assert checker.mapper is mapper
        assert checker.get_instance_region("us-west-1c") == "us-west-1"
        assert checker.is_local_region(checker.get_instance_region("us-west-1c"))

    def test_defaults_to_us_east_1(self):
        checker = build_instance_region_checker(RegionMappingConfig.from_env({}))
        assert checker.local_region == "us-east-1"
