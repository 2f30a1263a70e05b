"""Shared fixtures for az-region-lib tests."""

import pytest

from az_region_lib.discovery import StaticZoneDiscovery, reset_region_mapper


@pytest.fixture(autouse=True)
def _reset_global_mapper():
    reset_region_mapper()
    yield
    reset_region_mapper()


@pytest.fixture
def empty_discovery():
    """Discovery that knows no region."""
    return StaticZoneDiscovery({})


@pytest.fixture
def clean_env(monkeypatch):
    """Remove region settings that may leak in from the host environment."""
    for key in ("REGIONS_TO_FETCH", "LOCAL_REGION"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
