"""Zone Discovery Strategies

A zone discovery strategy answers one question: which availability zones
belong to a region. The region mapper accepts any callable
``region -> iterable of zones | None``; the classes here are the strategies
shipped with the library:

- StaticZoneDiscovery: fixed in-memory mapping
- PropertyBasedZoneDiscovery: comma-separated zones from environment variables
- RetryingZoneDiscovery: retry wrapper for strategies that do I/O
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Type

from az_region_lib.utils import TRANSIENT_DISCOVERY_ERRORS, create_custom_retry, split_csv

logger = logging.getLogger(__name__)

# Marker meaning "no explicit zone configured"
DEFAULT_ZONE = "default"

ZoneDiscoveryFn = Callable[[str], Optional[Iterable[str]]]


class ZoneDiscovery(ABC):
    """Abstract base class for zone discovery strategies"""

    @abstractmethod
    def get_zones_for_region(self, region: str) -> Optional[Iterable[str]]:
        """
        Return the availability zones of a region.

        Args:
            region: Region identifier (e.g. "us-east-1")

        Returns:
            Zones of the region, or None / empty / [DEFAULT_ZONE] when unknown
        """
        pass

    def __call__(self, region: str) -> Optional[Iterable[str]]:
        return self.get_zones_for_region(region)


class StaticZoneDiscovery(ZoneDiscovery):
    """Zone discovery backed by a fixed region -> zones mapping."""

    def __init__(self, zones_by_region: Optional[Mapping[str, Iterable[str]]] = None):
        self._zones: Dict[str, List[str]] = {
            region: list(zones) for region, zones in (zones_by_region or {}).items()
        }

    def get_zones_for_region(self, region: str) -> Optional[List[str]]:
        zones = self._zones.get(region)
        return list(zones) if zones is not None else None


class PropertyBasedZoneDiscovery(ZoneDiscovery):
    """Zone discovery from environment-style properties.

    Zones for a region are read from ``{prefix}{REGION}_AVAILABILITY_ZONES``
    where REGION is the upper-cased region with dashes replaced by
    underscores.

    Environment Variables:
        US_WEST_2_AVAILABILITY_ZONES: "us-west-2a,us-west-2b"
        EU_CENTRAL_1_AVAILABILITY_ZONES: "eu-central-1a,eu-central-1b"

    A missing or blank variable yields [DEFAULT_ZONE], so the mapper falls
    back to its built-in defaults for that region.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, prefix: str = ""):
        """Initialize property based discovery.

        Args:
            environ: Property source (default: os.environ, read on each lookup)
            prefix: Prefix prepended to every variable name
        """
        self._environ = environ
        self.prefix = prefix

    def property_name(self, region: str) -> str:
        return f"{self.prefix}{region.upper().replace('-', '_')}_AVAILABILITY_ZONES"

    def get_zones_for_region(self, region: str) -> List[str]:
        environ = os.environ if self._environ is None else self._environ
        key = self.property_name(region)

        zones = split_csv(environ.get(key))
        if not zones:
            logger.debug(f"{key} not set, reporting default zone for {region}")
            return [DEFAULT_ZONE]

        return zones


class RetryingZoneDiscovery(ZoneDiscovery):
    """Retries a delegate strategy on failure.

    Only transient I/O errors (OSError by default) are retried. Other
    exceptions are raised at once and None or empty answers are returned as-is.
    When every attempt fails the last exception is re-raised unchanged.
    """

    def __init__(
        self,
        delegate: ZoneDiscoveryFn,
        max_attempts: int = 4,
        min_wait: float = 1,
        max_wait: float = 8,
        retry_on: Tuple[Type[BaseException], ...] = TRANSIENT_DISCOVERY_ERRORS,
    ):
        self.delegate = delegate

        def _fetch(region: str) -> Optional[Iterable[str]]:
            return delegate(region)

        self._fetch = create_custom_retry(
            max_attempts=max_attempts, min_wait=min_wait, max_wait=max_wait, retry_on=retry_on
        )(_fetch)

    def get_zones_for_region(self, region: str) -> Optional[Iterable[str]]:
        return self._fetch(region)
