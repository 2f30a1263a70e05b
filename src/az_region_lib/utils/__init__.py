"""Utility Functions"""

from az_region_lib.utils.parsing import split_csv
from az_region_lib.utils.resilience import (
    TRANSIENT_DISCOVERY_ERRORS,
    create_custom_retry,
)

__all__ = [
    "split_csv",
    "TRANSIENT_DISCOVERY_ERRORS",
    "create_custom_retry",
]
