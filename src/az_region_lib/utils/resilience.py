"""Resilience utilities for zone discovery.

Zone discovery strategies backed by remote lookups (instance metadata, DNS,
config servers) can fail transiently while a node is still starting. This
module builds the retry policies used to wrap them.

Only transient I/O failures are retried. Any other exception from a
discovery strategy is raised on the first attempt.
"""

import logging
from typing import Callable, Tuple, Type, TypeVar

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ConnectionError and TimeoutError are OSError subclasses
TRANSIENT_DISCOVERY_ERRORS: Tuple[Type[BaseException], ...] = (OSError,)


def _log_discovery_retry(retry_state: RetryCallState) -> None:
    region = retry_state.args[0] if retry_state.args else None
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        f"Zone discovery for region {region} failed on attempt "
        f"{retry_state.attempt_number}: {error!r}. Retrying."
    )


def create_custom_retry(
    max_attempts: int = 4,
    min_wait: float = 1,
    max_wait: float = 8,
    retry_on: Tuple[Type[BaseException], ...] = TRANSIENT_DISCOVERY_ERRORS,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Create a retry decorator for a region -> zones lookup.

    Args:
        max_attempts: Maximum number of attempts (including the first call)
        min_wait: Minimum wait time between retries (seconds)
        max_wait: Maximum wait time between retries (seconds)
        retry_on: Exception types treated as transient

    Returns:
        A retry decorator; the final exception is re-raised unchanged

    Example:
        ```python
        metadata_retry = create_custom_retry(max_attempts=6, max_wait=4)

        @metadata_retry
        def fetch_zones(region):
            ...
        ```
    """
    return retry(
        retry=retry_if_exception_type(retry_on),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=0.5, min=min_wait, max=max_wait),
        before_sleep=_log_discovery_retry,
        reraise=True,
    )
