"""Parsing helpers for environment-style settings."""

from typing import List, Optional


def split_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated list, dropping blanks.

    Example:
        >>> split_csv("us-east-1a, us-east-1c,,")
        ['us-east-1a', 'us-east-1c']
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
