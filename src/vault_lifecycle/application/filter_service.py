#!/usr/bin/env python3
"""
Service for filtering recovery points.

Applies filter rules to recovery points to determine which should be acted upon.
"""

from vault_lifecycle.domain.filter_rule import FilterRuleSet
from vault_lifecycle.domain.recovery_point import RecoveryPoint

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "filter_service",
        "description": "Service for filtering recovery points",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class FilterService:
    """Application service for filtering operations."""

    def __init__(self, filter_rules: FilterRuleSet) -> None:
        """Initialize the filter service.

        Args:
            filter_rules: Set of filter rules to apply
        """
        self.filter_rules = filter_rules

    def is_eligible(self, recovery_point: RecoveryPoint) -> bool:
        """Check whether a recovery point passes the filter.

        Args:
            recovery_point: Recovery point to evaluate

        Returns:
            True if the recovery point should be acted upon
        """
        return self.filter_rules.should_include(recovery_point)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
