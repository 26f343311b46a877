#!/usr/bin/env python3
"""
Domain model for filter rules.

Provides the predicates that decide whether a recovery point is acted upon.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from vault_lifecycle.domain.recovery_point import RecoveryPoint

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "filter_rule",
        "description": "Domain model for filter rules",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class FilterCriteria(Enum):
    """Enumeration of available filter criteria."""

    COMPLETED_BEFORE = "completed_before"
    RESOURCE_ARN_CONTAINS = "resource_arn_contains"
    COMPLETED_ON_DATES = "completed_on_dates"


@dataclass(frozen=True)
class FilterRule:
    """Immutable domain model for a single filter rule.

    Attributes:
        criteria: Type of filter criteria
        value: Value to filter against (a cutoff datetime, a substring, or a set of dates)
    """

    criteria: FilterCriteria
    value: datetime | str | frozenset[date]

    def matches(self, recovery_point: RecoveryPoint) -> bool:
        """Check if recovery point matches this filter rule.

        Recovery points without a completion date never match a date criterion.

        Args:
            recovery_point: Recovery point to evaluate

        Returns:
            True if recovery point matches the criteria
        """
        match self.criteria:
            case FilterCriteria.COMPLETED_BEFORE:
                result = (
                    recovery_point.completion_date is not None
                    and recovery_point.completion_date < self.value
                )
            case FilterCriteria.RESOURCE_ARN_CONTAINS:
                result = str(self.value) in recovery_point.resource_arn
            case FilterCriteria.COMPLETED_ON_DATES:
                completed_on = recovery_point.completed_on()
                result = completed_on is not None and completed_on in self.value
            case _:
                result = False

        return result


@dataclass
class FilterRuleSet:
    """Mutable collection of filter rules with evaluation logic.

    Attributes:
        rules: List of filter rules to apply
    """

    rules: list[FilterRule]

    def add_rule(self, rule: FilterRule) -> None:
        """Add a filter rule to the set.

        Args:
            rule: Filter rule to add
        """
        self.rules.append(rule)

    def should_include(self, recovery_point: RecoveryPoint) -> bool:
        """Determine if recovery point should be included based on all rules.

        Args:
            recovery_point: Recovery point to evaluate

        Returns:
            True if recovery point passes the filter
        """
        if not self.rules:
            return True

        return all(rule.matches(recovery_point) for rule in self.rules)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
