#!/usr/bin/env python3
"""
Retention and copy policies.

Turns job settings plus a single "now" captured at run start into the filter
rule sets that decide eligibility. Policies are pure: the same recovery point
and policy always produce the same verdict.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from vault_lifecycle.domain.filter_rule import FilterCriteria, FilterRule, FilterRuleSet
from vault_lifecycle.domain.lifecycle import Lifecycle
from vault_lifecycle.domain.recovery_point import RecoveryPoint, as_utc

__version__ = "0.1.0"
__author__ = "John Ayers"

DEFAULT_LOOKBACK_YEARS = 5


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "policy",
        "description": "Retention and copy policies",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class CopyFailurePolicy(Enum):
    """What a copy job does when StartCopyJob fails for one recovery point."""

    ISOLATE = "isolate"
    ABORT = "abort"


def first_of_month_dates(now: datetime, lookback_years: int = DEFAULT_LOOKBACK_YEARS) -> frozenset[date]:
    """Get the first day of every month in the lookback window.

    The window covers all twelve months of the current year and of each of the
    previous ``lookback_years - 1`` years.

    Args:
        now: Reference time for the run
        lookback_years: Number of calendar years to cover

    Returns:
        Set of first-of-month dates
    """
    return frozenset(
        date(now.year - years_back, month, 1)
        for years_back in range(lookback_years)
        for month in range(1, 13)
    )


@dataclass(frozen=True)
class RetentionPolicy:
    """Delete recovery points that completed before now minus expiry_days.

    Attributes:
        expiry_days: Age in days past which recovery points are deleted
        now: Reference time for the run
    """

    expiry_days: int
    now: datetime

    def __post_init__(self) -> None:
        if self.expiry_days < 0:
            raise ValueError("expiry_days must be >= 0")
        object.__setattr__(self, "now", as_utc(self.now))

    @property
    def cutoff(self) -> datetime:
        """Completion time before which recovery points are eligible for deletion."""
        return self.now - timedelta(days=self.expiry_days)

    def rule_set(self) -> FilterRuleSet:
        """Build the filter rules for this policy.

        Returns:
            FilterRuleSet matching recovery points older than the cutoff
        """
        return FilterRuleSet(rules=[FilterRule(FilterCriteria.COMPLETED_BEFORE, self.cutoff)])

    def is_eligible(self, recovery_point: RecoveryPoint) -> bool:
        """Check whether a recovery point should be deleted.

        Args:
            recovery_point: Recovery point to evaluate

        Returns:
            True if the recovery point completed before the cutoff
        """
        return self.rule_set().should_include(recovery_point)


@dataclass(frozen=True)
class CopyPolicy:
    """Copy recovery points of one resource, optionally only first-of-month ones.

    Attributes:
        resource_filter: Substring that must appear in the resource ARN (e.g. an instance ID)
        lifecycle: Lifecycle to apply to the copies
        now: Reference time for the run
        first_of_month_only: If True, only copy backups completed on the 1st of a month
        lookback_years: Calendar years covered by the first-of-month filter
    """

    resource_filter: str
    lifecycle: Lifecycle
    now: datetime
    first_of_month_only: bool = False
    lookback_years: int = DEFAULT_LOOKBACK_YEARS

    def __post_init__(self) -> None:
        if not self.resource_filter:
            raise ValueError("resource_filter must not be empty")
        if self.lookback_years < 1:
            raise ValueError("lookback_years must be >= 1")
        object.__setattr__(self, "now", as_utc(self.now))

    def rule_set(self) -> FilterRuleSet:
        """Build the filter rules for this policy.

        Returns:
            FilterRuleSet requiring every configured condition to hold
        """
        rules = FilterRuleSet(
            rules=[FilterRule(FilterCriteria.RESOURCE_ARN_CONTAINS, self.resource_filter)]
        )
        if self.first_of_month_only:
            rules.add_rule(
                FilterRule(
                    FilterCriteria.COMPLETED_ON_DATES,
                    first_of_month_dates(self.now, self.lookback_years),
                )
            )
        return rules

    def is_eligible(self, recovery_point: RecoveryPoint) -> bool:
        """Check whether a recovery point should be copied.

        Args:
            recovery_point: Recovery point to evaluate

        Returns:
            True if every rule of the policy matches
        """
        return self.rule_set().should_include(recovery_point)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
