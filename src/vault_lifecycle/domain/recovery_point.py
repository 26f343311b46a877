#!/usr/bin/env python3
"""
Domain model for AWS Backup recovery points.

Represents a recovery point as returned by the vault listing and provides the
date helpers the retention and copy policies are evaluated against.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "recovery_point",
        "description": "Domain model for recovery points",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize a timestamp to an aware UTC datetime.

    Naive timestamps are taken to already be in UTC.

    Args:
        value: Timestamp to normalize

    Returns:
        UTC datetime, or None if value is None
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class RecoveryPoint:
    """Immutable domain model representing an AWS Backup recovery point.

    Attributes:
        recovery_point_arn: Unique ARN identifier
        backup_vault_name: Name of the backup vault containing this recovery point
        resource_arn: ARN of the resource that was backed up
        completion_date: When the backup completed, in UTC
        resource_type: Type of resource (e.g., EC2, EBS, RDS)
        status: Current status (COMPLETED, PARTIAL, DELETING, EXPIRED)
    """

    recovery_point_arn: str
    backup_vault_name: str
    resource_arn: str
    completion_date: datetime | None
    resource_type: str = "UNKNOWN"
    status: str = "UNKNOWN"

    def __post_init__(self) -> None:
        object.__setattr__(self, "completion_date", as_utc(self.completion_date))

    @classmethod
    def from_api(cls, data: dict[str, Any], vault_name: str) -> "RecoveryPoint":
        """Build a recovery point from a ListRecoveryPointsByBackupVault entry.

        Args:
            data: One element of the RecoveryPoints list
            vault_name: Vault the listing was made against

        Returns:
            RecoveryPoint instance
        """
        return cls(
            recovery_point_arn=data["RecoveryPointArn"],
            backup_vault_name=vault_name,
            resource_arn=data.get("ResourceArn", ""),
            completion_date=data.get("CompletionDate"),
            resource_type=data.get("ResourceType", "UNKNOWN"),
            status=data.get("Status", "UNKNOWN"),
        )

    def completed_on(self) -> date | None:
        """Get the calendar day (UTC) the backup completed on.

        Returns:
            Completion date without time of day, or None if not completed
        """
        if self.completion_date is None:
            return None
        return self.completion_date.date()


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
