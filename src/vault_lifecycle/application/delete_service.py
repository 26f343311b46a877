#!/usr/bin/env python3
"""
Service for deleting expired recovery points.
"""

import logging
from typing import Protocol

from vault_lifecycle.domain.job_run import ActionOutcome, ActionType
from vault_lifecycle.domain.recovery_point import RecoveryPoint

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "delete_service",
        "description": "Service for deleting recovery points",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class DeleteRepository(Protocol):
    """Protocol defining interface for delete operations.

    Infrastructure layer must implement this protocol.
    """

    def delete_recovery_point(self, vault_name: str, recovery_point_arn: str) -> None:
        """Delete a recovery point.

        Args:
            vault_name: Vault containing the recovery point
            recovery_point_arn: ARN of the recovery point

        Raises:
            ActionError: If the delete call fails
        """
        ...


class DeleteService:
    """Application service for delete operations."""

    def __init__(self, delete_repo: DeleteRepository, dry_run: bool = False) -> None:
        """Initialize the delete service.

        Args:
            delete_repo: Repository for delete operations
            dry_run: If True, don't make actual delete requests
        """
        self.delete_repo = delete_repo
        self.dry_run = dry_run

    def delete(self, recovery_point: RecoveryPoint) -> ActionOutcome:
        """Delete one recovery point.

        A failed delete is logged and reported in the outcome; it is never
        raised, so one bad recovery point cannot stop the batch.

        Args:
            recovery_point: Recovery point to delete

        Returns:
            Outcome of the delete
        """
        arn = recovery_point.recovery_point_arn
        outcome = ActionOutcome(
            recovery_point_arn=arn,
            action=ActionType.DELETE,
            completion_date=recovery_point.completion_date,
        )

        if self.dry_run:
            outcome.skip("Dry run mode")
            logger.info(
                f"[DRY RUN] Would delete recovery point {arn} "
                f"(completed: {recovery_point.completion_date})"
            )
            return outcome

        try:
            self.delete_repo.delete_recovery_point(recovery_point.backup_vault_name, arn)
        except Exception as e:
            outcome.fail(str(e))
            logger.error(
                f"Failed to delete recovery point {arn} "
                f"(completed: {recovery_point.completion_date}): {e}"
            )
            return outcome

        outcome.succeed()
        logger.info(f"Deleted recovery point {arn} (completed: {recovery_point.completion_date})")
        return outcome


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
