#!/usr/bin/env python3
"""
Service for copying recovery points.

Starts a copy job into the destination vault for each eligible recovery point,
applying the configured lifecycle to the copy. Copy jobs are fire-and-forget;
their progress is not tracked after StartCopyJob returns.
"""

import logging
from typing import Protocol

from vault_lifecycle.domain.errors import CopyAbortedError
from vault_lifecycle.domain.job_run import ActionOutcome, ActionType
from vault_lifecycle.domain.lifecycle import Lifecycle
from vault_lifecycle.domain.policy import CopyFailurePolicy
from vault_lifecycle.domain.recovery_point import RecoveryPoint
from vault_lifecycle.domain.vault import Vault

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "copy_service",
        "description": "Service for copying recovery points",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class CopyRepository(Protocol):
    """Protocol defining interface for copy operations.

    Infrastructure layer must implement this protocol.
    """

    def start_copy_job(
        self,
        recovery_point_arn: str,
        source_vault_name: str,
        destination_vault_arn: str,
        iam_role_arn: str,
        lifecycle: dict[str, int],
    ) -> str:
        """Start a copy job for a recovery point.

        Args:
            recovery_point_arn: ARN of source recovery point
            source_vault_name: Source vault name
            destination_vault_arn: ARN of the destination vault
            iam_role_arn: Role AWS Backup uses to perform the copy
            lifecycle: Lifecycle to apply to the copy

        Returns:
            Copy job ID

        Raises:
            ActionError: If the copy call fails
        """
        ...


class CopyService:
    """Application service for copy operations."""

    def __init__(
        self,
        copy_repo: CopyRepository,
        destination_vault: Vault,
        iam_role_arn: str,
        lifecycle: Lifecycle,
        failure_policy: CopyFailurePolicy = CopyFailurePolicy.ISOLATE,
        dry_run: bool = False,
    ) -> None:
        """Initialize the copy service.

        Args:
            copy_repo: Repository for copy operations
            destination_vault: Vault the copies are written to
            iam_role_arn: Role AWS Backup uses to perform the copy
            lifecycle: Lifecycle applied to every copy
            failure_policy: Whether a failed copy is isolated or aborts the run
            dry_run: If True, don't make actual copy requests
        """
        self.copy_repo = copy_repo
        self.destination_vault = destination_vault
        self.iam_role_arn = iam_role_arn
        self.lifecycle = lifecycle
        self.failure_policy = failure_policy
        self.dry_run = dry_run

    def copy(self, recovery_point: RecoveryPoint) -> ActionOutcome:
        """Start a copy job for one recovery point.

        Args:
            recovery_point: Recovery point to copy

        Returns:
            Outcome of the copy request

        Raises:
            CopyAbortedError: If the copy fails and the failure policy is ABORT
        """
        arn = recovery_point.recovery_point_arn
        lifecycle = self.lifecycle.to_request()
        outcome = ActionOutcome(
            recovery_point_arn=arn,
            action=ActionType.COPY,
            completion_date=recovery_point.completion_date,
        )

        if self.dry_run:
            outcome.skip("Dry run mode")
            logger.info(
                f"[DRY RUN] Would copy recovery point {arn} to {self.destination_vault.name} "
                f"(completed: {recovery_point.completion_date}) with lifecycle {lifecycle}"
            )
            return outcome

        try:
            copy_job_id = self.copy_repo.start_copy_job(
                recovery_point_arn=arn,
                source_vault_name=recovery_point.backup_vault_name,
                destination_vault_arn=self.destination_vault.arn,
                iam_role_arn=self.iam_role_arn,
                lifecycle=lifecycle,
            )
        except Exception as e:
            outcome.fail(str(e))
            logger.error(
                f"Failed to copy recovery point {arn} "
                f"(completed: {recovery_point.completion_date}): {e}"
            )
            if self.failure_policy is CopyFailurePolicy.ABORT:
                raise CopyAbortedError(f"Copy of {arn} failed: {e}", arn, outcome) from e
            return outcome

        outcome.succeed(copy_job_id)
        logger.info(
            f"Copy job {copy_job_id} started for {arn} "
            f"(completed: {recovery_point.completion_date}) with lifecycle {lifecycle}"
        )
        return outcome


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
