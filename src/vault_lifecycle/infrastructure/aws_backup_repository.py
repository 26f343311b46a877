#!/usr/bin/env python3
"""
AWS Backup repository implementation.

Provides concrete implementations of repository protocols using boto3.
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from vault_lifecycle.domain.errors import ActionError, EnumerationError
from vault_lifecycle.domain.page import ListRecoveryPointsRequest, RecoveryPointPage
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
        "name": "aws_backup_repository",
        "description": "AWS Backup repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class AWSBackupRepository:
    """Repository for AWS Backup operations using boto3.

    Implements BackupRepository, DeleteRepository and CopyRepository protocols.
    No retries are layered on top of the ones botocore performs itself.
    """

    def __init__(self, region: str | None = None, session: boto3.Session | None = None) -> None:
        """Initialize AWS Backup repository.

        Args:
            region: AWS region (defaults to the session's region)
            session: Optional boto3 session to create the client from
        """
        self.region = region
        self._session = session
        self._client: Any = None

    def _get_backup_client(self) -> Any:
        """Get the boto3 backup client, creating it on first use.

        Returns:
            boto3 backup client
        """
        if self._client is None:
            session = self._session or boto3.Session(region_name=self.region)
            self._client = session.client("backup")
        return self._client

    def list_recovery_points_page(self, request: ListRecoveryPointsRequest) -> RecoveryPointPage:
        """Fetch one page of recovery points in a vault.

        Args:
            request: Vault, page size and continuation token

        Returns:
            RecoveryPointPage with the token for the next page, if any

        Raises:
            EnumerationError: If the listing call fails
        """
        client = self._get_backup_client()
        try:
            response = client.list_recovery_points_by_backup_vault(**request.to_params())
        except (ClientError, BotoCoreError) as e:
            raise EnumerationError(
                f"Failed to list recovery points in vault {request.vault_name}: {e}",
                request.vault_name,
            ) from e

        recovery_points = tuple(
            RecoveryPoint.from_api(rp_data, request.vault_name)
            for rp_data in response.get("RecoveryPoints", [])
        )
        return RecoveryPointPage(
            recovery_points=recovery_points,
            next_token=response.get("NextToken"),
        )

    def delete_recovery_point(self, vault_name: str, recovery_point_arn: str) -> None:
        """Delete a recovery point.

        Args:
            vault_name: Vault containing the recovery point
            recovery_point_arn: ARN of the recovery point

        Raises:
            ActionError: If the delete call fails
        """
        client = self._get_backup_client()
        try:
            client.delete_recovery_point(
                BackupVaultName=vault_name,
                RecoveryPointArn=recovery_point_arn,
            )
        except (ClientError, BotoCoreError) as e:
            raise ActionError(
                f"Failed to delete recovery point {recovery_point_arn}: {e}",
                recovery_point_arn,
            ) from e

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
            lifecycle: Lifecycle to apply to the copy (may be empty)

        Returns:
            Copy job ID

        Raises:
            ActionError: If the copy call fails, including lifecycle values the
                service rejects
        """
        client = self._get_backup_client()
        try:
            response = client.start_copy_job(
                RecoveryPointArn=recovery_point_arn,
                SourceBackupVaultName=source_vault_name,
                DestinationBackupVaultArn=destination_vault_arn,
                IamRoleArn=iam_role_arn,
                Lifecycle=lifecycle,
            )
        except (ClientError, BotoCoreError) as e:
            raise ActionError(
                f"Failed to start copy job for {recovery_point_arn}: {e}",
                recovery_point_arn,
            ) from e
        return response["CopyJobId"]


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
