#!/usr/bin/env python3
"""
Domain model for AWS Backup vault references.

Builds the vault and service role ARNs a copy job needs from the account context.
"""

from dataclasses import dataclass

__version__ = "0.1.0"
__author__ = "John Ayers"

DEFAULT_BACKUP_ROLE = "service-role/AWSBackupDefaultServiceRole"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "vault",
        "description": "Domain model for backup vaults",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class Vault:
    """Immutable reference to an AWS Backup vault.

    Attributes:
        name: Vault name
        region: AWS region where vault exists
        account_id: AWS account ID owning the vault
    """

    name: str
    region: str
    account_id: str

    @property
    def arn(self) -> str:
        """ARN of the vault, as expected by StartCopyJob."""
        return f"arn:aws:backup:{self.region}:{self.account_id}:backup-vault:{self.name}"


def default_backup_role_arn(account_id: str) -> str:
    """Get the ARN of the AWS Backup default service role in an account.

    Args:
        account_id: AWS account ID

    Returns:
        IAM role ARN
    """
    return f"arn:aws:iam::{account_id}:role/{DEFAULT_BACKUP_ROLE}"


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
