#!/usr/bin/env python3
"""
Resolution of the AWS region and account a job runs in.

Copy jobs need both to build the destination vault and service role ARNs.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from vault_lifecycle.domain.errors import ConfigurationError
from vault_lifecycle.domain.vault import Vault, default_backup_role_arn

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "account_context",
        "description": "AWS region and account resolution",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class AccountContext:
    """Region and account a job operates in.

    Attributes:
        region: AWS region
        account_id: AWS account ID
    """

    region: str
    account_id: str

    @classmethod
    def from_function_arn(cls, function_arn: str) -> "AccountContext":
        """Parse the context out of a Lambda function ARN.

        Args:
            function_arn: arn:aws:lambda:{region}:{account}:function:{name}

        Returns:
            AccountContext instance

        Raises:
            ConfigurationError: If the ARN is malformed
        """
        parts = function_arn.split(":")
        if len(parts) < 5 or not parts[3] or not parts[4]:
            raise ConfigurationError(f"Cannot derive region and account from {function_arn!r}")
        return cls(region=parts[3], account_id=parts[4])

    def vault(self, name: str) -> Vault:
        """Get a reference to a vault in this account and region.

        Args:
            name: Vault name

        Returns:
            Vault reference
        """
        return Vault(name=name, region=self.region, account_id=self.account_id)

    def backup_role_arn(self, override: Optional[str] = None) -> str:
        """Get the role AWS Backup should assume for copy jobs.

        Args:
            override: Explicit role ARN, used as-is when given

        Returns:
            IAM role ARN
        """
        return override or default_backup_role_arn(self.account_id)


def resolve_account_context(
    region: Optional[str] = None,
    account_id: Optional[str] = None,
    session: boto3.Session | None = None,
) -> AccountContext:
    """Resolve the account context outside Lambda.

    Missing values are taken from the boto3 session (region) and from
    STS GetCallerIdentity (account).

    Args:
        region: Explicit AWS region
        account_id: Explicit AWS account ID
        session: boto3 session to resolve defaults from

    Returns:
        AccountContext instance

    Raises:
        ConfigurationError: If the region or account cannot be determined
    """
    if region and account_id:
        return AccountContext(region=region, account_id=account_id)

    session = session or boto3.Session(region_name=region)
    region = region or session.region_name
    if not region:
        raise ConfigurationError("AWS region could not be determined; set AWS_REGION or --region")

    if not account_id:
        logger.debug("Resolving account ID with STS GetCallerIdentity")
        try:
            account_id = session.client("sts").get_caller_identity()["Account"]
        except (ClientError, BotoCoreError) as e:
            raise ConfigurationError(f"Failed to resolve AWS account ID: {e}") from e

    return AccountContext(region=region, account_id=account_id)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
