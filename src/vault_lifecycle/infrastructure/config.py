#!/usr/bin/env python3
"""
Configuration management for vault-lifecycle.

Loads and validates job settings from environment variables once, at process
start, into immutable values that are passed to every component.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from vault_lifecycle.domain.errors import ConfigurationError
from vault_lifecycle.domain.lifecycle import Lifecycle
from vault_lifecycle.domain.policy import DEFAULT_LOOKBACK_YEARS, CopyFailurePolicy

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "config",
        "description": "Configuration management",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} must be set")
    return value


def _int(environ: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _bool(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "false").strip().lower() == "true"


@dataclass(frozen=True)
class RuntimeConfig:
    """Settings shared by every job.

    Attributes:
        region: AWS region (None lets boto3 resolve it)
        account_id: AWS account ID (None resolves it from the Lambda context or STS)
        log_level: Logging level name
    """

    region: Optional[str] = None
    account_id: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RuntimeConfig":
        """Load runtime settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            RuntimeConfig instance
        """
        environ = os.environ if environ is None else environ
        return cls(
            region=environ.get("AWS_REGION") or None,
            account_id=environ.get("AWS_ACCOUNT_ID") or None,
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        )


@dataclass(frozen=True)
class DeleteJobConfig:
    """Settings for the delete job.

    Attributes:
        vault_name: Vault to prune
        expiry_days: Recovery points completed more than this many days ago are deleted
        dry_run: Whether to run in dry-run mode
    """

    vault_name: str
    expiry_days: int = 365
    dry_run: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DeleteJobConfig":
        """Load delete job configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            DeleteJobConfig instance

        Raises:
            ConfigurationError: If BACKUP_VAULT_NAME is missing or EXPIRY_DAYS is invalid
        """
        environ = os.environ if environ is None else environ
        return cls(
            vault_name=_require(environ, "BACKUP_VAULT_NAME"),
            expiry_days=_int(environ, "EXPIRY_DAYS", 365),
            dry_run=_bool(environ, "DRY_RUN"),
        )


@dataclass(frozen=True)
class CopyJobConfig:
    """Settings for the copy jobs.

    Attributes:
        source_vault: Vault to copy from
        destination_vault: Vault to copy into
        resource_filter: Substring of the resource ARN to copy (e.g. an EC2 instance ID)
        move_to_cold_storage_after_days: Lifecycle cold storage transition (0 disables)
        delete_after_days: Lifecycle expiry (0 disables)
        lookback_years: Calendar years covered by the first-of-month filter
        failure_policy: Whether a failed copy is isolated or aborts the run
        iam_role_arn: Role for the copy job (None uses the AWS Backup default role)
        dry_run: Whether to run in dry-run mode
    """

    source_vault: str
    destination_vault: str
    resource_filter: str
    move_to_cold_storage_after_days: int = 30
    delete_after_days: int = 120
    lookback_years: int = DEFAULT_LOOKBACK_YEARS
    failure_policy: CopyFailurePolicy = CopyFailurePolicy.ISOLATE
    iam_role_arn: Optional[str] = None
    dry_run: bool = False

    @property
    def lifecycle(self) -> Lifecycle:
        """Lifecycle applied to the copies."""
        return Lifecycle(
            move_to_cold_storage_after_days=self.move_to_cold_storage_after_days,
            delete_after_days=self.delete_after_days,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CopyJobConfig":
        """Load copy job configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            CopyJobConfig instance

        Raises:
            ConfigurationError: If a required variable is missing or a value is invalid
        """
        environ = os.environ if environ is None else environ

        raw_policy = environ.get("COPY_FAILURE_POLICY", "isolate").strip().lower()
        try:
            failure_policy = CopyFailurePolicy(raw_policy)
        except ValueError:
            choices = ", ".join(p.value for p in CopyFailurePolicy)
            raise ConfigurationError(
                f"COPY_FAILURE_POLICY must be one of {choices}, got {raw_policy!r}"
            ) from None

        return cls(
            source_vault=_require(environ, "SOURCE_VAULT"),
            destination_vault=_require(environ, "DESTINATION_VAULT"),
            resource_filter=_require(environ, "INSTANCE_ID"),
            move_to_cold_storage_after_days=_int(environ, "MOVE_TO_COLD_STORAGE", 30),
            delete_after_days=_int(environ, "DELETE_AFTER_DAYS", 120),
            lookback_years=_int(environ, "LOOKBACK_YEARS", DEFAULT_LOOKBACK_YEARS, minimum=1),
            failure_policy=failure_policy,
            iam_role_arn=environ.get("BACKUP_ROLE_ARN") or None,
            dry_run=_bool(environ, "DRY_RUN"),
        )


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
