#!/usr/bin/env python3
"""
AWS Lambda entry points for vault-lifecycle.

Each handler is triggered by a daily EventBridge schedule; the event payload is
ignored. Configuration comes from the function's environment variables. The
handler returns the run summary, and re-raises run-level failures so the
invocation is reported as failed.
"""

import logging
from typing import Any

from vault_lifecycle.infrastructure.account_context import AccountContext
from vault_lifecycle.infrastructure.aws_backup_repository import AWSBackupRepository
from vault_lifecycle.infrastructure.config import CopyJobConfig, DeleteJobConfig, RuntimeConfig
from vault_lifecycle.infrastructure.logger import setup_logger
from vault_lifecycle.jobs import run_copy_job, run_delete_job

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "handlers",
        "description": "AWS Lambda entry points",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def delete_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Delete recovery points older than EXPIRY_DAYS from BACKUP_VAULT_NAME.

    Args:
        event: Scheduler event (unused)
        context: Lambda context

    Returns:
        Run summary
    """
    runtime = RuntimeConfig.from_env()
    setup_logger(level=runtime.log_level)
    config = DeleteJobConfig.from_env()

    job_run = run_delete_job(config, AWSBackupRepository(region=runtime.region))
    return job_run.summary()


def copy_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Copy INSTANCE_ID recovery points from SOURCE_VAULT to DESTINATION_VAULT.

    Args:
        event: Scheduler event (unused)
        context: Lambda context, used for region and account

    Returns:
        Run summary
    """
    return _run_copy(context, first_of_month_only=False)


def copy_first_of_month_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Copy first-of-month INSTANCE_ID recovery points to DESTINATION_VAULT.

    Args:
        event: Scheduler event (unused)
        context: Lambda context, used for region and account

    Returns:
        Run summary
    """
    return _run_copy(context, first_of_month_only=True)


def _run_copy(context: Any, first_of_month_only: bool) -> dict[str, Any]:
    runtime = RuntimeConfig.from_env()
    setup_logger(level=runtime.log_level)
    config = CopyJobConfig.from_env()
    account = AccountContext.from_function_arn(context.invoked_function_arn)

    job_run = run_copy_job(
        config,
        AWSBackupRepository(region=account.region),
        account,
        first_of_month_only=first_of_month_only,
    )
    return job_run.summary()


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
