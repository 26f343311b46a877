#!/usr/bin/env python3
"""
Job assembly for vault-lifecycle.

Wires configuration, policies, services and the repository into runnable
delete, copy and monthly copy jobs. Shared by the Lambda handlers and the CLI.
"""

import logging
from datetime import datetime, timezone

from vault_lifecycle.application.copy_service import CopyService
from vault_lifecycle.application.delete_service import DeleteService
from vault_lifecycle.application.filter_service import FilterService
from vault_lifecycle.application.job_runner import JobRunner
from vault_lifecycle.application.list_service import ListService
from vault_lifecycle.domain.job_run import JobRun
from vault_lifecycle.domain.policy import CopyPolicy, RetentionPolicy
from vault_lifecycle.infrastructure.account_context import AccountContext
from vault_lifecycle.infrastructure.aws_backup_repository import AWSBackupRepository
from vault_lifecycle.infrastructure.config import CopyJobConfig, DeleteJobConfig
from vault_lifecycle.infrastructure.logger import log_operation

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"

DELETE_JOB = "delete"
COPY_JOB = "copy"
MONTHLY_COPY_JOB = "copy-monthly"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "jobs",
        "description": "Job assembly for delete and copy jobs",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def build_delete_job(
    config: DeleteJobConfig, backup_repo: AWSBackupRepository, now: datetime
) -> JobRunner:
    """Assemble the delete job.

    Args:
        config: Delete job configuration
        backup_repo: Repository for backup operations
        now: Reference time for the run

    Returns:
        JobRunner deleting recovery points older than the retention cutoff
    """
    policy = RetentionPolicy(expiry_days=config.expiry_days, now=now)
    logger.info(f"Deleting recovery points completed before {policy.cutoff.isoformat()}")

    delete_service = DeleteService(backup_repo, dry_run=config.dry_run)
    return JobRunner(
        job_name=DELETE_JOB,
        list_service=ListService(backup_repo),
        filter_service=FilterService(policy.rule_set()),
        action=delete_service.delete,
    )


def build_copy_job(
    config: CopyJobConfig,
    backup_repo: AWSBackupRepository,
    account: AccountContext,
    now: datetime,
    first_of_month_only: bool = False,
) -> JobRunner:
    """Assemble a copy job.

    Args:
        config: Copy job configuration
        backup_repo: Repository for backup operations
        account: Region and account of the vaults
        now: Reference time for the run
        first_of_month_only: Only copy recovery points completed on the 1st of a month

    Returns:
        JobRunner copying matching recovery points to the destination vault
    """
    policy = CopyPolicy(
        resource_filter=config.resource_filter,
        lifecycle=config.lifecycle,
        now=now,
        first_of_month_only=first_of_month_only,
        lookback_years=config.lookback_years,
    )
    destination = account.vault(config.destination_vault)

    copy_service = CopyService(
        copy_repo=backup_repo,
        destination_vault=destination,
        iam_role_arn=account.backup_role_arn(config.iam_role_arn),
        lifecycle=policy.lifecycle,
        failure_policy=config.failure_policy,
        dry_run=config.dry_run,
    )
    return JobRunner(
        job_name=MONTHLY_COPY_JOB if first_of_month_only else COPY_JOB,
        list_service=ListService(backup_repo),
        filter_service=FilterService(policy.rule_set()),
        action=copy_service.copy,
    )


def run_delete_job(
    config: DeleteJobConfig,
    backup_repo: AWSBackupRepository,
    now: datetime | None = None,
) -> JobRun:
    """Run the delete job against the configured vault.

    Args:
        config: Delete job configuration
        backup_repo: Repository for backup operations
        now: Reference time (defaults to the current UTC time)

    Returns:
        Finished JobRun
    """
    now = now or datetime.now(timezone.utc)
    job_run = build_delete_job(config, backup_repo, now).run(config.vault_name)
    log_job_summary(job_run)
    return job_run


def run_copy_job(
    config: CopyJobConfig,
    backup_repo: AWSBackupRepository,
    account: AccountContext,
    now: datetime | None = None,
    first_of_month_only: bool = False,
) -> JobRun:
    """Run a copy job from the configured source vault.

    Args:
        config: Copy job configuration
        backup_repo: Repository for backup operations
        account: Region and account of the vaults
        now: Reference time (defaults to the current UTC time)
        first_of_month_only: Only copy recovery points completed on the 1st of a month

    Returns:
        Finished JobRun
    """
    now = now or datetime.now(timezone.utc)
    runner = build_copy_job(config, backup_repo, account, now, first_of_month_only)
    job_run = runner.run(config.source_vault)
    log_job_summary(job_run)
    return job_run


def log_job_summary(job_run: JobRun) -> None:
    """Log the counters of a finished run.

    Args:
        job_run: Run to summarize
    """
    summary = job_run.summary()
    log_operation(
        logger,
        f"Job {job_run.job_name} finished",
        {
            "vault": summary["vault"],
            "state": summary["state"],
            "pages": summary["pages_fetched"],
            "seen": summary["recovery_points_seen"],
            "eligible": summary["eligible"],
            "succeeded": summary["succeeded"],
            "failed": summary["failed"],
            "skipped": summary["skipped"],
        },
        level=logging.WARNING if summary["failed"] else logging.INFO,
    )


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
