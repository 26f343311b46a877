#!/usr/bin/env python3
"""
CLI entry point for vault-lifecycle.

Runs the delete, copy and monthly copy jobs outside Lambda, e.g. from cron or by
hand. Settings are read from the same environment variables the Lambda handlers
use; command-line options override them.
"""

import argparse
import json
import os
import sys
from typing import NoReturn

from vault_lifecycle.domain.errors import ConfigurationError
from vault_lifecycle.domain.job_run import JobRun
from vault_lifecycle.domain.policy import CopyFailurePolicy
from vault_lifecycle.infrastructure.account_context import resolve_account_context
from vault_lifecycle.infrastructure.aws_backup_repository import AWSBackupRepository
from vault_lifecycle.infrastructure.config import CopyJobConfig, DeleteJobConfig, RuntimeConfig
from vault_lifecycle.infrastructure.logger import setup_logger
from vault_lifecycle.jobs import run_copy_job, run_delete_job

__version__ = "0.1.0"
__author__ = "John Ayers"

# Maps argparse destinations to the environment variables they override
DELETE_OVERRIDES = {
    "vault": "BACKUP_VAULT_NAME",
    "expiry_days": "EXPIRY_DAYS",
}
COPY_OVERRIDES = {
    "source_vault": "SOURCE_VAULT",
    "destination_vault": "DESTINATION_VAULT",
    "instance_id": "INSTANCE_ID",
    "move_to_cold_storage_days": "MOVE_TO_COLD_STORAGE",
    "delete_after_days": "DELETE_AFTER_DAYS",
    "lookback_years": "LOOKBACK_YEARS",
    "failure_policy": "COPY_FAILURE_POLICY",
    "role_arn": "BACKUP_ROLE_ARN",
}


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "cli",
        "description": "Command-line interface for vault-lifecycle",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="vault-lifecycle",
        description="Delete expired AWS Backup recovery points and copy them between vaults",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without making changes",
    )

    parser.add_argument(
        "--region",
        help="AWS region (default: AWS_REGION or the profile's region)",
    )

    parser.add_argument(
        "--account-id",
        help="AWS account ID (default: AWS_ACCOUNT_ID or STS caller identity)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # delete command
    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete recovery points older than the expiry threshold",
    )
    delete_parser.add_argument(
        "--vault",
        help="Vault to prune (env: BACKUP_VAULT_NAME)",
    )
    delete_parser.add_argument(
        "--expiry-days",
        type=int,
        help="Delete recovery points completed more than this many days ago (env: EXPIRY_DAYS, default: 365)",
    )

    # copy and copy-monthly commands
    copy_parser = subparsers.add_parser(
        "copy",
        help="Copy a resource's recovery points to another vault",
    )
    monthly_parser = subparsers.add_parser(
        "copy-monthly",
        help="Copy a resource's first-of-month recovery points to another vault",
    )
    for sub in (copy_parser, monthly_parser):
        _add_copy_arguments(sub)

    monthly_parser.add_argument(
        "--lookback-years",
        type=int,
        help="Calendar years of first-of-month backups to consider (env: LOOKBACK_YEARS, default: 5)",
    )

    return parser


def _add_copy_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source-vault",
        help="Vault to copy from (env: SOURCE_VAULT)",
    )
    parser.add_argument(
        "--destination-vault",
        help="Vault to copy into (env: DESTINATION_VAULT)",
    )
    parser.add_argument(
        "--instance-id",
        help="Only copy recovery points whose resource ARN contains this ID (env: INSTANCE_ID)",
    )
    parser.add_argument(
        "--move-to-cold-storage-days",
        type=int,
        help="Lifecycle cold storage transition, 0 disables (env: MOVE_TO_COLD_STORAGE, default: 30)",
    )
    parser.add_argument(
        "--delete-after-days",
        type=int,
        help="Lifecycle expiry, 0 disables (env: DELETE_AFTER_DAYS, default: 120)",
    )
    parser.add_argument(
        "--failure-policy",
        choices=[p.value for p in CopyFailurePolicy],
        help="Continue past failed copies or abort the run (env: COPY_FAILURE_POLICY, default: isolate)",
    )
    parser.add_argument(
        "--role-arn",
        help="IAM role for the copy jobs (env: BACKUP_ROLE_ARN, default: AWSBackupDefaultServiceRole)",
    )


def build_environment(args: argparse.Namespace, overrides: dict[str, str]) -> dict[str, str]:
    """Merge command-line options over the process environment.

    Args:
        args: Parsed command-line arguments
        overrides: Mapping of argument names to environment variable names

    Returns:
        Environment mapping for the configuration loaders
    """
    environ = dict(os.environ)
    for arg_name, env_name in overrides.items():
        value = getattr(args, arg_name, None)
        if value is not None:
            environ[env_name] = str(value)
    if args.dry_run:
        environ["DRY_RUN"] = "true"
    if args.region:
        environ["AWS_REGION"] = args.region
    if args.account_id:
        environ["AWS_ACCOUNT_ID"] = args.account_id
    return environ


def print_summary(job_run: JobRun, output: str) -> None:
    """Print the run summary.

    Args:
        job_run: Finished run
        output: Output format (text or json)
    """
    summary = job_run.summary()
    if output == "json":
        print(json.dumps(summary, indent=2))
        return

    print(f"Job: {summary['job']}")
    print(f"  Vault: {summary['vault']}")
    print(f"  State: {summary['state']}")
    print(f"  Pages Fetched: {summary['pages_fetched']}")
    print(f"  Recovery Points Seen: {summary['recovery_points_seen']}")
    print(f"  Eligible: {summary['eligible']}")
    print(f"  Succeeded: {summary['succeeded']}")
    print(f"  Failed: {summary['failed']}")
    print(f"  Skipped: {summary['skipped']}")


def cmd_delete(args: argparse.Namespace) -> int:
    """Execute delete command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger = setup_logger(verbose=args.verbose)
    environ = build_environment(args, DELETE_OVERRIDES)

    try:
        runtime = RuntimeConfig.from_env(environ)
        config = DeleteJobConfig.from_env(environ)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logger.info(f"Deleting recovery points in vault {config.vault_name}:")
    logger.info(f"  Expiry days: {config.expiry_days}")
    if config.dry_run:
        logger.info("  [DRY RUN]")

    try:
        job_run = run_delete_job(config, AWSBackupRepository(region=runtime.region))
    except Exception as e:
        logger.error(f"Error during delete: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    print_summary(job_run, args.output)
    return 0


def cmd_copy(args: argparse.Namespace) -> int:
    """Execute copy and copy-monthly commands.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger = setup_logger(verbose=args.verbose)
    environ = build_environment(args, COPY_OVERRIDES)
    first_of_month_only = args.command == "copy-monthly"

    try:
        runtime = RuntimeConfig.from_env(environ)
        config = CopyJobConfig.from_env(environ)
        account = resolve_account_context(runtime.region, runtime.account_id)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logger.info("Copying recovery points:")
    logger.info(f"  Source: {config.source_vault}")
    logger.info(f"  Destination: {config.destination_vault}")
    logger.info(f"  Resource filter: {config.resource_filter}")
    logger.info(f"  Lifecycle: {config.lifecycle.to_request()}")
    if first_of_month_only:
        logger.info(f"  First of month only, lookback: {config.lookback_years} years")
    if config.dry_run:
        logger.info("  [DRY RUN]")

    try:
        job_run = run_copy_job(
            config,
            AWSBackupRepository(region=account.region),
            account,
            first_of_month_only=first_of_month_only,
        )
    except Exception as e:
        logger.error(f"Error during copy: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    print_summary(job_run, args.output)
    return 0


def main() -> NoReturn:
    """Main entry point for the CLI.

    Parses arguments and dispatches to appropriate command handler.
    """
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Dispatch to command handlers
    commands = {
        "delete": cmd_delete,
        "copy": cmd_copy,
        "copy-monthly": cmd_copy,
    }

    exit_code = commands[args.command](args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
