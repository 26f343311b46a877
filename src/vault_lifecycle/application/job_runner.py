#!/usr/bin/env python3
"""
Batch driver for lifecycle jobs.

Pulls pages from the list service, classifies every recovery point with the
filter service and hands eligible ones to the action (delete or copy). A run
ends DONE when the listing is exhausted and FAILED when listing fails or an
action raises; per-item failures reported through outcomes never fail a run.
"""

import logging
from typing import Callable

from vault_lifecycle.application.filter_service import FilterService
from vault_lifecycle.application.list_service import ListService
from vault_lifecycle.domain.errors import CopyAbortedError
from vault_lifecycle.domain.job_run import ActionOutcome, JobRun
from vault_lifecycle.domain.recovery_point import RecoveryPoint

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"

Action = Callable[[RecoveryPoint], ActionOutcome]


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "job_runner",
        "description": "Batch driver for lifecycle jobs",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class JobRunner:
    """Runs one lifecycle job against a vault, one recovery point at a time."""

    def __init__(
        self,
        job_name: str,
        list_service: ListService,
        filter_service: FilterService,
        action: Action,
    ) -> None:
        """Initialize the job runner.

        Args:
            job_name: Name used in logs and run summaries
            list_service: Service enumerating the vault
            filter_service: Service deciding eligibility
            action: Callable applied to each eligible recovery point
        """
        self.job_name = job_name
        self.list_service = list_service
        self.filter_service = filter_service
        self.action = action
        self.last_run: JobRun | None = None

    def run(self, vault_name: str) -> JobRun:
        """Process every recovery point in a vault.

        Args:
            vault_name: Vault to process

        Returns:
            JobRun in state DONE

        Raises:
            EnumerationError: If listing the vault fails (run state FAILED)
            CopyAbortedError: If a copy fails under the ABORT policy (run state FAILED)
        """
        job_run = JobRun(job_name=self.job_name, vault_name=vault_name)
        self.last_run = job_run
        logger.info(f"Starting {self.job_name} job for vault {vault_name}")

        try:
            for page in self.list_service.iter_pages(vault_name):
                job_run.record_page(len(page))

                for recovery_point in page.recovery_points:
                    if not self.filter_service.is_eligible(recovery_point):
                        logger.debug(
                            f"Skipping recovery point {recovery_point.recovery_point_arn} "
                            f"(resource: {recovery_point.resource_arn}, "
                            f"completed: {recovery_point.completion_date})"
                        )
                        continue

                    job_run.add_outcome(self.action(recovery_point))

        except CopyAbortedError as e:
            if e.outcome is not None:
                job_run.add_outcome(e.outcome)
            job_run.fail(str(e))
            logger.error(f"{self.job_name} job aborted for vault {vault_name}: {e}")
            raise
        except Exception as e:
            job_run.fail(str(e))
            logger.error(f"{self.job_name} job failed for vault {vault_name}: {e}")
            raise

        job_run.finish()
        logger.info(
            f"All eligible recovery points processed for vault {vault_name} "
            f"({len(job_run.outcomes)} of {job_run.recovery_points_seen} eligible)"
        )
        return job_run


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
