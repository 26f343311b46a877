#!/usr/bin/env python3
"""
Domain model for job runs.

Tracks the outcome of each delete or copy action and the state of the run.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "job_run",
        "description": "Domain model for job run tracking",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActionType(Enum):
    """Mutating action applied to a recovery point."""

    DELETE = "delete"
    COPY = "copy"


class ActionStatus(Enum):
    """Enumeration of action statuses."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class RunState(Enum):
    """Enumeration of run states."""

    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ActionOutcome:
    """Result of a single delete or copy action.

    Attributes:
        recovery_point_arn: ARN of the recovery point acted upon
        action: Type of action
        completion_date: Completion time of the recovery point
        status: Current status of the action
        copy_job_id: AWS copy job ID (copy actions only)
        error_message: Error details if the action failed, or reason if skipped
        finished_at: When the action finished
    """

    recovery_point_arn: str
    action: ActionType
    completion_date: datetime | None = None
    status: ActionStatus = ActionStatus.PENDING
    copy_job_id: str | None = None
    error_message: str | None = None
    finished_at: datetime | None = None

    def succeed(self, copy_job_id: str | None = None) -> None:
        """Mark action as succeeded.

        Args:
            copy_job_id: AWS copy job ID, for copy actions
        """
        self.status = ActionStatus.SUCCEEDED
        self.copy_job_id = copy_job_id
        self.finished_at = _utcnow()

    def fail(self, error: str) -> None:
        """Mark action as failed.

        Args:
            error: Error message describing the failure
        """
        self.status = ActionStatus.FAILED
        self.error_message = error
        self.finished_at = _utcnow()

    def skip(self, reason: str) -> None:
        """Mark action as skipped.

        Args:
            reason: Reason for skipping
        """
        self.status = ActionStatus.SKIPPED
        self.error_message = reason
        self.finished_at = _utcnow()


@dataclass
class JobRun:
    """Tracks one run of a lifecycle job against a vault.

    Attributes:
        job_name: Name of the job (delete, copy, copy-monthly)
        vault_name: Vault being processed
        state: Current run state
        outcomes: Outcomes of every action issued
        pages_fetched: Number of listing pages fetched
        recovery_points_seen: Number of recovery points classified
        started_at: When the run started
        completed_at: When the run finished or failed
        error_message: Cause of failure if the run failed
    """

    job_name: str
    vault_name: str
    state: RunState = RunState.RUNNING
    outcomes: list[ActionOutcome] = field(default_factory=list)
    pages_fetched: int = 0
    recovery_points_seen: int = 0
    started_at: datetime = field(default_factory=_utcnow)
    completed_at: datetime | None = None
    error_message: str | None = None

    def record_page(self, recovery_point_count: int) -> None:
        """Record that a page was fetched.

        Args:
            recovery_point_count: Number of recovery points on the page
        """
        self.pages_fetched += 1
        self.recovery_points_seen += recovery_point_count

    def add_outcome(self, outcome: ActionOutcome) -> None:
        """Add an action outcome to the run.

        Args:
            outcome: Outcome to add
        """
        self.outcomes.append(outcome)

    def finish(self) -> None:
        """Mark run as done."""
        self.state = RunState.DONE
        self.completed_at = _utcnow()

    def fail(self, error: str) -> None:
        """Mark run as failed.

        Args:
            error: Error message describing the failure
        """
        self.state = RunState.FAILED
        self.error_message = error
        self.completed_at = _utcnow()

    def count_by_status(self, status: ActionStatus) -> int:
        """Count outcomes with given status.

        Args:
            status: Status to count

        Returns:
            Number of outcomes with the specified status
        """
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    def is_successful(self) -> bool:
        """Check if the run completed without a run-level failure.

        Per-item action failures do not count against the run.

        Returns:
            True if state is DONE
        """
        return self.state == RunState.DONE

    def summary(self) -> dict[str, Any]:
        """Get a JSON-serializable summary of the run.

        Returns:
            Dictionary with run state and counters
        """
        return {
            "job": self.job_name,
            "vault": self.vault_name,
            "state": self.state.value,
            "pages_fetched": self.pages_fetched,
            "recovery_points_seen": self.recovery_points_seen,
            "eligible": len(self.outcomes),
            "succeeded": self.count_by_status(ActionStatus.SUCCEEDED),
            "failed": self.count_by_status(ActionStatus.FAILED),
            "skipped": self.count_by_status(ActionStatus.SKIPPED),
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "error": self.error_message,
        }


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
