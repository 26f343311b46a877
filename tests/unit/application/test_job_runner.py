"""Unit tests for JobRunner."""

from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

from vault_lifecycle.application.copy_service import CopyService
from vault_lifecycle.application.delete_service import DeleteService
from vault_lifecycle.application.filter_service import FilterService
from vault_lifecycle.application.job_runner import JobRunner
from vault_lifecycle.application.list_service import ListService
from vault_lifecycle.domain.errors import ActionError, CopyAbortedError, EnumerationError
from vault_lifecycle.domain.filter_rule import FilterRuleSet
from vault_lifecycle.domain.job_run import ActionStatus, RunState
from vault_lifecycle.domain.lifecycle import Lifecycle
from vault_lifecycle.domain.policy import CopyFailurePolicy, RetentionPolicy
from vault_lifecycle.domain.vault import Vault


def _delete_runner(repo, now: datetime, expiry_days: int = 365) -> JobRunner:
    return JobRunner(
        job_name="delete",
        list_service=ListService(repo),
        filter_service=FilterService(RetentionPolicy(expiry_days=expiry_days, now=now).rule_set()),
        action=DeleteService(repo).delete,
    )


def test_run_deletes_only_expired(make_recovery_point, make_pages, now: datetime) -> None:
    """Test that only recovery points past the cutoff are deleted."""
    points = [
        make_recovery_point("10d", now - timedelta(days=10)),
        make_recovery_point("400d", now - timedelta(days=400)),
        make_recovery_point("500d", now - timedelta(days=500)),
    ]
    repo = Mock()
    repo.list_recovery_points_page.side_effect = make_pages(points)

    job_run = _delete_runner(repo, now).run("source-vault")

    assert job_run.state == RunState.DONE
    assert job_run.recovery_points_seen == 3
    assert repo.delete_recovery_point.call_count == 2
    deleted = [call.args[1] for call in repo.delete_recovery_point.call_args_list]
    assert deleted == [points[1].recovery_point_arn, points[2].recovery_point_arn]


def test_run_isolates_failures_across_pages(make_recovery_point, make_pages, now: datetime) -> None:
    """Test that a failed delete on one page does not stop later pages."""
    points = [make_recovery_point(f"rp-{i}", now - timedelta(days=400 + i)) for i in range(5)]
    failing_arn = points[1].recovery_point_arn
    repo = Mock()
    repo.list_recovery_points_page.side_effect = make_pages(points, page_size=2)

    def delete(vault_name, arn):
        if arn == failing_arn:
            raise ActionError("AccessDenied", arn)

    repo.delete_recovery_point.side_effect = delete

    job_run = _delete_runner(repo, now).run("source-vault")

    assert job_run.state == RunState.DONE
    assert job_run.pages_fetched == 3
    assert repo.delete_recovery_point.call_count == 5
    assert job_run.count_by_status(ActionStatus.FAILED) == 1
    assert job_run.count_by_status(ActionStatus.SUCCEEDED) == 4
    assert job_run.is_successful() is True


def test_run_fails_on_enumeration_error(make_recovery_point, make_pages, now: datetime) -> None:
    """Test that a listing failure fails the run and stops paging."""
    points = [make_recovery_point(f"rp-{i}", now - timedelta(days=400)) for i in range(4)]
    first_page = make_pages(points, page_size=2)[0]
    repo = Mock()
    repo.list_recovery_points_page.side_effect = [
        first_page,
        EnumerationError("ThrottlingException", "source-vault"),
    ]
    runner = _delete_runner(repo, now)

    with pytest.raises(EnumerationError):
        runner.run("source-vault")

    job_run = runner.last_run
    assert job_run.state == RunState.FAILED
    assert "ThrottlingException" in job_run.error_message
    assert job_run.pages_fetched == 1
    assert repo.list_recovery_points_page.call_count == 2
    assert repo.delete_recovery_point.call_count == 2


def test_run_empty_vault(make_pages, now: datetime) -> None:
    """Test that an empty vault completes with no actions."""
    repo = Mock()
    repo.list_recovery_points_page.side_effect = make_pages([])

    job_run = _delete_runner(repo, now).run("empty-vault")

    assert job_run.state == RunState.DONE
    assert job_run.outcomes == []
    repo.delete_recovery_point.assert_not_called()


def test_run_copy_abort(make_recovery_point, make_pages, now: datetime) -> None:
    """Test that a copy failure under ABORT fails the run and stops."""
    points = [make_recovery_point(f"rp-{i}", now - timedelta(days=i)) for i in range(3)]
    repo = Mock()
    repo.list_recovery_points_page.side_effect = make_pages(points)
    repo.start_copy_job.side_effect = ActionError("AccessDenied", points[0].recovery_point_arn)
    copy_service = CopyService(
        copy_repo=repo,
        destination_vault=Vault(name="dest-vault", region="us-east-1", account_id="123456789012"),
        iam_role_arn="arn:aws:iam::123456789012:role/backup",
        lifecycle=Lifecycle(delete_after_days=120),
        failure_policy=CopyFailurePolicy.ABORT,
    )
    runner = JobRunner(
        job_name="copy",
        list_service=ListService(repo),
        filter_service=FilterService(FilterRuleSet(rules=[])),
        action=copy_service.copy,
    )

    with pytest.raises(CopyAbortedError):
        runner.run("source-vault")

    job_run = runner.last_run
    assert job_run.state == RunState.FAILED
    assert repo.start_copy_job.call_count == 1
    assert len(job_run.outcomes) == 1
    assert job_run.outcomes[0].status == ActionStatus.FAILED


def test_run_copy_isolates_failures_across_pages(
    make_recovery_point, make_pages, now: datetime
) -> None:
    """Test that a failed copy under ISOLATE is recorded and the run continues."""
    points = [make_recovery_point(f"rp-{i}", now - timedelta(days=i)) for i in range(3)]
    failing_arn = points[1].recovery_point_arn
    repo = Mock()
    repo.list_recovery_points_page.side_effect = make_pages(points, page_size=2)

    def start_copy_job(**kwargs):
        if kwargs["recovery_point_arn"] == failing_arn:
            raise ActionError("AccessDenied", failing_arn)
        return f"copy-job-{kwargs['recovery_point_arn'][-4:]}"

    repo.start_copy_job.side_effect = start_copy_job
    copy_service = CopyService(
        copy_repo=repo,
        destination_vault=Vault(name="dest-vault", region="us-east-1", account_id="123456789012"),
        iam_role_arn="arn:aws:iam::123456789012:role/backup",
        lifecycle=Lifecycle(delete_after_days=120),
    )
    runner = JobRunner(
        job_name="copy",
        list_service=ListService(repo),
        filter_service=FilterService(FilterRuleSet(rules=[])),
        action=copy_service.copy,
    )

    job_run = runner.run("source-vault")

    assert job_run.state == RunState.DONE
    assert job_run.pages_fetched == 2
    assert repo.start_copy_job.call_count == 3
    assert job_run.count_by_status(ActionStatus.FAILED) == 1
    assert job_run.count_by_status(ActionStatus.SUCCEEDED) == 2
