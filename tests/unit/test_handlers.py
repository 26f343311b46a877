"""Unit tests for the Lambda handlers."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

import pytest

from vault_lifecycle import handlers
from vault_lifecycle.domain.errors import ConfigurationError, EnumerationError

from conftest import OTHER_INSTANCE_ARN

FUNCTION_ARN = "arn:aws:lambda:us-east-1:123456789012:function:copy-recovery-points"


@pytest.fixture
def lambda_context() -> Mock:
    """Create a Lambda context."""
    return Mock(invoked_function_arn=FUNCTION_ARN)


@pytest.fixture
def repo() -> Mock:
    """Create a repository mock in place of AWSBackupRepository."""
    repo = Mock()
    repo.start_copy_job.return_value = "copy-job-123"
    with (
        patch.object(handlers, "setup_logger"),
        patch.object(handlers, "AWSBackupRepository", return_value=repo),
    ):
        yield repo


@pytest.fixture
def copy_env(monkeypatch) -> None:
    """Set copy job environment variables."""
    monkeypatch.setenv("SOURCE_VAULT", "source-vault")
    monkeypatch.setenv("DESTINATION_VAULT", "dest-vault")
    monkeypatch.setenv("INSTANCE_ID", "i-0abc123")
    monkeypatch.delenv("DRY_RUN", raising=False)
    monkeypatch.delenv("BACKUP_ROLE_ARN", raising=False)
    monkeypatch.delenv("MOVE_TO_COLD_STORAGE", raising=False)
    monkeypatch.delenv("DELETE_AFTER_DAYS", raising=False)


def _ago(days: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


def test_delete_handler(repo, make_recovery_point, make_pages, monkeypatch, lambda_context) -> None:
    """Test that the delete handler removes expired recovery points."""
    monkeypatch.setenv("BACKUP_VAULT_NAME", "my-vault")
    monkeypatch.setenv("EXPIRY_DAYS", "365")
    monkeypatch.delenv("DRY_RUN", raising=False)
    points = [
        make_recovery_point("10d", _ago(10), vault_name="my-vault"),
        make_recovery_point("400d", _ago(400), vault_name="my-vault"),
        make_recovery_point("500d", _ago(500), vault_name="my-vault"),
    ]
    repo.list_recovery_points_page.side_effect = make_pages(points)

    summary = handlers.delete_handler({}, lambda_context)

    assert summary["state"] == "done"
    assert summary["recovery_points_seen"] == 3
    assert summary["succeeded"] == 2
    assert repo.delete_recovery_point.call_count == 2


def test_delete_handler_missing_config(repo, monkeypatch, lambda_context) -> None:
    """Test that a missing vault name fails the invocation."""
    monkeypatch.delenv("BACKUP_VAULT_NAME", raising=False)

    with pytest.raises(ConfigurationError):
        handlers.delete_handler({}, lambda_context)

    repo.list_recovery_points_page.assert_not_called()


def test_delete_handler_enumeration_failure(repo, monkeypatch, lambda_context) -> None:
    """Test that a listing failure fails the invocation."""
    monkeypatch.setenv("BACKUP_VAULT_NAME", "my-vault")
    repo.list_recovery_points_page.side_effect = EnumerationError("AccessDenied", "my-vault")

    with pytest.raises(EnumerationError):
        handlers.delete_handler({}, lambda_context)


def test_copy_handler(repo, copy_env, make_recovery_point, make_pages, lambda_context) -> None:
    """Test that the copy handler copies the configured resource only."""
    points = [
        make_recovery_point("a", _ago(1)),
        make_recovery_point("b", _ago(2), OTHER_INSTANCE_ARN),
    ]
    repo.list_recovery_points_page.side_effect = make_pages(points)

    summary = handlers.copy_handler({}, lambda_context)

    assert summary["job"] == "copy"
    assert summary["succeeded"] == 1
    repo.start_copy_job.assert_called_once_with(
        recovery_point_arn=points[0].recovery_point_arn,
        source_vault_name="source-vault",
        destination_vault_arn="arn:aws:backup:us-east-1:123456789012:backup-vault:dest-vault",
        iam_role_arn="arn:aws:iam::123456789012:role/service-role/AWSBackupDefaultServiceRole",
        lifecycle={"MoveToColdStorageAfterDays": 30, "DeleteAfterDays": 120},
    )


def test_copy_first_of_month_handler(
    repo, copy_env, make_recovery_point, make_pages, lambda_context
) -> None:
    """Test that the monthly handler copies first-of-month recovery points only."""
    today = datetime.now(timezone.utc)
    first = today.replace(day=1, hour=10, minute=0, second=0, microsecond=0)
    second = first.replace(day=2)
    points = [make_recovery_point("first", first), make_recovery_point("second", second)]
    repo.list_recovery_points_page.side_effect = make_pages(points)

    summary = handlers.copy_first_of_month_handler({}, lambda_context)

    assert summary["job"] == "copy-monthly"
    assert summary["eligible"] == 1
    kwargs = repo.start_copy_job.call_args.kwargs
    assert kwargs["recovery_point_arn"] == points[0].recovery_point_arn


def test_copy_handler_dry_run(
    repo, copy_env, make_recovery_point, make_pages, monkeypatch, lambda_context
) -> None:
    """Test that dry run makes no copy requests."""
    monkeypatch.setenv("DRY_RUN", "true")
    repo.list_recovery_points_page.side_effect = make_pages([make_recovery_point("a", _ago(1))])

    summary = handlers.copy_handler({}, lambda_context)

    assert summary["skipped"] == 1
    repo.start_copy_job.assert_not_called()
