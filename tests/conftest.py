"""Shared pytest fixtures for vault-lifecycle tests."""

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from vault_lifecycle.domain.page import RecoveryPointPage
from vault_lifecycle.domain.recovery_point import RecoveryPoint

INSTANCE_ARN = "arn:aws:ec2:us-east-1:123456789012:instance/i-0abc123"
OTHER_INSTANCE_ARN = "arn:aws:ec2:us-east-1:123456789012:instance/i-0def456"


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for a run.

    Returns:
        2025-01-01T00:00:00Z
    """
    return datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_recovery_point() -> Callable[..., RecoveryPoint]:
    """Create a factory for recovery points.

    Returns:
        Function building a RecoveryPoint from an id and completion date
    """

    def _make(
        rp_id: str,
        completion_date: datetime | None,
        resource_arn: str = INSTANCE_ARN,
        vault_name: str = "source-vault",
    ) -> RecoveryPoint:
        return RecoveryPoint(
            recovery_point_arn=f"arn:aws:ec2:us-east-1::image/ami-{rp_id}",
            backup_vault_name=vault_name,
            resource_arn=resource_arn,
            completion_date=completion_date,
            resource_type="EC2",
            status="COMPLETED",
        )

    return _make


@pytest.fixture
def sample_recovery_point(make_recovery_point, now) -> RecoveryPoint:
    """Create a sample recovery point completed 10 days before now.

    Returns:
        RecoveryPoint instance
    """
    return make_recovery_point("sample", now - timedelta(days=10))


@pytest.fixture
def make_pages() -> Callable[..., list[RecoveryPointPage]]:
    """Create a factory splitting recovery points into chained pages.

    Returns:
        Function building pages of at most page_size recovery points
    """

    def _make(recovery_points: list[RecoveryPoint], page_size: int = 100) -> list[RecoveryPointPage]:
        chunks = [
            recovery_points[i : i + page_size] for i in range(0, len(recovery_points), page_size)
        ] or [[]]
        return [
            RecoveryPointPage(
                recovery_points=tuple(chunk),
                next_token=f"token-{idx + 1}" if idx < len(chunks) - 1 else None,
            )
            for idx, chunk in enumerate(chunks)
        ]

    return _make
