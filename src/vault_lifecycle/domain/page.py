#!/usr/bin/env python3
"""
Value objects for paging through a vault's recovery points.
"""

from dataclasses import dataclass, replace
from typing import Any

from vault_lifecycle.domain.recovery_point import RecoveryPoint

__version__ = "0.1.0"
__author__ = "John Ayers"

# ListRecoveryPointsByBackupVault page size used by the jobs
MAX_PAGE_SIZE = 100


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "page",
        "description": "Paging value objects for recovery point listings",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class ListRecoveryPointsRequest:
    """Request for one page of recovery points.

    Attributes:
        vault_name: Vault to list
        next_token: Continuation token from the previous page, None for the first page
        max_results: Page size (1-100)
    """

    vault_name: str
    next_token: str | None = None
    max_results: int = MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        if not 1 <= self.max_results <= MAX_PAGE_SIZE:
            raise ValueError(f"max_results must be between 1 and {MAX_PAGE_SIZE}")

    def with_token(self, next_token: str | None) -> "ListRecoveryPointsRequest":
        """Get the request for the page following this one.

        Args:
            next_token: Token returned with the current page

        Returns:
            New request carrying the token
        """
        return replace(self, next_token=next_token)

    def to_params(self) -> dict[str, Any]:
        """Build keyword arguments for list_recovery_points_by_backup_vault.

        Returns:
            Request parameters, NextToken only present when a token is set
        """
        params: dict[str, Any] = {
            "BackupVaultName": self.vault_name,
            "MaxResults": self.max_results,
        }
        if self.next_token:
            params["NextToken"] = self.next_token
        return params


@dataclass(frozen=True)
class RecoveryPointPage:
    """One page of a recovery point listing.

    Attributes:
        recovery_points: Recovery points on this page
        next_token: Token for the next page, None when this is the last page
    """

    recovery_points: tuple[RecoveryPoint, ...]
    next_token: str | None = None

    @property
    def is_last(self) -> bool:
        """True when no further pages exist."""
        return not self.next_token

    def __len__(self) -> int:
        return len(self.recovery_points)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
