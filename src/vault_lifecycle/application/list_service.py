#!/usr/bin/env python3
"""
Service for enumerating recovery points in a vault.

Pages through ListRecoveryPointsByBackupVault lazily, one page at a time, so
large vaults are never materialized in memory.
"""

import logging
from typing import Iterator, Protocol

from vault_lifecycle.domain.page import ListRecoveryPointsRequest, RecoveryPointPage

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "list_service",
        "description": "Service for enumerating recovery points",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class BackupRepository(Protocol):
    """Protocol defining interface for listing operations.

    Infrastructure layer must implement this protocol.
    """

    def list_recovery_points_page(self, request: ListRecoveryPointsRequest) -> RecoveryPointPage:
        """Fetch one page of recovery points.

        Args:
            request: Vault, page size and continuation token

        Returns:
            Page of recovery points with the token for the next page

        Raises:
            EnumerationError: If the listing call fails
        """
        ...


class ListService:
    """Application service for listing operations."""

    def __init__(self, backup_repo: BackupRepository, page_size: int | None = None) -> None:
        """Initialize the list service.

        Args:
            backup_repo: Repository for backup operations
            page_size: Optional page size override (defaults to the service maximum)
        """
        self.backup_repo = backup_repo
        self.page_size = page_size

    def iter_pages(
        self, vault_name: str, start_token: str | None = None
    ) -> Iterator[RecoveryPointPage]:
        """Yield pages of recovery points until the listing is exhausted.

        Errors raised while fetching a page propagate to the caller and end
        the iteration; no further pages are requested.

        Args:
            vault_name: Name of vault
            start_token: Continuation token to resume from (None starts at the beginning)

        Yields:
            RecoveryPointPage objects in listing order
        """
        if self.page_size is None:
            request = ListRecoveryPointsRequest(vault_name=vault_name, next_token=start_token)
        else:
            request = ListRecoveryPointsRequest(
                vault_name=vault_name, next_token=start_token, max_results=self.page_size
            )

        while True:
            page = self.backup_repo.list_recovery_points_page(request)
            logger.debug(
                f"Fetched {len(page)} recovery points from {vault_name} "
                f"(more pages: {not page.is_last})"
            )
            yield page

            if page.is_last:
                return
            request = request.with_token(page.next_token)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
