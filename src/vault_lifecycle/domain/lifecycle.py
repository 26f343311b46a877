#!/usr/bin/env python3
"""
Domain model for the lifecycle applied to copied recovery points.
"""

from dataclasses import dataclass

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "lifecycle",
        "description": "Domain model for copy lifecycle settings",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class Lifecycle:
    """Cold storage transition and expiry for a copied recovery point.

    A value of 0 disables the corresponding transition. AWS Backup requires
    DeleteAfterDays to be at least 90 days past MoveToColdStorageAfterDays;
    that rule is enforced by the service, not here.

    Attributes:
        move_to_cold_storage_after_days: Days before moving to cold storage
        delete_after_days: Days before the copy is deleted
    """

    move_to_cold_storage_after_days: int = 0
    delete_after_days: int = 0

    def __post_init__(self) -> None:
        if self.move_to_cold_storage_after_days < 0:
            raise ValueError("move_to_cold_storage_after_days must be >= 0")
        if self.delete_after_days < 0:
            raise ValueError("delete_after_days must be >= 0")

    def to_request(self) -> dict[str, int]:
        """Build the Lifecycle argument for StartCopyJob.

        Returns:
            Dictionary containing only the enabled transitions
        """
        lifecycle: dict[str, int] = {}
        if self.move_to_cold_storage_after_days > 0:
            lifecycle["MoveToColdStorageAfterDays"] = self.move_to_cold_storage_after_days
        if self.delete_after_days > 0:
            lifecycle["DeleteAfterDays"] = self.delete_after_days
        return lifecycle


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
