#!/usr/bin/env python3
"""
Exception hierarchy for vault-lifecycle.

Enumeration errors abort a run, action errors are recovered per recovery point,
and configuration errors stop a job before any AWS call is made.
"""

from typing import Any

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "errors",
        "description": "Exception hierarchy",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class VaultLifecycleError(Exception):
    """Base class for all vault-lifecycle errors."""


class ConfigurationError(VaultLifecycleError, ValueError):
    """A required setting is missing or has an invalid value."""


class EnumerationError(VaultLifecycleError):
    """Listing recovery points in a vault failed.

    Attributes:
        vault_name: Vault that was being listed
    """

    def __init__(self, message: str, vault_name: str) -> None:
        super().__init__(message)
        self.vault_name = vault_name


class ActionError(VaultLifecycleError):
    """A delete or copy call failed for a single recovery point.

    Attributes:
        recovery_point_arn: Recovery point the action was applied to
    """

    def __init__(self, message: str, recovery_point_arn: str) -> None:
        super().__init__(message)
        self.recovery_point_arn = recovery_point_arn


class CopyAbortedError(ActionError):
    """A copy failed and the copy failure policy says to stop the run.

    Attributes:
        outcome: Failed ActionOutcome of the copy, when available
    """

    def __init__(self, message: str, recovery_point_arn: str, outcome: Any = None) -> None:
        super().__init__(message, recovery_point_arn)
        self.outcome = outcome


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
