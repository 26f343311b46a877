#!/usr/bin/env python3
"""
vault-lifecycle: scheduled lifecycle jobs for AWS Backup recovery points.

This package deletes recovery points older than a retention threshold and copies
selected recovery points between vaults while applying a new lifecycle policy.
"""

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "__init__",
        "description": "Package initialization for vault-lifecycle",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }
