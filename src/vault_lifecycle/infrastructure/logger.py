#!/usr/bin/env python3
"""
Logging configuration for vault-lifecycle.

Provides structured logging with appropriate levels for CLI, Lambda and library usage.
"""

import logging
import sys
from typing import Any

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "logger",
        "description": "Logging configuration",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def setup_logger(
    name: str = "vault_lifecycle",
    verbose: bool = False,
    level: str | None = None,
) -> logging.Logger:
    """Configure and return a logger instance.

    Args:
        name: Logger name
        verbose: If True, set level to DEBUG; otherwise INFO
        level: Explicit level name (e.g. "WARNING"), overrides verbose

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level:
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    else:
        log_level = logging.DEBUG if verbose else logging.INFO

    # Only configure if not already configured
    if not logger.handlers:
        # Console handler
        handler = logging.StreamHandler(sys.stdout)

        # Format: timestamp - name - level - message
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        # Lambda installs its own root handler
        logger.propagate = False

    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger


def log_operation(
    logger: logging.Logger,
    operation: str,
    details: dict[str, Any] | None = None,
    level: int = logging.INFO,
) -> None:
    """Log an operation with structured details.

    Args:
        logger: Logger instance
        operation: Operation description
        details: Optional dictionary of details
        level: Logging level
    """
    message = f"{operation}"
    if details:
        detail_str = ", ".join(f"{k}={v}" for k, v in details.items())
        message = f"{message} ({detail_str})"

    logger.log(level, message)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
