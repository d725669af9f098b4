"""Shared utility functions.

Key modules:
    - logging: Logging configuration
"""

from .logging import configure_logging, get_logger, escape_control

__all__ = [
    "configure_logging",
    "get_logger",
    "escape_control",
]
