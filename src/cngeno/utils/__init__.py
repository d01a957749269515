"""
Utility modules for cngeno.

Provides logging and timing helpers.
"""

from .logging import get_logger, log_call, setup_logging, timed

__all__ = [
    "get_logger",
    "log_call",
    "setup_logging",
    "timed",
]
