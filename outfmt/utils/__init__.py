"""
outfmt Utils Package
=====================
Logging utilities.
"""

from .logger import (
    setup_logging,
    get_logger,
    LogConfig,
    LogContext,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'LogConfig',
    'LogContext',
]
