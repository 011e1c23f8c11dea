"""qalink utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule (logger.py holds the configure/reset pair).
"""

from .get_logger import get_logger
from .logger import configure_logging, reset_logging

__all__ = [
    "configure_logging",
    "get_logger",
    "reset_logging",
]
