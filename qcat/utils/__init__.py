"""qcat utility functions.

Each file in this package exports exactly one function or class.
"""

from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
