"""Utility modules for latexspans.

Provides:
- logger: get_logger for logging
"""

from latexspans.utils.logger import get_logger

__all__ = [
    "get_logger",
]
