"""
Utility modules for the Theatre Intel system.
"""

from .date import DateResolver
from .logging import configure_logging, get_logger

__all__ = [
    "DateResolver",
    "configure_logging",
    "get_logger",
]
