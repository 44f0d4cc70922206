"""
API route handlers.
"""

from .health import HealthHandler
from .context import ContextHandler

__all__ = [
    "HealthHandler",
    "ContextHandler",
]
