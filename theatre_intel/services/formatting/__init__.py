"""
Context block formatting.
"""

from .service import ContextFormatter

__all__ = ["ContextFormatter"]
