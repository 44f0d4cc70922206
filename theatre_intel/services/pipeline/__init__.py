"""
Context pipeline orchestration.
"""

from .service import ContextPipeline

__all__ = ["ContextPipeline"]
