"""
Recommendation engine.
"""

from .service import RecommendationEngine

__all__ = ["RecommendationEngine"]
