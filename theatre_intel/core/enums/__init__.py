"""
Enums for the Theatre Intel system.
"""

from .context import (
    QueryCategory,
    Sentiment,
    ViewType,
    InsightType,
    Severity,
    Impact,
    Effort,
    RecommendationCategory,
)

__all__ = [
    "QueryCategory",
    "Sentiment",
    "ViewType",
    "InsightType",
    "Severity",
    "Impact",
    "Effort",
    "RecommendationCategory",
]
