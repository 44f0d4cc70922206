"""
Enums used across the context pipeline.
"""

from enum import Enum


class QueryCategory(str, Enum):
    """Topic tags a query can be classified under."""

    SCHEDULE = "schedule"
    STAFFING = "staffing"
    PROCEDURES = "procedures"
    ANALYTICS = "analytics"
    CONFLICTS = "conflicts"
    WAITING_LIST = "waiting-list"
    FINANCIAL = "financial"
    RESOURCES = "resources"
    RECOMMENDATIONS = "recommendations"


class Sentiment(str, Enum):
    """Coarse tone of a query."""

    NEUTRAL = "neutral"
    URGENT = "urgent"
    ANALYTICAL = "analytical"
    CASUAL = "casual"


class ViewType(str, Enum):
    """Kind of page the user is looking at."""

    SCHEDULE = "schedule"
    STAFF = "staff"
    PROCEDURES = "procedures"
    ANALYTICS = "analytics"
    SETTINGS = "settings"
    HOME = "home"


class InsightType(str, Enum):
    """Insight kinds."""

    ALERT = "alert"
    OPPORTUNITY = "opportunity"
    TREND = "trend"
    ANOMALY = "anomaly"


class Severity(str, Enum):
    """Insight severity."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Impact(str, Enum):
    """Expected impact of a recommendation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Effort(str, Enum):
    """Effort needed to act on a recommendation."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RecommendationCategory(str, Enum):
    """Recommendation categories."""

    EFFICIENCY = "efficiency"
    SAFETY = "safety"
    COST = "cost"
    QUALITY = "quality"
