"""
Recommendation engine.
"""

from typing import List, Optional, Sequence

from ...config import ThresholdConfig
from ...core.enums import Effort, Impact, InsightType, RecommendationCategory, Severity
from ...core.models import DataContext, Insight, Recommendation


class RecommendationEngine:
    """Derives recommendations from metrics and insights, in rule order."""

    def __init__(self, thresholds: Optional[ThresholdConfig] = None):
        self.thresholds = thresholds or ThresholdConfig()

    def generate(self, data: DataContext, insights: Sequence[Insight]) -> List[Recommendation]:
        t = self.thresholds
        metrics = data.metrics
        recommendations: List[Recommendation] = []

        if metrics.avg_turnover_time > t.turnover_minutes_high:
            recommendations.append(Recommendation(
                title="Optimize Theatre Turnover",
                description=(
                    f"Average turnover time is {metrics.avg_turnover_time:.0f}min. "
                    f"Implement parallel cleaning protocols to reduce to target of "
                    f"{t.turnover_minutes_target:.0f}min"
                ),
                impact=Impact.HIGH,
                effort=Effort.MEDIUM,
                category=RecommendationCategory.EFFICIENCY,
            ))

        if metrics.staffing_level > t.staffing_over_target:
            recommendations.append(Recommendation(
                title="Review Staffing Levels",
                description=(
                    f"Staffing is at {metrics.staffing_level:.0f}% of target. "
                    "Review rosters to optimize cost without compromising safety"
                ),
                impact=Impact.MEDIUM,
                effort=Effort.LOW,
                category=RecommendationCategory.COST,
            ))

        recommendations.append(Recommendation(
            title="Implement Predictive Scheduling",
            description=(
                "Use historical data to predict procedure durations more accurately, "
                "reducing overruns by 15%"
            ),
            impact=Impact.HIGH,
            effort=Effort.HIGH,
            category=RecommendationCategory.QUALITY,
        ))

        if any(i.type == InsightType.ALERT and i.severity == Severity.HIGH for i in insights):
            recommendations.append(Recommendation(
                title="Deploy Real-time Alerts",
                description="Enable proactive notifications for conflicts, capacity issues, and safety concerns",
                impact=Impact.HIGH,
                effort=Effort.LOW,
                category=RecommendationCategory.SAFETY,
            ))

        return recommendations
