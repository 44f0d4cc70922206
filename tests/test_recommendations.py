"""
Tests for the recommendation engine.
"""

import pytest

from theatre_intel.core.enums import Effort, Impact, InsightType, RecommendationCategory, Severity
from theatre_intel.core.models import DataContext, Insight, MetricsSnapshot
from theatre_intel.services.recommendations import RecommendationEngine


def context(**metrics):
    values = dict(staffing_level=100.0, avg_turnover_time=25.0)
    values.update(metrics)
    return DataContext(metrics=MetricsSnapshot(**values))


def alert(severity):
    return Insight(type=InsightType.ALERT, severity=severity, title="x", description="y")


@pytest.fixture
def engine():
    return RecommendationEngine()


class TestRecommendationEngine:
    """Test recommendation rules."""

    def test_quality_always_emitted(self, engine):
        recs = engine.generate(context(), [])
        assert len(recs) == 1
        assert recs[0].title == "Implement Predictive Scheduling"
        assert recs[0].category == RecommendationCategory.QUALITY
        assert recs[0].impact == Impact.HIGH
        assert recs[0].effort == Effort.HIGH

    def test_turnover_boundary(self, engine):
        assert len(engine.generate(context(avg_turnover_time=30.0), [])) == 1
        recs = engine.generate(context(avg_turnover_time=42.0), [])
        assert recs[0].category == RecommendationCategory.EFFICIENCY
        assert "42min" in recs[0].description

    def test_staffing_over_target(self, engine):
        assert len(engine.generate(context(staffing_level=105.0), [])) == 1
        recs = engine.generate(context(staffing_level=110.0), [])
        assert recs[0].category == RecommendationCategory.COST

    def test_safety_needs_high_alert(self, engine):
        assert len(engine.generate(context(), [alert(Severity.MEDIUM)])) == 1
        recs = engine.generate(context(), [alert(Severity.HIGH)])
        assert recs[-1].category == RecommendationCategory.SAFETY

    def test_declaration_order(self, engine):
        recs = engine.generate(
            context(avg_turnover_time=45.0, staffing_level=120.0), [alert(Severity.HIGH)]
        )
        assert [r.category for r in recs] == [
            RecommendationCategory.EFFICIENCY,
            RecommendationCategory.COST,
            RecommendationCategory.QUALITY,
            RecommendationCategory.SAFETY,
        ]
