"""
Context pipeline result models.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..enums import (
    Effort,
    Impact,
    InsightType,
    QueryCategory,
    RecommendationCategory,
    Severity,
)
from .intent import PageContext, QueryIntent
from .records import ProcedureRecord, ScheduleRecord, StaffRecord, TheatreRecord


class _ContextModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MetricsSnapshot(_ContextModel):
    """Scalar operational metrics for one day."""

    date: Optional[str] = None
    today_utilization: float = 0.0
    week_utilization: float = 0.0
    staffing_level: float = 0.0
    waiting_list_size: int = 0
    avg_turnover_time: float = 0.0
    cancellation_rate: float = 0.0

    @classmethod
    def zero(cls, date: Optional[str] = None) -> "MetricsSnapshot":
        """Snapshot used when metrics cannot be computed."""
        return cls(date=date)


class DailyVolume(_ContextModel):
    date: str
    sessions: int


class PeakTime(_ContextModel):
    time: str
    avg_cases: float


class RecurringIssue(_ContextModel):
    issue: str
    frequency: int


class HistoricalSummary(_ContextModel):
    """Trailing-window trend markers. Any list may be empty."""

    window_days: int = 0
    weekly_trends: List[DailyVolume] = Field(default_factory=list)
    peak_times: List[PeakTime] = Field(default_factory=list)
    common_issues: List[RecurringIssue] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.weekly_trends or self.peak_times or self.common_issues)


class DataContext(_ContextModel):
    """Everything retrieved for one query. Every field is always present."""

    target_date: Optional[str] = None
    schedules: List[ScheduleRecord] = Field(default_factory=list)
    staff: List[StaffRecord] = Field(default_factory=list)
    procedures: List[ProcedureRecord] = Field(default_factory=list)
    theatres: List[TheatreRecord] = Field(default_factory=list)
    metrics: MetricsSnapshot = Field(default_factory=MetricsSnapshot)
    historical: HistoricalSummary = Field(default_factory=HistoricalSummary)


class ScheduleConflict(_ContextModel):
    """Two sessions booked into the same theatre at the same start time."""

    theatre: str
    date: str
    time: str
    sessions: List[str]


class Insight(_ContextModel):
    type: InsightType
    severity: Severity
    title: str
    description: str
    data: Optional[Any] = None
    action: Optional[str] = None


class Recommendation(_ContextModel):
    title: str
    description: str
    impact: Impact
    effort: Effort
    category: RecommendationCategory


class ContextMetadata(_ContextModel):
    timestamp: str
    query_categories: List[QueryCategory] = Field(default_factory=list)
    sources_used: List[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class ContextResult(_ContextModel):
    """Top-level output of one pipeline invocation."""

    page_context: Optional[PageContext] = None
    intent: Optional[QueryIntent] = None
    data_context: DataContext = Field(default_factory=DataContext)
    insights: List[Insight] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    metadata: ContextMetadata
