"""
Core data models for the Theatre Intel system.
"""

from .records import ScheduleRecord, StaffRecord, ProcedureRecord, TheatreRecord
from .intent import QueryEntities, QueryIntent, PageContext
from .context import (
    MetricsSnapshot,
    DailyVolume,
    PeakTime,
    RecurringIssue,
    HistoricalSummary,
    DataContext,
    ScheduleConflict,
    Insight,
    Recommendation,
    ContextMetadata,
    ContextResult,
)

__all__ = [
    "ScheduleRecord",
    "StaffRecord",
    "ProcedureRecord",
    "TheatreRecord",
    "QueryEntities",
    "QueryIntent",
    "PageContext",
    "MetricsSnapshot",
    "DailyVolume",
    "PeakTime",
    "RecurringIssue",
    "HistoricalSummary",
    "DataContext",
    "ScheduleConflict",
    "Insight",
    "Recommendation",
    "ContextMetadata",
    "ContextResult",
]
