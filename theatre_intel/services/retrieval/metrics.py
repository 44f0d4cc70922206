"""
Metrics aggregator.

Reduces sessions, staff and backlog records into the scalar metrics the
insight rules run against. Average turnover and cancellation rate are not
derived from records; they come from settings until the store carries
turnover and cancellation data.
"""

import asyncio
from datetime import datetime
from typing import Iterable, List, Optional

from ...config import Settings, ThresholdConfig, get_settings
from ...core.models import MetricsSnapshot, ProcedureRecord, ScheduleRecord, StaffRecord
from ...utils.logging import get_logger
from ..data_store import FieldFilter

logger = get_logger(__name__)

WAITING = "waiting"


def _minutes_between(start: Optional[str], end: Optional[str]) -> Optional[float]:
    if not start or not end:
        return None
    try:
        delta = datetime.strptime(end, "%H:%M") - datetime.strptime(start, "%H:%M")
    except ValueError:
        return None
    minutes = delta.total_seconds() / 60
    return minutes if minutes > 0 else None


class MetricsAggregator:
    """Computes a MetricsSnapshot for one day."""

    def __init__(
        self,
        data_store,
        settings: Optional[Settings] = None,
        thresholds: Optional[ThresholdConfig] = None,
    ):
        self.data_store = data_store
        self.settings = settings or get_settings()
        self.thresholds = thresholds or ThresholdConfig()

    async def compute(self, date: str) -> MetricsSnapshot:
        """Fetch the day's records and aggregate them. Never raises."""
        try:
            results = await asyncio.gather(
                self.data_store.find(
                    self.settings.schedule_collection, [FieldFilter("date", "==", date)]
                ),
                self.data_store.find(self.settings.staff_collection),
                self.data_store.find(
                    self.settings.backlog_collection, [FieldFilter("status", "==", WAITING)]
                ),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            schedule_docs, staff_docs, backlog_docs = results
            return self.aggregate(
                [ScheduleRecord.from_document(d) for d in schedule_docs],
                [StaffRecord.from_document(d) for d in staff_docs],
                [ProcedureRecord.from_document(d) for d in backlog_docs],
                date=date,
            )
        except Exception as e:
            logger.error(f"metrics: failed to compute metrics for {date}: {e}")
            return MetricsSnapshot.zero(date)

    def aggregate(
        self,
        schedules: Iterable[ScheduleRecord],
        staff: Iterable[StaffRecord],
        backlog: Iterable[ProcedureRecord],
        date: Optional[str] = None,
    ) -> MetricsSnapshot:
        """Reduce records to metrics without touching the store."""
        sessions: List[ScheduleRecord] = list(schedules)
        if sessions:
            utilization = sum(self.session_utilization(s) for s in sessions) / len(sessions)
        else:
            utilization = 0.0

        target = self.settings.staffing_target_headcount
        staffing_level = (len(list(staff)) / target) * 100 if target > 0 else 0.0

        waiting = sum(1 for p in backlog if (p.status or "").lower() == WAITING)

        return MetricsSnapshot(
            date=date,
            today_utilization=utilization,
            week_utilization=utilization,
            staffing_level=staffing_level,
            waiting_list_size=waiting,
            avg_turnover_time=self.settings.avg_turnover_minutes,
            cancellation_rate=self.settings.cancellation_rate,
        )

    def session_utilization(self, session: ScheduleRecord) -> float:
        """Booked minutes as a percentage of the session's planned length."""
        if session.booked_minutes is not None:
            planned = self.planned_minutes(session)
            return (session.booked_minutes / planned) * 100 if planned > 0 else 0.0
        if session.utilization is not None:
            return session.utilization
        return 0.0

    def planned_minutes(self, session: ScheduleRecord) -> float:
        if session.session_type:
            return float(self.thresholds.session_minutes(session.session_type))
        span = _minutes_between(session.start_time, session.end_time)
        if span is not None:
            return span
        return float(self.thresholds.default_session_minutes)
