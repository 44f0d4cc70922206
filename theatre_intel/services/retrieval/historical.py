"""
Historical summarizer.

Best-effort trend markers over a trailing window of schedule records.
Callers must not assume any of the lists are non-empty.
"""

from collections import Counter
from typing import Iterable, List, Optional

from ...config import Settings, get_settings
from ...core.models import (
    DailyVolume,
    HistoricalSummary,
    PeakTime,
    RecurringIssue,
    ScheduleRecord,
)
from ...utils.date import DateResolver
from ...utils.logging import get_logger
from ..data_store import FieldFilter

logger = get_logger(__name__)

TOP_PEAK_TIMES = 3
TOP_ISSUES = 5


class HistoricalSummarizer:
    """Summarizes the days before today."""

    def __init__(
        self,
        data_store,
        settings: Optional[Settings] = None,
        date_resolver: Optional[DateResolver] = None,
    ):
        self.data_store = data_store
        self.settings = settings or get_settings()
        self.date_resolver = date_resolver or DateResolver(self.settings.timezone)

    async def summarize(self, days: int) -> HistoricalSummary:
        """Summarize the trailing `days` days. Never raises."""
        if days <= 0:
            return HistoricalSummary(window_days=0)

        dates = self.date_resolver.window(days)
        try:
            docs = await self.data_store.find(
                self.settings.schedule_collection,
                [FieldFilter("date", ">=", dates[0]), FieldFilter("date", "<=", dates[-1])],
            )
            records = [ScheduleRecord.from_document(d) for d in docs]
            return self.summarize_records(records, dates)
        except Exception as e:
            logger.warning(f"historical: trend computation unavailable for {days} days: {e}")
            return HistoricalSummary(window_days=days)

    def summarize_records(self, records: Iterable[ScheduleRecord], dates: List[str]) -> HistoricalSummary:
        """Build the summary from records already in hand."""
        window = set(dates)
        in_window = [r for r in records if r.date in window]
        days = len(dates)

        per_day = Counter(r.date for r in in_window)
        weekly_trends = [DailyVolume(date=d, sessions=per_day.get(d, 0)) for d in dates]

        per_hour = Counter(
            f"{r.start_time.split(':')[0].zfill(2)}:00"
            for r in in_window
            if r.start_time and ":" in r.start_time
        )
        ranked_hours = sorted(per_hour.items(), key=lambda item: (-item[1], item[0]))
        peak_times = [
            PeakTime(time=hour, avg_cases=round(count / days, 1))
            for hour, count in ranked_hours[:TOP_PEAK_TIMES]
        ]

        issues = Counter(issue for r in in_window for issue in r.issues)
        ranked_issues = sorted(issues.items(), key=lambda item: (-item[1], item[0]))
        common_issues = [
            RecurringIssue(issue=issue, frequency=count)
            for issue, count in ranked_issues[:TOP_ISSUES]
        ]

        return HistoricalSummary(
            window_days=days,
            weekly_trends=weekly_trends,
            peak_times=peak_times,
            common_issues=common_issues,
        )
