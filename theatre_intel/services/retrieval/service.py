"""
Multi-source retriever.

Fans out to the schedule, staff, backlog and resource collections while the
day's metrics and the historical summary are computed, and joins everything
into one DataContext. Each source fails on its own: a broken fetch is logged
and contributes an empty list.
"""

import asyncio
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from ...config import Settings, get_settings
from ...core.models import (
    DataContext,
    PageContext,
    ProcedureRecord,
    QueryIntent,
    ScheduleRecord,
    StaffRecord,
    TheatreRecord,
)
from ...utils.date import DateResolver
from ...utils.logging import get_logger
from ..data_store import FieldFilter
from .historical import HistoricalSummarizer
from .metrics import WAITING, MetricsAggregator

logger = get_logger(__name__)


def start_sort_key(start_time: Optional[str]) -> Tuple[int, Any]:
    """Order clock times numerically; missing or unparsable times go last."""
    try:
        return (0, datetime.strptime((start_time or "").strip(), "%H:%M").time())
    except ValueError:
        return (1, start_time or "")


def sources_used(data: DataContext) -> List[str]:
    """Names of the sources that contributed to a DataContext."""
    sources = []
    if data.schedules:
        sources.append("schedule")
    if data.staff:
        sources.append("staff")
    if data.procedures:
        sources.append("backlog")
    if data.theatres:
        sources.append("resources")
    sources.append("metrics")
    sources.append("historical")
    return sources


class MultiSourceRetriever:
    """Builds the DataContext for one query."""

    def __init__(
        self,
        data_store,
        settings: Optional[Settings] = None,
        date_resolver: Optional[DateResolver] = None,
        metrics: Optional[MetricsAggregator] = None,
        historical: Optional[HistoricalSummarizer] = None,
    ):
        self.data_store = data_store
        self.settings = settings or get_settings()
        self.date_resolver = date_resolver or DateResolver(self.settings.timezone)
        self.metrics = metrics or MetricsAggregator(data_store, self.settings)
        self.historical = historical or HistoricalSummarizer(
            data_store, self.settings, self.date_resolver
        )

    def resolve_target_date(
        self, intent: QueryIntent, page_context: Optional[PageContext] = None
    ) -> str:
        """The day schedule retrieval looks at."""
        if page_context and page_context.selected_date:
            return page_context.selected_date
        resolved = self.date_resolver.resolve_first(intent.entities.dates)
        return resolved or self.date_resolver.today_iso()

    def schedule_filters(
        self, target_date: str, page_context: Optional[PageContext] = None
    ) -> List[FieldFilter]:
        filters = [FieldFilter("date", "==", target_date)]
        if page_context and page_context.selected_theatre:
            filters.append(FieldFilter("theatreId", "==", page_context.selected_theatre))
        if page_context and page_context.selected_specialty:
            filters.append(FieldFilter("specialtyName", "==", page_context.selected_specialty))
        return filters

    async def retrieve(
        self, intent: QueryIntent, page_context: Optional[PageContext] = None
    ) -> DataContext:
        """
        Fetch every source concurrently and join the results.

        Args:
            intent: Analyzed query
            page_context: Optional page the user is on; narrows schedule retrieval

        Returns:
            DataContext with every field present, possibly empty
        """
        target_date = self.resolve_target_date(intent, page_context)
        if self.settings.metrics_follow_target_date:
            metrics_date = target_date
        else:
            metrics_date = self.date_resolver.today_iso()

        schedules, staff, procedures, theatres, metrics, historical = await asyncio.gather(
            self._fetch(
                "schedule",
                self.settings.schedule_collection,
                ScheduleRecord,
                filters=self.schedule_filters(target_date, page_context),
            ),
            self._fetch(
                "staff",
                self.settings.staff_collection,
                StaffRecord,
                limit=self.settings.staff_fetch_limit,
            ),
            self._fetch(
                "backlog",
                self.settings.backlog_collection,
                ProcedureRecord,
                filters=[FieldFilter("status", "==", WAITING)],
                limit=self.settings.backlog_fetch_limit,
            ),
            self._fetch("resources", self.settings.resources_collection, TheatreRecord),
            self.metrics.compute(metrics_date),
            self.historical.summarize(self.settings.historical_window_days),
        )

        schedules.sort(key=lambda s: (s.date, start_sort_key(s.start_time), s.theatre))

        return DataContext(
            target_date=target_date,
            schedules=schedules,
            staff=staff,
            procedures=procedures,
            theatres=theatres,
            metrics=metrics,
            historical=historical,
        )

    async def _fetch(
        self,
        source: str,
        collection: str,
        model: Type,
        filters: Optional[Sequence[FieldFilter]] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        try:
            docs: List[Dict[str, Any]] = await self.data_store.find(collection, filters, limit)
            return [model.from_document(doc) for doc in docs]
        except Exception as e:
            logger.error(f"retrieval: {source} fetch from {collection} failed: {e}")
            return []
