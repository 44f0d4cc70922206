"""
Tests for the metrics aggregator.
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from theatre_intel.core.exceptions import DataStoreError
from theatre_intel.core.models import MetricsSnapshot, ProcedureRecord, ScheduleRecord, StaffRecord
from theatre_intel.services.data_store import DataStoreService
from theatre_intel.services.retrieval import MetricsAggregator

from .conftest import TODAY_ISO


def session(**fields):
    return ScheduleRecord.from_document({"id": "x", "date": TODAY_ISO, **fields})


class TestAggregate:
    """Test pure metric reduction."""

    @pytest.fixture
    def aggregator(self, mock_data_store, settings):
        return MetricsAggregator(mock_data_store, settings)

    def test_empty_inputs(self, aggregator, settings):
        metrics = aggregator.aggregate([], [], [])
        assert metrics.today_utilization == 0.0
        assert metrics.staffing_level == 0.0
        assert metrics.waiting_list_size == 0
        assert metrics.avg_turnover_time == settings.avg_turnover_minutes
        assert metrics.cancellation_rate == settings.cancellation_rate

    def test_utilization_is_mean_of_session_ratios(self, aggregator):
        sessions = [
            session(sessionType="AM", bookedMinutes=120),      # 50%
            session(sessionType="ALL_DAY", bookedMinutes=480),  # 100%
        ]
        metrics = aggregator.aggregate(sessions, [], [])
        assert metrics.today_utilization == pytest.approx(75.0)
        assert metrics.week_utilization == metrics.today_utilization

    def test_session_without_type_uses_times(self, aggregator):
        s = session(startTime="08:00", endTime="10:00", bookedMinutes=60)
        assert aggregator.session_utilization(s) == pytest.approx(50.0)

    def test_explicit_utilization_fallback(self, aggregator):
        assert aggregator.session_utilization(session(utilization=88)) == 88.0
        assert aggregator.session_utilization(session()) == 0.0

    def test_staffing_against_target(self, aggregator):
        staff = [StaffRecord.from_document({"id": str(i)}) for i in range(85)]
        assert aggregator.aggregate([], staff, []).staffing_level == pytest.approx(85.0)

    def test_waiting_list_counts_only_waiting(self, aggregator):
        backlog = [
            ProcedureRecord.from_document({"id": "1", "status": "waiting"}),
            ProcedureRecord.from_document({"id": "2", "status": "Waiting"}),
            ProcedureRecord.from_document({"id": "3", "status": "scheduled"}),
            ProcedureRecord.from_document({"id": "4"}),
        ]
        assert aggregator.aggregate([], [], backlog).waiting_list_size == 2


class TestCompute:
    """Test store-backed metric computation."""

    @pytest.mark.asyncio
    async def test_compute_for_day(self, mock_data_store, settings):
        metrics = await MetricsAggregator(mock_data_store, settings).compute(TODAY_ISO)
        # s1: 180/240, s2: 240/240
        assert metrics.date == TODAY_ISO
        assert metrics.today_utilization == pytest.approx(87.5)
        assert metrics.staffing_level == pytest.approx(90.0)
        assert metrics.waiting_list_size == 2

    @pytest.mark.asyncio
    async def test_failure_collapses_to_zero(self, settings):
        store = Mock(spec=DataStoreService)
        store.find = AsyncMock(side_effect=DataStoreError("down"))
        metrics = await MetricsAggregator(store, settings).compute(TODAY_ISO)
        assert metrics == MetricsSnapshot.zero(TODAY_ISO)

    @pytest.mark.asyncio
    async def test_failure_waits_for_remaining_reads(self, settings):
        finished = []

        async def find(collection, filters=None, limit=None):
            if collection == "theatreSessions":
                raise DataStoreError("schedule down")
            await asyncio.sleep(0.01)
            finished.append(collection)
            if collection == "staff":
                raise DataStoreError("staff down")
            return []

        store = Mock(spec=DataStoreService)
        store.find = AsyncMock(side_effect=find)
        metrics = await MetricsAggregator(store, settings).compute(TODAY_ISO)

        assert metrics == MetricsSnapshot.zero(TODAY_ISO)
        assert sorted(finished) == ["generatedProcedures", "staff"]
