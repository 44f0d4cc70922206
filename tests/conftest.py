"""
Pytest configuration and fixtures.
"""

from datetime import date
from unittest.mock import AsyncMock, Mock

import pytest

from theatre_intel.config import Settings
from theatre_intel.services.data_store import DataStoreService, InMemoryDataStore
from theatre_intel.services.pipeline import ContextPipeline
from theatre_intel.services.retrieval import MultiSourceRetriever
from theatre_intel.utils.date import DateResolver

# A Saturday
TODAY = date(2026, 10, 17)
TODAY_ISO = "2026-10-17"
TOMORROW_ISO = "2026-10-18"


def make_staff(count, role="Scrub Nurse"):
    return [
        {"id": f"staff-{role}-{i}", "firstName": "Sam", "lastName": f"Jones{i}", "role": role}
        for i in range(count)
    ]


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def date_resolver():
    return DateResolver("Europe/London", today=TODAY)


@pytest.fixture
def schedule_docs():
    return [
        {"id": "s1", "date": TODAY_ISO, "theatreId": "Theatre 1", "sessionType": "AM",
         "startTime": "08:00", "endTime": "12:00", "bookedMinutes": 180,
         "specialtyName": "orthopaedics", "surgeon": "Mr Patel"},
        {"id": "s2", "date": TODAY_ISO, "theatreId": "Theatre 2", "sessionType": "PM",
         "startTime": "13:00", "endTime": "17:00", "bookedMinutes": 240},
        {"id": "s3", "date": TOMORROW_ISO, "theatreId": "Theatre 1", "sessionType": "AM",
         "startTime": "08:00", "bookedMinutes": 120},
        {"id": "h1", "date": "2026-10-15", "theatreId": "Theatre 1", "startTime": "08:30",
         "issues": ["Late starts"]},
        {"id": "h2", "date": "2026-10-16", "theatreId": "Theatre 2", "startTime": "08:15",
         "delayReason": "Late starts"},
    ]


@pytest.fixture
def memory_store(schedule_docs):
    return InMemoryDataStore({
        "theatreSessions": schedule_docs,
        "staff": make_staff(60, "Scrub Nurse") + make_staff(30, "Anaesthetist"),
        "generatedProcedures": [
            {"id": "p1", "name": "Hip replacement", "status": "waiting", "priority": "P2"},
            {"id": "p2", "name": "Knee arthroscopy", "status": "waiting"},
            {"id": "p3", "name": "Cataract", "status": "scheduled"},
        ],
        "theatres": [
            {"id": "t1", "name": "Theatre 1", "equipment": ["C-arm"]},
            {"id": "t2", "name": "Theatre 2"},
        ],
    })


@pytest.fixture
def mock_data_store(memory_store):
    """Document store mock backed by in-memory collections."""
    store = Mock(spec=DataStoreService)
    store.find = AsyncMock(side_effect=memory_store.find)
    return store


@pytest.fixture
def retriever(mock_data_store, settings, date_resolver):
    return MultiSourceRetriever(mock_data_store, settings, date_resolver)


@pytest.fixture
def pipeline(retriever, settings):
    return ContextPipeline(retriever, settings=settings)
