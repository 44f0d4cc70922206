"""
Tests for the HTTP surface.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from httpx import AsyncClient, ASGITransport

from theatre_intel.api import create_app
from theatre_intel.api.handlers.context import APOLOGY
from theatre_intel.core.exceptions import ContextPipelineError
from theatre_intel.services.pipeline import ContextPipeline

from .conftest import TODAY_ISO


async def post_context(app, payload):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.post("/assistant/context", json=payload)


@pytest.mark.asyncio
async def test_context_endpoint(pipeline):
    app = create_app(pipeline=pipeline)
    resp = await post_context(app, {
        "message": "show today's schedule",
        "pageContext": {"currentPage": "/schedule", "viewType": "schedule"},
    })

    assert resp.status_code == 200
    body = resp.json()
    assert body["shortcut"] is None
    assert "SCHEDULE DATA (2 sessions for 2026-10-17):" in body["context"]
    assert body["systemPrompt"].startswith("You are TOM")
    assert body["context"] in body["systemPrompt"]
    assert "Current date: Saturday, 17 October 2026" in body["systemPrompt"]

    result = body["result"]
    assert result["dataContext"]["targetDate"] == TODAY_ISO
    assert result["pageContext"]["currentPage"] == "/schedule"
    assert "schedule" in result["metadata"]["queryCategories"]
    assert result["metadata"]["processingTimeMs"] >= 0


@pytest.mark.asyncio
async def test_current_page_shorthand(pipeline):
    app = create_app(pipeline=pipeline)
    resp = await post_context(app, {"message": "staff roster", "currentPage": "/staff"})
    assert resp.status_code == 200
    assert resp.json()["result"]["pageContext"]["currentPage"] == "/staff"


@pytest.mark.asyncio
@pytest.mark.parametrize("message", [None, "", "   "])
async def test_blank_message_rejected(pipeline, message):
    app = create_app(pipeline=pipeline)
    resp = await post_context(app, {"message": message})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Message is required"}


@pytest.mark.asyncio
async def test_voice_navigation_short_circuits(pipeline, mock_data_store):
    app = create_app(pipeline=pipeline)
    resp = await post_context(app, {"message": "Go to staff", "voice": True})

    assert resp.status_code == 200
    body = resp.json()
    assert body["shortcut"]["commandId"] == "go-to-staff"
    assert body["shortcut"]["action"] == {"type": "navigate", "target": "/staff", "data": None}
    assert body["context"] is None
    assert body["result"] is None
    mock_data_store.find.assert_not_called()


@pytest.mark.asyncio
async def test_voice_shortcut_continues_to_pipeline(pipeline):
    app = create_app(pipeline=pipeline)
    resp = await post_context(app, {"message": "check conflicts", "voice": True})

    body = resp.json()
    assert body["shortcut"]["commandId"] == "check-conflicts"
    assert body["context"]


@pytest.mark.asyncio
async def test_pipeline_failure_returns_apology():
    failing = Mock(spec=ContextPipeline)
    failing.build = AsyncMock(side_effect=ContextPipelineError("boom", stage="insights"))
    app = create_app(pipeline=failing)

    resp = await post_context(app, {"message": "anything"})
    assert resp.status_code == 500
    assert resp.json() == {"error": APOLOGY}


@pytest.mark.asyncio
async def test_health_endpoints(pipeline):
    app = create_app(pipeline=pipeline)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        health = await ac.get("/health/")
        live = await ac.get("/health/live")
        ready = await ac.get("/health/ready")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert health.headers["x-content-type-options"] == "nosniff"
    assert health.headers["cache-control"] == "no-store"
    assert live.json() == {"status": "alive"}
    assert ready.json()["status"] in ("ready", "not_ready")


@pytest.mark.asyncio
async def test_command_suggestions(pipeline):
    app = create_app(pipeline=pipeline)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        by_page = await ac.get("/assistant/commands", params={"page": "/staff"})
        by_search = await ac.get("/assistant/commands", params={"q": "utilization"})

    assert [c["id"] for c in by_page.json()["commands"]] == [
        "check-staff-availability", "show-staff-roster", "check-readiness", "check-conflicts",
    ]
    assert [c["id"] for c in by_search.json()["commands"]] == ["show-utilization"]
    assert "Go to staff" in by_page.json()["examples"]
