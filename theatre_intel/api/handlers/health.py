"""
Health check handler.
"""

from datetime import datetime
from fastapi import APIRouter
from pydantic import BaseModel

from ...config import DataStoreConfig, get_settings


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    service: str
    timestamp: str
    version: str
    uptime: float


class HealthHandler:
    """Handler for health check endpoints."""

    def __init__(self):
        self.settings = get_settings()
        self.data_store = DataStoreConfig.from_settings(self.settings)
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            return HealthResponse(
                status="healthy",
                service=self.settings.app_name,
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=(datetime.now() - self.start_time).total_seconds(),
            )

        @self.router.get("/ready")
        async def readiness_check():
            """Ready once a document store is configured."""
            if not self.data_store.is_configured():
                return {"status": "not_ready", "reason": "data store not configured"}
            return {"status": "ready"}

        @self.router.get("/live")
        async def liveness_check():
            return {"status": "alive"}
