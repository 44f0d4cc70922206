"""
FastAPI application factory and configuration.
"""

from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import get_settings
from ..services.pipeline import ContextPipeline
from ..utils.logging import configure_logging
from .middleware import SecurityHeaders, LoggingMiddleware
from .handlers import HealthHandler, ContextHandler


def create_app(pipeline: Optional[ContextPipeline] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Operational context intelligence for theatre scheduling",
        version=settings.app_version,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    health_handler = HealthHandler()
    context_handler = ContextHandler(pipeline=pipeline)

    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(context_handler.router, prefix="/assistant", tags=["assistant"])

    return app
