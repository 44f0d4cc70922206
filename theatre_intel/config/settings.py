"""
Application settings and configuration.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Theatre Intel"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)

    # Document store
    data_store_url: str = Field(default="http://localhost:8080")
    data_store_token: Optional[str] = Field(default=None)
    data_store_timeout: float = Field(default=10.0)
    schedule_collection: str = Field(default="theatreSessions")
    staff_collection: str = Field(default="staff")
    backlog_collection: str = Field(default="generatedProcedures")
    resources_collection: str = Field(default="theatres")

    # Retrieval
    staff_fetch_limit: int = Field(default=100)
    backlog_fetch_limit: int = Field(default=50)

    # Metrics
    staffing_target_headcount: int = Field(default=100)
    avg_turnover_minutes: float = Field(default=25.0)
    cancellation_rate: float = Field(default=2.5)
    metrics_follow_target_date: bool = Field(default=False)
    historical_window_days: int = Field(default=7)

    # Formatting
    max_context_chars: int = Field(default=8000)

    # Timezone
    timezone: str = Field(default="Europe/London")

    # Logging
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
