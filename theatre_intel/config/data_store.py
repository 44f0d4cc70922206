"""
Document store configuration.
"""

from typing import Dict, Optional
from pydantic import BaseModel

from .settings import Settings


class DataStoreConfig(BaseModel):
    """Connection settings for the operational document store."""

    base_url: str = "http://localhost:8080"
    token: Optional[str] = None
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "DataStoreConfig":
        """Build the config from application settings."""
        return cls(
            base_url=settings.data_store_url,
            token=settings.data_store_token,
            timeout=settings.data_store_timeout,
        )

    def get_query_url(self, collection: str) -> str:
        """Get the query endpoint URL for a collection."""
        return f"{self.base_url.rstrip('/')}/collections/{collection}/query"

    def get_headers(self) -> Dict[str, str]:
        """Get request headers, including auth when a token is configured."""
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def is_configured(self) -> bool:
        """Check if the document store is configured."""
        return bool(self.base_url)
