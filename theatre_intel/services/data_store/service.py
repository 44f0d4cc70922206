"""
Client for the operational document store.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
import httpx

from ...config import DataStoreConfig, get_settings
from ...core.exceptions import DataStoreError, DataStoreResponseError, DataStoreTimeoutError

OPERATORS = ("==", ">=", "<=")


@dataclass(frozen=True)
class FieldFilter:
    """A single `field op value` condition on a collection query."""

    field: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.op}")

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "op": self.op, "value": self.value}


class DataStoreService:
    """Filtered reads against the document store's REST API."""

    def __init__(self, config: Optional[DataStoreConfig] = None):
        self.config = config or DataStoreConfig.from_settings(get_settings())

    async def _make_request(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Make HTTP request with error handling."""
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.post(url, json=payload, headers=self.config.get_headers())
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException:
            raise DataStoreTimeoutError(f"Request to {url} timed out")
        except httpx.HTTPStatusError as e:
            raise DataStoreResponseError(
                f"HTTP error {e.response.status_code} from {url}",
                status_code=e.response.status_code,
            )
        except ValueError as e:
            raise DataStoreResponseError(f"Invalid JSON from {url}: {e}")
        except httpx.HTTPError as e:
            raise DataStoreError(f"Request to {url} failed: {e}")

    async def find(
        self,
        collection: str,
        filters: Optional[Sequence[FieldFilter]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Read documents from a collection.

        Args:
            collection: Collection name
            filters: Conditions that every returned document satisfies
            limit: Maximum number of documents to return

        Returns:
            Documents as dicts, each carrying its `id`

        Raises:
            DataStoreError: If the request fails or the payload is malformed
        """
        payload: Dict[str, Any] = {"where": [f.to_dict() for f in filters or []]}
        if limit is not None:
            payload["limit"] = limit

        result = await self._make_request(self.config.get_query_url(collection), payload)

        documents = result.get("documents") if isinstance(result, dict) else None
        if not isinstance(documents, list):
            raise DataStoreResponseError(f"Malformed response for collection {collection}")
        return [doc for doc in documents if isinstance(doc, dict)]
