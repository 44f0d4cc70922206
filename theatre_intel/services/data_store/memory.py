"""
In-memory document store for local development and tests.
"""

import copy
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .service import FieldFilter


def _matches(doc: Dict[str, Any], flt: FieldFilter) -> bool:
    value = doc.get(flt.field)
    if flt.op == "==":
        return value == flt.value
    if value is None:
        return False
    try:
        if flt.op == ">=":
            return value >= flt.value
        return value <= flt.value
    except TypeError:
        return False


class InMemoryDataStore:
    """Holds collections of documents and answers `find` like the REST store."""

    def __init__(self, collections: Optional[Dict[str, Iterable[Dict[str, Any]]]] = None):
        self._collections: Dict[str, List[Dict[str, Any]]] = {}
        for name, docs in (collections or {}).items():
            self.add(name, docs)

    def add(self, collection: str, docs: Iterable[Dict[str, Any]]) -> None:
        """Append documents to a collection, assigning ids where missing."""
        bucket = self._collections.setdefault(collection, [])
        for doc in docs:
            doc = dict(doc)
            doc.setdefault("id", f"{collection}-{len(bucket) + 1}")
            bucket.append(doc)

    async def find(
        self,
        collection: str,
        filters: Optional[Sequence[FieldFilter]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        docs = [
            copy.deepcopy(doc)
            for doc in self._collections.get(collection, [])
            if all(_matches(doc, f) for f in filters or [])
        ]
        return docs[:limit] if limit is not None else docs
