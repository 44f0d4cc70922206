"""
Document store access.
"""

from .service import DataStoreService, FieldFilter
from .memory import InMemoryDataStore

__all__ = [
    "DataStoreService",
    "FieldFilter",
    "InMemoryDataStore",
]
