"""
Custom exceptions for the Theatre Intel system.
"""

from .data_store import DataStoreError, DataStoreTimeoutError, DataStoreResponseError
from .pipeline import ContextPipelineError

__all__ = [
    "DataStoreError",
    "DataStoreTimeoutError",
    "DataStoreResponseError",
    "ContextPipelineError",
]
