"""
Multi-source data retrieval and aggregation.
"""

from .service import MultiSourceRetriever, sources_used
from .metrics import MetricsAggregator
from .historical import HistoricalSummarizer

__all__ = [
    "MultiSourceRetriever",
    "MetricsAggregator",
    "HistoricalSummarizer",
    "sources_used",
]
