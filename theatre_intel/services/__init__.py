"""
Service layer for the Theatre Intel system.
"""

from .data_store import DataStoreService, InMemoryDataStore, FieldFilter
from .intent import QueryIntentAnalyzer
from .retrieval import MultiSourceRetriever, MetricsAggregator, HistoricalSummarizer
from .insights import InsightGenerator
from .recommendations import RecommendationEngine
from .formatting import ContextFormatter
from .pipeline import ContextPipeline
from .voice import VoiceCommandMatcher, CommandResult

__all__ = [
    "DataStoreService",
    "InMemoryDataStore",
    "FieldFilter",
    "QueryIntentAnalyzer",
    "MultiSourceRetriever",
    "MetricsAggregator",
    "HistoricalSummarizer",
    "InsightGenerator",
    "RecommendationEngine",
    "ContextFormatter",
    "ContextPipeline",
    "VoiceCommandMatcher",
    "CommandResult",
]
