"""
Context pipeline orchestrator.

Runs intent analysis, retrieval, insight and recommendation generation for
one query and assembles the ContextResult. Retrieval degrades on its own;
a failure in any other stage is a defect and is raised as
ContextPipelineError.
"""

import time
from datetime import datetime, timezone
from typing import Any, Optional

from ...config import Settings, ThresholdConfig, get_settings
from ...core.exceptions import ContextPipelineError
from ...core.models import ContextMetadata, ContextResult, PageContext
from ...utils.logging import get_logger
from ..formatting import ContextFormatter
from ..insights import InsightGenerator
from ..intent import QueryIntentAnalyzer
from ..recommendations import RecommendationEngine
from ..retrieval import MultiSourceRetriever, sources_used

logger = get_logger(__name__)


class ContextPipeline:
    """Builds operational context for a free-text query."""

    def __init__(
        self,
        retriever: MultiSourceRetriever,
        analyzer: Optional[QueryIntentAnalyzer] = None,
        insight_generator: Optional[InsightGenerator] = None,
        recommendation_engine: Optional[RecommendationEngine] = None,
        formatter: Optional[ContextFormatter] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        thresholds = ThresholdConfig()
        self.retriever = retriever
        self.analyzer = analyzer or QueryIntentAnalyzer()
        self.insight_generator = insight_generator or InsightGenerator(thresholds)
        self.recommendation_engine = recommendation_engine or RecommendationEngine(thresholds)
        self.formatter = formatter or ContextFormatter(self.settings.max_context_chars)

    @classmethod
    def from_data_store(cls, data_store, settings: Optional[Settings] = None) -> "ContextPipeline":
        """Wire a pipeline with default components around a document store."""
        settings = settings or get_settings()
        return cls(MultiSourceRetriever(data_store, settings), settings=settings)

    async def build(
        self,
        query: str,
        page_context: Optional[PageContext] = None,
        user_context: Optional[Any] = None,
    ) -> ContextResult:
        """
        Run the pipeline for one query.

        Args:
            query: Non-empty user query
            page_context: Page the user is on, if known
            user_context: Opaque caller data; not used for retrieval

        Returns:
            ContextResult with data, insights, recommendations and metadata

        Raises:
            ContextPipelineError: If a non-retrieval stage fails
        """
        start = time.perf_counter()

        intent = self._run_stage("intent", self.analyzer.analyze, query)
        logger.info(
            f"pipeline: categories={[c.value for c in intent.categories]} "
            f"sentiment={intent.sentiment.value}"
        )

        try:
            data = await self.retriever.retrieve(intent, page_context)
        except Exception as e:
            logger.error(f"pipeline: retrieval stage failed: {e}")
            raise ContextPipelineError(f"retrieval stage failed: {e}", stage="retrieval") from e

        insights = self._run_stage("insights", self.insight_generator.generate, data)
        recommendations = self._run_stage(
            "recommendations", self.recommendation_engine.generate, data, insights
        )

        metadata = ContextMetadata(
            timestamp=datetime.now(timezone.utc).isoformat(),
            query_categories=list(intent.categories),
            sources_used=sources_used(data),
            processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
        )
        logger.info(
            f"pipeline: built context in {metadata.processing_time_ms}ms "
            f"(sources={metadata.sources_used}, insights={len(insights)})"
        )

        return ContextResult(
            page_context=page_context,
            intent=intent,
            data_context=data,
            insights=insights,
            recommendations=recommendations,
            metadata=metadata,
        )

    async def build_text(
        self,
        query: str,
        page_context: Optional[PageContext] = None,
        user_context: Optional[Any] = None,
    ) -> str:
        """Run the pipeline and format the result as a context block."""
        result = await self.build(query, page_context, user_context)
        return self.formatter.format(result)

    def _run_stage(self, stage: str, func, *args):
        try:
            return func(*args)
        except Exception as e:
            logger.error(f"pipeline: {stage} stage failed: {e}")
            raise ContextPipelineError(f"{stage} stage failed: {e}", stage=stage) from e
