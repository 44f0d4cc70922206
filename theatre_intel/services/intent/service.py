"""
Query intent analyzer.

Keyword and regex rules that tag a query with topic categories, pull out
coarse date/time/specialty entities, and label its tone.
"""

import re
from typing import List, Pattern, Tuple

from ...core.enums import QueryCategory, Sentiment
from ...core.models import QueryEntities, QueryIntent

CATEGORY_RULES: Tuple[Tuple[QueryCategory, Pattern], ...] = (
    (QueryCategory.SCHEDULE, re.compile(r"schedule|session|list|case|theatre|tomorrow|today")),
    (QueryCategory.STAFFING, re.compile(r"staff|team|people|nurse|surgeon|anaesthetist|available|roster")),
    (QueryCategory.PROCEDURES, re.compile(r"procedure|operation|surgery|opcs")),
    (QueryCategory.ANALYTICS, re.compile(r"analy[sz]e|analysis|report|trend|pattern|utili[sz]ation|metric|kpi")),
    (QueryCategory.CONFLICTS, re.compile(r"conflict|issue|problem|clash|overlap|alert")),
    (QueryCategory.WAITING_LIST, re.compile(r"wait|delay|backlog|queue")),
    (QueryCategory.FINANCIAL, re.compile(r"cost|budget|financial|tariff|spend")),
    (QueryCategory.RESOURCES, re.compile(r"equipment|supply|inventory|stock")),
    (QueryCategory.RECOMMENDATIONS, re.compile(r"insight|suggest|recommend|optimi[sz]e|improve|what should")),
)

DATE_PATTERN = re.compile(
    r"\b(?:next week|this week|tomorrow|today|monday|tuesday|wednesday|thursday|friday|saturday|sunday"
    r"|\d{4}-\d{2}-\d{2})\b"
)
TIME_PATTERN = re.compile(r"\b\d{1,2}:\d{2}\b|\b\d{1,2}\s?(?:am|pm)\b")

SPECIALTIES = (
    "orthopaedics", "cardio", "neuro", "general surgery",
    "urology", "gynae", "ent", "plastics",
)

# First match wins
SENTIMENT_RULES: Tuple[Tuple[Sentiment, Pattern], ...] = (
    (Sentiment.URGENT, re.compile(r"\b(?:urgent|emergency|critical|asap|immediately|now)\b")),
    (Sentiment.ANALYTICAL, re.compile(r"analy[sz]e|analysis|report|statistics|trend")),
    (Sentiment.CASUAL, re.compile(r"\b(?:hi|hello|thanks|please)\b|could you")),
)

ACTION_VERBS = (
    ("show", "display"),
    ("check", "verify"),
    ("find", "search"),
    ("compare", "compare"),
    ("predict", "forecast"),
)


class QueryIntentAnalyzer:
    """Turns a raw query into a QueryIntent. Never raises on text input."""

    def analyze(self, query: str) -> QueryIntent:
        """
        Classify a free-text query.

        Args:
            query: Non-empty query text; empty input is rejected upstream

        Returns:
            QueryIntent with all matching categories, entities, tone and actions
        """
        text = (query or "").lower()
        return QueryIntent(
            categories=self.detect_categories(text),
            entities=self.extract_entities(text),
            sentiment=self.detect_sentiment(text),
            explicit_actions=self.detect_actions(text),
        )

    def detect_categories(self, text: str) -> List[QueryCategory]:
        return [category for category, pattern in CATEGORY_RULES if pattern.search(text)]

    def extract_entities(self, text: str) -> QueryEntities:
        return QueryEntities(
            dates=DATE_PATTERN.findall(text),
            times=[t.replace(" ", "") for t in TIME_PATTERN.findall(text)],
            specialties=[s for s in SPECIALTIES if self._has_specialty(text, s)],
        )

    def detect_sentiment(self, text: str) -> Sentiment:
        for sentiment, pattern in SENTIMENT_RULES:
            if pattern.search(text):
                return sentiment
        return Sentiment.NEUTRAL

    def detect_actions(self, text: str) -> List[str]:
        return [action for verb, action in ACTION_VERBS if verb in text]

    @staticmethod
    def _has_specialty(text: str, specialty: str) -> bool:
        # Short names like "ent" would otherwise match inside "patient"
        if len(specialty) <= 3:
            return re.search(rf"\b{re.escape(specialty)}\b", text) is not None
        return specialty in text
