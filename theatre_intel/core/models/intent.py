"""
Query understanding and page context models.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..enums import QueryCategory, Sentiment, ViewType


class QueryEntities(BaseModel):
    """Coarse entities pulled out of a query, in order of appearance."""

    model_config = ConfigDict(frozen=True)

    dates: List[str] = Field(default_factory=list)
    times: List[str] = Field(default_factory=list)
    specialties: List[str] = Field(default_factory=list)


class QueryIntent(BaseModel):
    """What a free-text query is asking about."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    categories: List[QueryCategory] = Field(default_factory=list)
    entities: QueryEntities = Field(default_factory=QueryEntities)
    sentiment: Sentiment = Sentiment.NEUTRAL
    explicit_actions: List[str] = Field(default_factory=list)

    def has_category(self, category: QueryCategory) -> bool:
        """Check whether the query was tagged with a category."""
        return category in self.categories


class PageContext(BaseModel):
    """Where the user is in the application when asking."""

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    current_page: str = ""
    view_type: ViewType = ViewType.HOME
    filters: Optional[Dict[str, Any]] = None
    selected_date: Optional[str] = None
    selected_theatre: Optional[str] = None
    selected_specialty: Optional[str] = None
