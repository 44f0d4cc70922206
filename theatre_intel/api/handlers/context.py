"""
Assistant context handler.

Accepts the chat front-end's request, lets the voice shortcut table answer
navigation commands directly, and otherwise runs the context pipeline and
returns the context block with the system prompt built around it.
"""

from typing import Any, Optional
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...config import get_settings
from ...core.exceptions import ContextPipelineError
from ...core.models import PageContext
from ...prompts import build_system_prompt
from ...services.data_store import DataStoreService
from ...services.pipeline import ContextPipeline
from ...services.voice import VoiceCommandMatcher
from ...utils.logging import get_logger

logger = get_logger("api.context")

APOLOGY = (
    "I apologize, but I'm having trouble pulling together the theatre data right now. "
    "Please try again, or ask me about specific schedules, staff availability, or operations."
)


class AssistantRequest(BaseModel):
    """Inbound chat request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    message: Optional[str] = None
    page_context: Optional[PageContext] = None
    current_page: Optional[str] = None
    user_context: Optional[Any] = None
    voice: bool = False

    def effective_page_context(self) -> Optional[PageContext]:
        if self.page_context is not None:
            return self.page_context
        if self.current_page:
            return PageContext(current_page=self.current_page)
        return None


class ContextHandler:
    """Handler for assistant context endpoints."""

    def __init__(
        self,
        pipeline: Optional[ContextPipeline] = None,
        matcher: Optional[VoiceCommandMatcher] = None,
    ):
        self.settings = get_settings()
        self.pipeline = pipeline or ContextPipeline.from_data_store(DataStoreService(), self.settings)
        self.matcher = matcher or VoiceCommandMatcher()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup assistant routes."""

        @self.router.get("/commands")
        async def list_commands(page: Optional[str] = None, q: Optional[str] = None):
            """Voice commands worth suggesting on a page, or matching a search."""
            commands = self.matcher.search(q) if q else self.matcher.suggest_for_page(page)
            return {
                "commands": [
                    {
                        "id": c.id,
                        "category": c.category,
                        "description": c.description,
                        "examples": c.examples,
                    }
                    for c in commands
                ],
                "examples": self.matcher.all_examples(),
            }

        @self.router.post("/context")
        async def build_context(request: AssistantRequest):
            message = (request.message or "").strip()
            if not message:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"error": "Message is required"},
                )

            shortcut = None
            if request.voice:
                command = self.matcher.match(message)
                if command.handled:
                    shortcut = {
                        "commandId": command.command_id,
                        "response": command.response,
                        "action": {
                            "type": command.action.type,
                            "target": command.action.target,
                            "data": command.action.data,
                        },
                    }
                    if not command.continue_to_pipeline:
                        return {"shortcut": shortcut, "context": None, "systemPrompt": None, "result": None}

            try:
                result = await self.pipeline.build(
                    message, request.effective_page_context(), request.user_context
                )
            except ContextPipelineError as e:
                logger.error(f"context: pipeline failed at {e.stage}: {e}")
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"error": APOLOGY},
                )

            context = self.pipeline.formatter.format(result)
            today = self.pipeline.retriever.date_resolver.today()
            return {
                "shortcut": shortcut,
                "context": context,
                "systemPrompt": build_system_prompt(context, today),
                "result": result.model_dump(mode="json", by_alias=True),
            }
