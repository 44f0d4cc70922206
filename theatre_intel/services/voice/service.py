"""
Voice command matcher.

A fixed table of spoken shortcuts checked before the context pipeline.
A match returns a canned response and an action for the front-end; most
commands still let the query continue to the pipeline for a full answer.
"""

import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional, Tuple

from ...utils.date import DateResolver


@dataclass
class CommandAction:
    """What the front-end should do for a matched command."""

    type: str  # "navigate", "display", "query", "none"
    target: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


@dataclass
class CommandResult:
    handled: bool
    command_id: Optional[str] = None
    response: Optional[str] = None
    action: Optional[CommandAction] = None
    continue_to_pipeline: bool = True


@dataclass
class VoiceCommand:
    id: str
    category: str
    patterns: Tuple[str, ...]
    response: str
    action: CommandAction
    description: str
    examples: List[str] = field(default_factory=list)
    continue_to_pipeline: bool = True

    def matches(self, transcript: str) -> bool:
        return any(re.search(p, transcript) for p in self.patterns)


VOICE_COMMANDS: Tuple[VoiceCommand, ...] = (
    VoiceCommand(
        id="show-schedule-today",
        category="schedule",
        patterns=(r"show.*today", r"today.*schedule", r"what.*today", r"schedule.*today"),
        response="Loading today's theatre schedule for {today_long}...",
        action=CommandAction(type="query", target="schedule", data={"date": "{today}"}),
        description="Show today's theatre schedule",
        examples=["Show me today's schedule", "What's on today?"],
    ),
    VoiceCommand(
        id="show-schedule-tomorrow",
        category="schedule",
        patterns=(r"show.*tomorrow", r"tomorrow.*schedule", r"what.*tomorrow", r"schedule.*tomorrow"),
        response="Loading tomorrow's theatre schedule for {tomorrow_long}...",
        action=CommandAction(type="query", target="schedule", data={"date": "{tomorrow}"}),
        description="Show tomorrow's theatre schedule",
        examples=["Show me tomorrow", "Tomorrow's schedule"],
    ),
    VoiceCommand(
        id="check-staff-availability",
        category="staff",
        patterns=(r"staff.*available", r"who.*available", r"check.*staff", r"available.*staff"),
        response="Checking current staff availability...",
        action=CommandAction(type="query", target="staff", data={"filter": "available"}),
        description="Check staff availability",
        examples=["Who's available?", "Check staff availability"],
    ),
    VoiceCommand(
        id="show-staff-roster",
        category="staff",
        patterns=(r"staff.*roster", r"show.*roster", r"roster.*today", r"who.*working"),
        response="Loading staff roster...",
        action=CommandAction(type="navigate", target="/staff"),
        description="Show staff roster",
        examples=["Show me the roster", "Who's working today?"],
    ),
    VoiceCommand(
        id="check-readiness",
        category="status",
        patterns=(r"check.*readiness", r"ready.*theatre", r"readiness.*check", r"theatre.*ready"),
        response="Running theatre readiness check...",
        action=CommandAction(type="query", target="readiness"),
        description="Check theatre readiness status",
        examples=["Check readiness", "Theatre readiness"],
    ),
    VoiceCommand(
        id="check-conflicts",
        category="status",
        patterns=(r"check.*conflict", r"any.*conflict", r"conflict.*check", r"schedule.*conflict"),
        response="Scanning for schedule conflicts...",
        action=CommandAction(type="query", target="conflicts"),
        description="Check for schedule conflicts",
        examples=["Any conflicts?", "Check for conflicts"],
    ),
    VoiceCommand(
        id="show-utilization",
        category="analytics",
        patterns=(r"show.*utili[sz]ation", r"utili[sz]ation.*rate", r"capacity.*usage", r"how.*busy"),
        response="Analyzing theatre utilization...",
        action=CommandAction(type="query", target="utilization"),
        description="Show theatre utilization",
        examples=["Show utilization", "How busy are we?"],
    ),
    VoiceCommand(
        id="show-metrics",
        category="analytics",
        patterns=(r"show.*metrics", r"key.*metrics", r"dashboard", r"overview"),
        response="Loading key performance metrics...",
        action=CommandAction(type="query", target="metrics"),
        description="Show key metrics",
        examples=["Show metrics", "Give me an overview"],
    ),
    VoiceCommand(
        id="go-to-schedule",
        category="navigation",
        patterns=(r"^go to schedule", r"^navigate.*schedule", r"^open schedule"),
        response="Opening theatre schedule...",
        action=CommandAction(type="navigate", target="/schedule"),
        description="Open the schedule page",
        examples=["Go to schedule"],
        continue_to_pipeline=False,
    ),
    VoiceCommand(
        id="go-to-staff",
        category="navigation",
        patterns=(r"^go to staff", r"^navigate.*staff", r"^open staff"),
        response="Opening staff management...",
        action=CommandAction(type="navigate", target="/staff"),
        description="Open the staff page",
        examples=["Go to staff"],
        continue_to_pipeline=False,
    ),
    VoiceCommand(
        id="go-to-procedures",
        category="navigation",
        patterns=(r"^go to procedures", r"^navigate.*procedures", r"^open.*procedures", r"^waiting list"),
        response="Opening procedures and waiting list...",
        action=CommandAction(type="navigate", target="/procedures"),
        description="Open the procedures page",
        examples=["Go to procedures", "Waiting list"],
        continue_to_pipeline=False,
    ),
    VoiceCommand(
        id="help",
        category="general",
        patterns=(r"^help$", r"what can you do", r"show.*commands", r"available.*commands"),
        response="Here are some quick voice commands you can use:\n\n{command_list}\n\n"
                 "Or just ask me anything about theatre operations!",
        action=CommandAction(type="display", target="help"),
        description="List voice commands",
        examples=["Help", "What can you do?"],
        continue_to_pipeline=False,
    ),
    VoiceCommand(
        id="quick-status",
        category="status",
        patterns=(r"^status$", r"^quick.*status", r"^how.*doing", r"^everything ok"),
        response="Getting quick status overview...",
        action=CommandAction(type="query", target="status"),
        description="Quick status overview",
        examples=["Status", "Everything OK?"],
    ),
)


PAGE_SUGGESTIONS = (
    ("/schedule", "schedule"),
    ("/staff", "staff"),
    ("/analytics", "analytics"),
)


class VoiceCommandMatcher:
    """Matches transcripts against the command table, first match wins."""

    def __init__(
        self,
        commands: Tuple[VoiceCommand, ...] = VOICE_COMMANDS,
        date_resolver: Optional[DateResolver] = None,
    ):
        self.commands = commands
        self.date_resolver = date_resolver or DateResolver()

    def match(self, transcript: str) -> CommandResult:
        text = (transcript or "").strip().lower()
        if not text:
            return CommandResult(handled=False)
        for command in self.commands:
            if command.matches(text):
                return self._execute(command)
        return CommandResult(handled=False)

    def commands_by_category(self, category: str) -> List[VoiceCommand]:
        return [c for c in self.commands if c.category == category]

    def all_examples(self) -> List[str]:
        return [example for c in self.commands for example in c.examples if example]

    def search(self, query: str) -> List[VoiceCommand]:
        """Commands whose description, examples or category mention the query."""
        needle = (query or "").lower()
        return [
            c for c in self.commands
            if needle in c.description.lower()
            or any(needle in example.lower() for example in c.examples)
            or needle in c.category.lower()
        ]

    def suggest_for_page(self, current_page: Optional[str]) -> List[VoiceCommand]:
        """Up to five commands relevant to the page the user is on."""
        page = current_page or ""
        suggestions: List[VoiceCommand] = []
        for prefix, category in PAGE_SUGGESTIONS:
            if prefix in page:
                suggestions.extend(self.commands_by_category(category)[:3])
                break
        suggestions.extend(self.commands_by_category("status")[:2])
        return suggestions[:5]

    def _execute(self, command: VoiceCommand) -> CommandResult:
        values = self._template_values()
        data = None
        if command.action.data is not None:
            data = {k: str(v).format(**values) for k, v in command.action.data.items()}
        return CommandResult(
            handled=True,
            command_id=command.id,
            response=command.response.format(**values),
            action=CommandAction(type=command.action.type, target=command.action.target, data=data),
            continue_to_pipeline=command.continue_to_pipeline,
        )

    def _template_values(self) -> Dict[str, str]:
        today = self.date_resolver.today()
        tomorrow = today + timedelta(days=1)
        command_list = "\n".join(
            f"- {c.description}: \"{c.examples[0]}\"" for c in self.commands if c.examples
        )
        return {
            "today": today.isoformat(),
            "tomorrow": tomorrow.isoformat(),
            "today_long": f"{today:%A}, {today.day} {today:%B}",
            "tomorrow_long": f"{tomorrow:%A}, {tomorrow.day} {tomorrow:%B}",
            "command_list": command_list,
        }
