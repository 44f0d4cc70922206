"""
Context formatter.

Serializes a ContextResult into the text block injected into the language
model prompt. Sections always appear in the same order and are rendered
even when empty. Output depends only on the result passed in.
"""

from collections import Counter
from typing import List, Optional

from ...core.models import ContextResult

MAX_RECOMMENDATIONS = 3
MAX_SCHEDULE_ROWS = 10
INDENT = "   "


class ContextFormatter:
    """Formats a ContextResult as a bounded text block."""

    def __init__(self, max_chars: Optional[int] = None):
        self.max_chars = max_chars

    def format(self, result: ContextResult) -> str:
        sections = [
            self.format_location(result),
            self.format_metrics(result),
            self.format_insights(result),
            self.format_recommendations(result),
            self.format_schedule(result),
            self.format_staff(result),
            self.format_metadata(result),
        ]
        text = "\n\n".join("\n".join(lines) for lines in sections if lines)
        return self._truncate(text)

    def format_location(self, result: ContextResult) -> List[str]:
        page = result.page_context
        if page is None:
            return []
        lines = [
            f"USER LOCATION: {page.current_page or 'unknown'}",
            f"{INDENT}View Type: {page.view_type.value}",
        ]
        if page.selected_date:
            lines.append(f"{INDENT}Viewing Date: {page.selected_date}")
        if page.selected_theatre:
            lines.append(f"{INDENT}Viewing Theatre: {page.selected_theatre}")
        if page.selected_specialty:
            lines.append(f"{INDENT}Viewing Specialty: {page.selected_specialty}")
        return lines

    def format_metrics(self, result: ContextResult) -> List[str]:
        metrics = result.data_context.metrics
        return [
            "KEY METRICS:",
            f"{INDENT}Today's Utilization: {metrics.today_utilization:.1f}%",
            f"{INDENT}Staffing Level: {metrics.staffing_level:.0f}%",
            f"{INDENT}Waiting List: {metrics.waiting_list_size} procedures",
            f"{INDENT}Avg Turnover: {metrics.avg_turnover_time:g}min",
            f"{INDENT}Cancellation Rate: {metrics.cancellation_rate:g}%",
        ]

    def format_insights(self, result: ContextResult) -> List[str]:
        lines = [f"PROACTIVE INSIGHTS ({len(result.insights)}):"]
        if not result.insights:
            lines.append(f"{INDENT}None")
        for i, insight in enumerate(result.insights, start=1):
            lines.append(
                f"{i}. [{insight.severity.value.upper()}] {insight.title} ({insight.type.value})"
            )
            lines.append(f"{INDENT}{insight.description}")
            if insight.action:
                lines.append(f"{INDENT}-> {insight.action}")
        return lines

    def format_recommendations(self, result: ContextResult) -> List[str]:
        recommendations = result.recommendations
        shown = recommendations[:MAX_RECOMMENDATIONS]
        lines = [f"SMART RECOMMENDATIONS ({len(shown)} of {len(recommendations)}):"]
        if not shown:
            lines.append(f"{INDENT}None")
        for i, rec in enumerate(shown, start=1):
            lines.append(
                f"{i}. {rec.title} (Impact: {rec.impact.value}, Effort: {rec.effort.value}, "
                f"Category: {rec.category.value})"
            )
            lines.append(f"{INDENT}{rec.description}")
        return lines

    def format_schedule(self, result: ContextResult) -> List[str]:
        schedules = result.data_context.schedules
        heading = f"SCHEDULE DATA ({len(schedules)} sessions"
        if result.data_context.target_date:
            heading += f" for {result.data_context.target_date}"
        lines = [heading + "):"]
        if not schedules:
            lines.append(f"{INDENT}No sessions found")
        for i, session in enumerate(schedules[:MAX_SCHEDULE_ROWS], start=1):
            row = f"{i}. {session.theatre} - {session.date}"
            if session.start_time:
                row += f" {session.start_time}"
            if session.session_type:
                row += f" ({session.session_type})"
            lines.append(row)
            if session.specialty:
                lines.append(f"{INDENT}Specialty: {session.specialty}")
            if session.surgeon:
                lines.append(f"{INDENT}Surgeon: {session.surgeon}")
        if len(schedules) > MAX_SCHEDULE_ROWS:
            lines.append(f"... and {len(schedules) - MAX_SCHEDULE_ROWS} more")
        return lines

    def format_staff(self, result: ContextResult) -> List[str]:
        staff = result.data_context.staff
        lines = [f"STAFF AVAILABLE ({len(staff)} members):"]
        if not staff:
            lines.append(f"{INDENT}No staff records")
        by_role = Counter(member.role for member in staff)
        for role in sorted(by_role):
            lines.append(f"{INDENT}{role}: {by_role[role]} available")
        return lines

    def format_metadata(self, result: ContextResult) -> List[str]:
        metadata = result.metadata
        categories = [c.value for c in metadata.query_categories]
        return [
            "CONTEXT METADATA:",
            f"{INDENT}Processing Time: {metadata.processing_time_ms:.0f}ms",
            f"{INDENT}Data Sources: {', '.join(metadata.sources_used) or 'none'}",
            f"{INDENT}Query Type: {', '.join(categories) or 'general'}",
        ]

    def _truncate(self, text: str) -> str:
        if not self.max_chars or len(text) <= self.max_chars:
            return text
        # keep only whole lines; a newline right after the budget still counts
        head = text[: self.max_chars + 1]
        if "\n" not in head:
            return ""
        return head.rsplit("\n", 1)[0].rstrip()
