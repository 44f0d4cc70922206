"""
Tests for the context formatter.
"""

import re

import pytest

from theatre_intel.core.enums import (
    Effort,
    Impact,
    InsightType,
    QueryCategory,
    RecommendationCategory,
    Severity,
    ViewType,
)
from theatre_intel.core.models import (
    ContextMetadata,
    ContextResult,
    DataContext,
    Insight,
    MetricsSnapshot,
    PageContext,
    Recommendation,
    ScheduleRecord,
    StaffRecord,
)
from theatre_intel.services.formatting import ContextFormatter

NUMBERED = re.compile(r"^\d+\. ")


def build_result(schedule_count=2, recommendation_count=2, processing_ms=12.0, page=True):
    schedules = [
        ScheduleRecord.from_document({
            "id": f"s{i}", "date": "2026-10-17", "theatre": f"Theatre {i}",
            "startTime": "08:00", "specialty": "urology" if i == 0 else None,
        })
        for i in range(schedule_count)
    ]
    staff = [
        StaffRecord.from_document({"id": "1", "firstName": "Ann", "role": "Scrub Nurse"}),
        StaffRecord.from_document({"id": "2", "firstName": "Bob", "role": "Anaesthetist"}),
        StaffRecord.from_document({"id": "3", "firstName": "Cy", "role": "Scrub Nurse"}),
    ]
    recommendations = [
        Recommendation(
            title=f"Rec {i}", description="d", impact=Impact.HIGH,
            effort=Effort.LOW, category=RecommendationCategory.QUALITY,
        )
        for i in range(recommendation_count)
    ]
    return ContextResult(
        page_context=PageContext(
            current_page="/schedule", view_type=ViewType.SCHEDULE, selected_date="2026-10-17"
        ) if page else None,
        data_context=DataContext(
            target_date="2026-10-17",
            schedules=schedules,
            staff=staff,
            metrics=MetricsSnapshot(
                today_utilization=72.34, staffing_level=90.0, waiting_list_size=12,
                avg_turnover_time=25.0, cancellation_rate=2.5,
            ),
        ),
        insights=[
            Insight(type=InsightType.ALERT, severity=Severity.HIGH, title="Staffing Below Target",
                    description="Current staffing at 50% of target", action="Review bank staff"),
            Insight(type=InsightType.TREND, severity=Severity.MEDIUM, title="Growing Waiting List",
                    description="120 procedures awaiting scheduling"),
        ],
        recommendations=recommendations,
        metadata=ContextMetadata(
            timestamp="2026-10-17T08:00:00+00:00",
            query_categories=[QueryCategory.SCHEDULE, QueryCategory.STAFFING],
            sources_used=["schedule", "staff", "metrics", "historical"],
            processing_time_ms=processing_ms,
        ),
    )


@pytest.fixture
def formatter():
    return ContextFormatter()


class TestSections:
    """Test section content and order."""

    def test_section_order(self, formatter):
        text = formatter.format(build_result())
        headings = [
            "USER LOCATION:", "KEY METRICS:", "PROACTIVE INSIGHTS", "SMART RECOMMENDATIONS",
            "SCHEDULE DATA", "STAFF AVAILABLE", "CONTEXT METADATA:",
        ]
        positions = [text.index(h) for h in headings]
        assert positions == sorted(positions)

    def test_location_omitted_without_page(self, formatter):
        text = formatter.format(build_result(page=False))
        assert "USER LOCATION" not in text
        assert text.startswith("KEY METRICS:")

    def test_metrics_lines(self, formatter):
        lines = formatter.format_metrics(build_result())
        assert "   Today's Utilization: 72.3%" in lines
        assert "   Staffing Level: 90%" in lines
        assert "   Waiting List: 12 procedures" in lines
        assert "   Avg Turnover: 25min" in lines

    def test_insights_listed_with_severity_and_action(self, formatter):
        lines = formatter.format_insights(build_result())
        assert lines[0] == "PROACTIVE INSIGHTS (2):"
        assert lines[1] == "1. [HIGH] Staffing Below Target (alert)"
        assert "   -> Review bank staff" in lines
        assert lines[-1] == "   120 procedures awaiting scheduling"

    def test_staff_grouped_by_role_without_names(self, formatter):
        lines = formatter.format_staff(build_result())
        assert lines == [
            "STAFF AVAILABLE (3 members):",
            "   Anaesthetist: 1 available",
            "   Scrub Nurse: 2 available",
        ]
        assert "Ann" not in formatter.format(build_result())

    def test_metadata_footer(self, formatter):
        lines = formatter.format_metadata(build_result())
        assert lines == [
            "CONTEXT METADATA:",
            "   Processing Time: 12ms",
            "   Data Sources: schedule, staff, metrics, historical",
            "   Query Type: schedule, staffing",
        ]

    def test_empty_context_keeps_sections(self, formatter):
        empty = ContextResult(metadata=ContextMetadata(timestamp="2026-10-17T08:00:00+00:00"))
        text = formatter.format(empty)
        assert "Today's Utilization: 0.0%" in text
        assert "PROACTIVE INSIGHTS (0):" in text
        assert "SCHEDULE DATA (0 sessions):" in text
        assert "STAFF AVAILABLE (0 members):" in text
        assert "Query Type: general" in text


class TestTruncation:
    """Test display caps."""

    def test_schedule_capped_at_ten(self, formatter):
        lines = formatter.format_schedule(build_result(schedule_count=12))
        assert lines[0] == "SCHEDULE DATA (12 sessions for 2026-10-17):"
        assert len([line for line in lines if NUMBERED.match(line)]) == 10
        assert lines.count("... and 2 more") == 1
        assert lines[-1] == "... and 2 more"

    def test_schedule_without_overflow_has_no_suffix(self, formatter):
        lines = formatter.format_schedule(build_result(schedule_count=10))
        assert len([line for line in lines if NUMBERED.match(line)]) == 10
        assert not any(line.startswith("... and") for line in lines)

    def test_schedule_rows(self, formatter):
        lines = formatter.format_schedule(build_result(schedule_count=1))
        assert lines[1] == "1. Theatre 0 - 2026-10-17 08:00"
        assert lines[2] == "   Specialty: urology"

    @pytest.mark.parametrize("count", [0, 1, 3, 4, 9])
    def test_recommendations_capped_at_three(self, formatter, count):
        lines = formatter.format_recommendations(build_result(recommendation_count=count))
        assert len([line for line in lines if NUMBERED.match(line)]) == min(count, 3)

    def test_max_chars_cuts_at_line_boundary(self):
        text = ContextFormatter(max_chars=60).format(build_result())
        assert len(text) <= 60
        full = ContextFormatter().format(build_result())
        assert full.startswith(text)
        assert full[len(text)] == "\n"

    def test_budget_ending_at_line_end_keeps_that_line(self):
        full = ContextFormatter().format(build_result())
        first, second = full.split("\n")[:2]
        budget = len(first) + 1 + len(second)
        assert ContextFormatter(max_chars=budget).format(build_result()) == f"{first}\n{second}"

    def test_budget_shorter_than_first_line_gives_empty_text(self):
        assert ContextFormatter(max_chars=5).format(build_result()) == ""


class TestDeterminism:
    """Test byte-stable output."""

    def test_structurally_equal_results_format_identically(self, formatter):
        first = formatter.format(build_result(processing_ms=5.0))
        second = formatter.format(build_result(processing_ms=250.0))

        def strip_timing(text):
            return [line for line in text.splitlines() if "Processing Time" not in line]

        assert strip_timing(first) == strip_timing(second)
        assert first != second
