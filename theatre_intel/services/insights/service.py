"""
Insight generator.

Fixed threshold rules evaluated independently against a DataContext.
Insights come out in rule order, not sorted by severity.
"""

from typing import List, Optional, Sequence

from ...config import ThresholdConfig
from ...core.enums import InsightType, Severity
from ...core.models import DataContext, Insight, ScheduleConflict, ScheduleRecord


def detect_schedule_conflicts(schedules: Sequence[ScheduleRecord]) -> List[ScheduleConflict]:
    """Every pair of sessions sharing theatre, date and start time."""
    conflicts = []
    for i in range(len(schedules) - 1):
        first = schedules[i]
        if not first.start_time:
            continue
        for second in schedules[i + 1:]:
            if (
                first.theatre == second.theatre
                and first.date == second.date
                and first.start_time == second.start_time
            ):
                conflicts.append(ScheduleConflict(
                    theatre=first.theatre,
                    date=first.date,
                    time=first.start_time,
                    sessions=[first.id, second.id],
                ))
    return conflicts


class InsightGenerator:
    """Applies the insight rules."""

    def __init__(self, thresholds: Optional[ThresholdConfig] = None):
        self.thresholds = thresholds or ThresholdConfig()

    def generate(self, data: DataContext) -> List[Insight]:
        t = self.thresholds
        metrics = data.metrics
        insights: List[Insight] = []

        if metrics.today_utilization > t.capacity_critical_utilization:
            insights.append(Insight(
                type=InsightType.ALERT,
                severity=Severity.HIGH,
                title="Theatre Capacity Critical",
                description=f"Today's utilization is {metrics.today_utilization:.1f}% - near maximum capacity",
                action="Consider adding evening sessions or rescheduling non-urgent cases",
            ))

        if metrics.staffing_level < t.staffing_below_target:
            insights.append(Insight(
                type=InsightType.ALERT,
                severity=Severity.HIGH,
                title="Staffing Below Target",
                description=f"Current staffing at {metrics.staffing_level:.0f}% of target",
                action="Review bank/agency staff availability",
            ))

        if metrics.waiting_list_size > t.waiting_list_growing:
            insights.append(Insight(
                type=InsightType.TREND,
                severity=Severity.MEDIUM,
                title="Growing Waiting List",
                description=f"{metrics.waiting_list_size} procedures awaiting scheduling",
                action="Prioritize high-urgency cases and optimize scheduling",
            ))

        conflicts = detect_schedule_conflicts(data.schedules)
        if conflicts:
            insights.append(Insight(
                type=InsightType.ALERT,
                severity=Severity.HIGH,
                title="Schedule Conflicts Detected",
                description=f"Found {len(conflicts)} potential scheduling conflicts",
                data=conflicts,
                action="Review and resolve conflicts immediately",
            ))

        if metrics.today_utilization < t.capacity_available_utilization:
            insights.append(Insight(
                type=InsightType.OPPORTUNITY,
                severity=Severity.LOW,
                title="Available Theatre Capacity",
                description=f"Current utilization is {metrics.today_utilization:.1f}% - capacity available",
                action="Consider scheduling additional cases from waiting list",
            ))

        if metrics.cancellation_rate > t.cancellation_rate_elevated:
            insights.append(Insight(
                type=InsightType.ANOMALY,
                severity=Severity.MEDIUM,
                title="Elevated Cancellation Rate",
                description=(
                    f"Cancellation rate at {metrics.cancellation_rate:g}% "
                    f"(target: <{t.cancellation_rate_target:g}%)"
                ),
                action="Investigate cancellation reasons and implement preventive measures",
            ))

        return insights
