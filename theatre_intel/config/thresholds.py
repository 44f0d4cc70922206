"""
Thresholds for insight and recommendation rules.
"""

from typing import Dict, Optional
from pydantic import BaseModel, Field


class ThresholdConfig(BaseModel):
    """Rule thresholds. All comparisons against these values are strict."""

    # Insight rules
    capacity_critical_utilization: float = 95.0
    staffing_below_target: float = 80.0
    waiting_list_growing: int = 100
    capacity_available_utilization: float = 70.0
    cancellation_rate_elevated: float = 5.0
    cancellation_rate_target: float = 3.0

    # Recommendation rules
    turnover_minutes_high: float = 30.0
    turnover_minutes_target: float = 20.0
    staffing_over_target: float = 105.0

    # Planned session length by session type, in minutes
    session_durations: Dict[str, int] = Field(default_factory=lambda: {
        "AM": 240,
        "PM": 240,
        "ALL_DAY": 480,
        "EVENING": 180,
    })
    default_session_minutes: int = 240

    def session_minutes(self, session_type: Optional[str]) -> int:
        """Get the planned length of a session type."""
        if not session_type:
            return self.default_session_minutes
        key = session_type.strip().upper().replace("-", "_").replace(" ", "_")
        return self.session_durations.get(key, self.default_session_minutes)
