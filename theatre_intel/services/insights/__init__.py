"""
Insight generation.
"""

from .service import InsightGenerator, detect_schedule_conflicts

__all__ = ["InsightGenerator", "detect_schedule_conflicts"]
