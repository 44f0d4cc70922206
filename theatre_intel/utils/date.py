"""
Date utilities for resolving date words in queries to calendar dates.
"""

import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

import pytz
from dateparser import parse as parse_date

from ..config import get_settings

WEEKDAYS = {
    "monday": 0, "tuesday": 1, "wednesday": 2, "thursday": 3,
    "friday": 4, "saturday": 5, "sunday": 6,
}

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DateResolver:
    """Resolves date entities such as 'tomorrow' or 'friday' relative to today."""

    def __init__(self, timezone: Optional[str] = None, today: Optional[date] = None):
        self.tz = pytz.timezone(timezone or get_settings().timezone)
        self._today = today

    def today(self) -> date:
        """Current date in the configured timezone."""
        if self._today is not None:
            return self._today
        return datetime.now(self.tz).date()

    def today_iso(self) -> str:
        return self.today().isoformat()

    def resolve(self, token: str) -> Optional[str]:
        """
        Resolve one date token to an ISO date.

        Args:
            token: Date word or explicit date taken from a query

        Returns:
            Date in YYYY-MM-DD format or None if the token is not understood
        """
        lowered = (token or "").strip().lower()
        if not lowered:
            return None

        today = self.today()
        if lowered in ("today", "this week"):
            return today.isoformat()
        if lowered == "tomorrow":
            return (today + timedelta(days=1)).isoformat()
        if lowered == "next week":
            return (today + timedelta(days=7 - today.weekday())).isoformat()
        if lowered in WEEKDAYS:
            days_ahead = (WEEKDAYS[lowered] - today.weekday()) % 7
            return (today + timedelta(days=days_ahead)).isoformat()
        if ISO_DATE.match(lowered):
            try:
                return date.fromisoformat(lowered).isoformat()
            except ValueError:
                return None

        try:
            base = datetime.combine(today, datetime.min.time())
            parsed = parse_date(
                token,
                languages=["en"],
                settings={"DATE_ORDER": "DMY", "RELATIVE_BASE": base},
            )
        except Exception:
            return None
        if parsed is None:
            return None
        return parsed.date().isoformat()

    def resolve_first(self, tokens: Iterable[str]) -> Optional[str]:
        """Resolve the first token that can be understood."""
        for token in tokens:
            resolved = self.resolve(token)
            if resolved:
                return resolved
        return None

    def window(self, days: int, end: Optional[date] = None) -> List[str]:
        """ISO dates of the trailing window ending the day before `end`."""
        end = end or self.today()
        return [(end - timedelta(days=offset)).isoformat() for offset in range(days, 0, -1)]
