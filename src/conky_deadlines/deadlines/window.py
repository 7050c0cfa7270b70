"""Look-ahead window and date ordering for deadline maps."""

from __future__ import annotations

from datetime import date, timedelta

from conky_deadlines.deadlines.parser import UNDATED, DeadlineMap

LOOKAHEAD_DAYS = 7


def filter_window(
    deadlines: DeadlineMap,
    today: date | None = None,
    days: int = LOOKAHEAD_DAYS,
) -> DeadlineMap:
    """Drop dates on or after today + *days*. Past dates are always kept."""
    cutoff = ((today or date.today()) + timedelta(days=days)).isoformat()
    # Canonical YYYY-MM-DD keys compare chronologically as strings
    return {
        date_key: by_course
        for date_key, by_course in deadlines.items()
        if date_key == UNDATED or date_key < cutoff
    }


def sort_deadlines(deadlines: DeadlineMap) -> DeadlineMap:
    """Order dates ascending, undated items first."""
    ordered = sorted(deadlines, key=lambda k: (k != UNDATED, k))
    return {date_key: deadlines[date_key] for date_key in ordered}


def upcoming(
    deadlines: DeadlineMap,
    today: date | None = None,
    days: int = LOOKAHEAD_DAYS,
) -> DeadlineMap:
    return sort_deadlines(filter_window(deadlines, today=today, days=days))
