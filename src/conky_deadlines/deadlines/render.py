"""Render a deadline map as conky text.

Output uses conky's inline color markup, e.g.:

    ${color red}Mon, Jan 1st${color}
    ${color lightgrey}[AP] Read chapter 1${color}

Past dates get a red header; items are always light grey.
"""

from __future__ import annotations

from datetime import date

from conky_deadlines.course_config import abbreviation
from conky_deadlines.deadlines.parser import UNDATED, DeadlineMap, format_date_key

DEFAULT_MAX_LEN = 30
ELLIPSIS = "..."

PAST_COLOR = "red"
ITEM_COLOR = "lightgrey"


def colorize(text: str, color: str) -> str:
    return f"${{color {color}}}{text}${{color}}"


def truncate(text: str, max_len: int) -> str:
    """Replace everything from position *max_len* on with '...'.

    Text no longer than *max_len* is returned unchanged. The result can be
    longer than *max_len*, the ellipsis is not counted.
    """
    if len(text) <= max_len:
        return text
    return text[:max_len] + ELLIPSIS


def ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_header(date_key: str) -> str:
    """Format a date key as 'Mon, Jan 2nd'."""
    if date_key == UNDATED:
        return "Undated"
    d = date.fromisoformat(date_key)
    return f"{format_date_key(date_key, '%a, %b')} {d.day}{ordinal_suffix(d.day)}"


def render_report(
    deadlines: DeadlineMap,
    courses: dict[str, str],
    today: date | None = None,
    max_len: int = DEFAULT_MAX_LEN,
) -> list[str]:
    """Render each date group as a header, its item lines, and a blank line.

    Args:
        deadlines: Filtered and sorted deadline map.
        courses: Course folder → abbreviation table.
        today: Reference date for past-due highlighting. Defaults to today.
        max_len: Item text length before truncation.

    Returns:
        Output lines without trailing newlines.
    """
    today_key = (today or date.today()).isoformat()
    lines: list[str] = []

    for date_key, by_course in deadlines.items():
        header = format_header(date_key)
        if date_key != UNDATED and date_key < today_key:
            header = colorize(header, PAST_COLOR)
        lines.append(header)

        for course, items in by_course.items():
            abbr = abbreviation(courses, course)
            for item in items:
                text = truncate(item.text, max_len)
                lines.append(colorize(f"[{abbr}] {text}", ITEM_COLOR))

        lines.append("")

    return lines
