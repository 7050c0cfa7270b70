"""Merge per-course deadline maps into one report-wide map."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from conky_deadlines.deadlines.parser import DeadlineMap, read_course_deadlines


def merge_deadlines(left: DeadlineMap, right: DeadlineMap) -> DeadlineMap:
    """Recursively union two deadline maps.

    Item lists under the same (date, course) are concatenated, left first.
    Dates and courses present in only one map are carried over as-is.
    Neither input is modified.
    """
    merged: DeadlineMap = {
        date_key: {course: list(items) for course, items in by_course.items()}
        for date_key, by_course in left.items()
    }
    for date_key, by_course in right.items():
        target = merged.setdefault(date_key, {})
        for course, items in by_course.items():
            target.setdefault(course, []).extend(items)
    return merged


def collect_deadlines(
    courses: Iterable[str],
    root: Path | str | None = None,
    include_done: bool = False,
) -> DeadlineMap:
    """Read every course file in order and merge the results.

    The first missing or unreadable file aborts the collection; see
    conky_deadlines.deadlines.errors.
    """
    deadlines: DeadlineMap = {}
    for course in courses:
        course_deadlines = read_course_deadlines(course, root, include_done=include_done)
        deadlines = merge_deadlines(deadlines, course_deadlines)
    return deadlines
