"""Deadlines module — parse course deadline files, merge, window, and render them."""

from conky_deadlines.deadlines.aggregate import collect_deadlines, merge_deadlines
from conky_deadlines.deadlines.parser import parse_line, read_course_deadlines, scan_lines
from conky_deadlines.deadlines.render import render_report
from conky_deadlines.deadlines.window import upcoming

__all__ = [
    "collect_deadlines",
    "merge_deadlines",
    "parse_line",
    "read_course_deadlines",
    "render_report",
    "scan_lines",
    "upcoming",
]
