"""Parse deadlines from a course's 0-deadlines.md.

Recognizes two line shapes; everything else is ignored:
- ## 2024-01-15 Week 3     — date heading, starts a new date group
- * Hand in exercise 4     — item under the current heading
- * Hand in exercise 3 DONE — completed item (trailing DONE marker)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Union

from conky_deadlines.deadlines.errors import CourseFileNotFoundError, CourseFileUnreadableError
from conky_deadlines.paths import deadline_file

_HEADING_RE = re.compile(r"^##\s+(\d{4})-(\d{2})-(\d{2})(?:\s+(.*))?$")
_ITEM_RE = re.compile(r"^\* (.*)$")

DONE_MARKER = "DONE"

# Date key for items that appear before the first heading
UNDATED = "undated"


@dataclass
class Item:
    """A single deadline entry under a date and course."""
    text: str
    done: bool = False


@dataclass(frozen=True)
class Heading:
    year: int
    month: int
    day: int
    label: str = ""

    @property
    def date_key(self) -> str:
        return date(self.year, self.month, self.day).isoformat()


@dataclass(frozen=True)
class ListItem:
    text: str
    done: bool = False


class Ignore:
    """A blank or unrecognized line."""

    def __repr__(self) -> str:
        return "IGNORE"


IGNORE = Ignore()

ParsedLine = Union[Heading, ListItem, Ignore]

# date key → course → items, in insertion order
DeadlineMap = dict[str, dict[str, list[Item]]]


def parse_line(line: str) -> ParsedLine:
    """Classify one markdown line as a heading, a list item, or noise."""
    stripped = line.strip()
    if not stripped:
        return IGNORE

    m = _HEADING_RE.match(stripped)
    if m:
        year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
        try:
            date(year, month, day)
        except ValueError:
            return IGNORE
        return Heading(year, month, day, (m.group(4) or "").strip())

    m = _ITEM_RE.match(stripped)
    if m:
        text = m.group(1)
        done = text.endswith(DONE_MARKER)
        if done:
            text = text[: -len(DONE_MARKER)]
        return ListItem(text.strip(), done)

    return IGNORE


def scan_lines(
    lines: Iterable[str],
    course: str,
    include_done: bool = True,
) -> DeadlineMap:
    """Group the items of one course file by their heading date.

    Args:
        lines: Lines of the course's deadline file.
        course: Course folder name the items are filed under.
        include_done: Keep items carrying the DONE marker.

    Returns:
        DeadlineMap holding only *course*. Headings without items add no key.
    """
    deadlines: DeadlineMap = {}
    current_date = UNDATED

    for line in lines:
        parsed = parse_line(line)
        if isinstance(parsed, Heading):
            current_date = parsed.date_key
        elif isinstance(parsed, ListItem):
            if parsed.done and not include_done:
                continue
            items = deadlines.setdefault(current_date, {}).setdefault(course, [])
            items.append(Item(text=parsed.text, done=parsed.done))

    return deadlines


def read_course_deadlines(
    course: str,
    root: Path | str | None = None,
    include_done: bool = True,
) -> DeadlineMap:
    """Parse <root>/<course>/0-deadlines.md.

    Raises:
        CourseFileNotFoundError: If the path is not a regular file.
        CourseFileUnreadableError: If the file can't be opened or decoded.
    """
    path = deadline_file(course, root)
    if not path.is_file():
        raise CourseFileNotFoundError(path)

    try:
        with open(path, encoding="utf-8") as f:
            return scan_lines(f, course, include_done=include_done)
    except (OSError, UnicodeDecodeError) as e:
        raise CourseFileUnreadableError(path) from e


def format_date_key(date_key: str, fmt: str = "%Y-%m-%d") -> str:
    """Render a canonical YYYY-MM-DD key with another strftime format."""
    return datetime.strptime(date_key, "%Y-%m-%d").strftime(fmt)
