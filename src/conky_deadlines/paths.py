"""Course file path resolution.

Resolves where the per-course deadline files live. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    CONKY_DEADLINES_DIR — directory holding the course folders (default: cwd)
    CONKY_DEADLINES_COURSES — optional YAML course table (folder → abbreviation)
"""

from __future__ import annotations

import os
from pathlib import Path

DEADLINES_FILENAME = "0-deadlines.md"


def courses_root() -> Path:
    """Return the directory that contains one folder per course."""
    env = os.environ.get("CONKY_DEADLINES_DIR")
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def courses_config_path() -> Path | None:
    """Return the path to the YAML course table, if one is configured."""
    env = os.environ.get("CONKY_DEADLINES_COURSES")
    if env:
        return Path(env).expanduser()
    return None


def deadline_file(course: str, root: Path | str | None = None) -> Path:
    """Return the path to <root>/<course>/0-deadlines.md."""
    base = Path(root) if root else courses_root()
    return base / course / DEADLINES_FILENAME
