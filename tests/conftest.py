"""Shared test fixtures for conky-deadlines."""

import builtins
import os
from pathlib import Path

import pytest


@pytest.fixture
def write_course(tmp_path):
    """Write <tmp_path>/<course>/0-deadlines.md and return its path."""

    def _write(course: str, content: str) -> Path:
        course_dir = tmp_path / course
        course_dir.mkdir(parents=True, exist_ok=True)
        path = course_dir / "0-deadlines.md"
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def deny_open(monkeypatch):
    """Make open() raise PermissionError for one path (chmod doesn't stop root)."""
    real_open = builtins.open

    def _deny(denied: Path) -> None:
        def _open(file, *args, **kwargs):
            if isinstance(file, (str, os.PathLike)) and Path(file) == Path(denied):
                raise PermissionError(13, "Permission denied", str(file))
            return real_open(file, *args, **kwargs)

        monkeypatch.setattr(builtins, "open", _open)

    return _deny
