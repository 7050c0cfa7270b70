"""Errors raised while reading course deadline files."""

from __future__ import annotations

from pathlib import Path


class DeadlineFileError(Exception):
    """A course deadline file could not be used. Fatal for the whole run."""

    exit_code = 1

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)


class CourseFileNotFoundError(DeadlineFileError):
    exit_code = 2

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"'{path}' is not a file.")


class CourseFileUnreadableError(DeadlineFileError):
    exit_code = 3

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Could not read file '{path}'")
