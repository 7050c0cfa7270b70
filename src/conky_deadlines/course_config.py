"""Course table — folder name → display abbreviation.

The default table is static data. A YAML file with the same shape can
replace it through CONKY_DEADLINES_COURSES:

    2-security: SEC
    2-pervasive-computing: PC
"""

from __future__ import annotations

import warnings
from pathlib import Path

import yaml

from conky_deadlines.paths import courses_config_path

# Folder name → abbreviation printed in front of each item
COURSES: dict[str, str] = {
    "2-advanced-programming":   "AP",
    "2-mobile-app-development": "MAD",
    "2-pervasive-computing":    "PC",
    "2-security":               "SEC",
}


def load_courses(path: Path | str) -> dict[str, str]:
    """Read a course table from a YAML file.

    Args:
        path: Path to the YAML mapping of folder → abbreviation.

    Returns:
        Course table in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document is not a mapping of names.
    """
    config_path = Path(path)
    with open(config_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"course table at {config_path} is not a YAML mapping")

    courses: dict[str, str] = {}
    for folder, abbr in data.items():
        if not isinstance(folder, str) or not isinstance(abbr, (str, type(None))):
            raise ValueError(
                f"course table at {config_path}: entry {folder!r} must map a name to a name"
            )
        if not abbr:
            warnings.warn(f"course '{folder}' has no abbreviation, using the folder name")
            abbr = folder
        courses[folder] = abbr
    return courses


def course_table(path: Path | str | None = None) -> dict[str, str]:
    """Return the course table from *path*, the environment, or the defaults."""
    config = Path(path) if path else courses_config_path()
    if config is not None:
        return load_courses(config)
    return dict(COURSES)


def abbreviation(courses: dict[str, str], course: str) -> str:
    return courses.get(course) or course
