"""Curriculum source reader.

The source file is a JSON list of year groupings. Each grouping maps an
arbitrary key (usually a semester label) to either a list of course entries
or a single entry:

    [
      {"1st Sem": [{...}, {...}], "2nd Sem": [{...}]},
      {"1st Sem": [...], "Summer": {...}}
    ]

Flattening drops the grouping keys; year/semester is not kept.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from errors import CurriculumLoadError

logger = logging.getLogger("curriculum-api")


def read_curriculum(path: Union[str, Path]) -> Any:
    p = Path(path)

    # NaN / Infinity / -Infinity are not JSON
    def _reject_constant(name: str):
        raise CurriculumLoadError(f"Curriculum file is not valid JSON: {p} (unexpected {name})")

    try:
        with open(p, "r", encoding="utf-8") as f:
            return json.load(f, parse_constant=_reject_constant)
    except FileNotFoundError as e:
        raise CurriculumLoadError(f"Curriculum file not found: {p}") from e
    except json.JSONDecodeError as e:
        raise CurriculumLoadError(f"Curriculum file is not valid JSON: {p} ({e})") from e
    except OSError as e:
        raise CurriculumLoadError(f"Curriculum file could not be read: {p} ({e})") from e


def flatten_curriculum(data: Any) -> List[Any]:
    """Concatenate every grouping's values in order, splicing lists one level."""
    if not isinstance(data, list):
        raise CurriculumLoadError("Invalid curriculum format. Expected a list of year groupings.")

    courses: List[Any] = []
    for i, year in enumerate(data):
        if not isinstance(year, dict):
            raise CurriculumLoadError(f"Invalid curriculum format. Grouping {i} is not an object.")
        for value in year.values():
            if isinstance(value, list):
                courses.extend(value)
            else:
                courses.append(value)
    return courses


def load_courses(path: Union[str, Path]) -> List[Any]:
    data = read_curriculum(path)
    courses = flatten_curriculum(data)
    logger.info("Read %d course entries from %s", len(courses), path)
    return courses
