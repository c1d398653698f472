"""Course batch validation.

Pure pre-check over the flattened entries, independent of the store.
A batch is accepted only when every entry is valid; nothing is coerced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from errors import CourseValidationError
from schemas import Course

_EXPECTED: Dict[str, str] = {
    "code": "a non-empty string",
    "description": "a non-empty string",
    "units": "a number",
    "tags": "a list of non-empty strings",
}


@dataclass(frozen=True)
class Violation:
    index: Optional[int]
    field: str
    message: str

    def __str__(self) -> str:
        where = "courses" if self.index is None else f"course #{self.index}"
        if self.field:
            return f"{where}: {self.field} {self.message}"
        return f"{where}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    ok: bool
    violations: List[Violation] = field(default_factory=list)
    courses: List[Course] = field(default_factory=list)


def _check_entry(index: int, entry: Any) -> Tuple[Optional[Course], List[Violation]]:
    if not isinstance(entry, dict):
        return None, [Violation(index, "", "must be an object")]
    try:
        return Course.model_validate(entry), []
    except ValidationError as e:
        seen: List[str] = []
        for err in e.errors():
            loc = err.get("loc") or ()
            name = str(loc[0]) if loc else ""
            if name not in seen:
                seen.append(name)
        return None, [
            Violation(index, name, f"must be {_EXPECTED.get(name, 'valid')}")
            for name in seen
        ]


def validate_courses(entries: Any) -> ValidationResult:
    if not isinstance(entries, list):
        return ValidationResult(
            ok=False,
            violations=[Violation(None, "", "Invalid courses data format. Expected an array.")],
        )

    violations: List[Violation] = []
    courses: List[Course] = []
    for i, entry in enumerate(entries):
        course, found = _check_entry(i, entry)
        if found:
            violations.extend(found)
        else:
            courses.append(course)

    if violations:
        return ValidationResult(ok=False, violations=violations)
    return ValidationResult(ok=True, courses=courses)


def ensure_valid(entries: Any) -> List[Course]:
    result = validate_courses(entries)
    if not result.ok:
        raise CourseValidationError(result.violations)
    return result.courses
