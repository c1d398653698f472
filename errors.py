from __future__ import annotations

from typing import List, Optional


class CurriculumError(RuntimeError):
    pass


class CurriculumLoadError(CurriculumError):
    """Source file missing, unreadable, or not shaped as a list of groupings."""


class CourseValidationError(CurriculumError):
    def __init__(self, violations: Optional[List] = None) -> None:
        self.violations = list(violations or [])
        if self.violations:
            msg = f"Invalid course data format: {self.violations[0]}"
        else:
            msg = "Invalid course data format."
        super().__init__(msg)


class StoreConnectionError(CurriculumError):
    pass
