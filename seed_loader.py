"""Startup load cycle: read -> flatten -> validate -> clear -> bulk insert.

Validation runs before the store is touched, so a rejected batch leaves the
previous collection intact. Clear and insert are not transactional: an insert
failure after a successful clear leaves whatever the store applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from course_validator import validate_courses
from curriculum_loader import load_courses
from db import CourseStore

logger = logging.getLogger("curriculum-api")


@dataclass
class LoadReport:
    ok: bool
    read: int = 0
    inserted: int = 0
    violations: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "read": self.read,
            "inserted": self.inserted,
            "violations": list(self.violations),
            "error": self.error,
        }


def run_load_cycle(store: CourseStore, path: Union[str, Path]) -> LoadReport:
    """Repopulate the courses collection from the curriculum file.

    CurriculumLoadError (missing or unparseable file) propagates to the caller.
    Validation and store failures are logged and reported, never raised.
    """
    entries = load_courses(path)

    result = validate_courses(entries)
    if not result.ok:
        for v in result.violations[:20]:
            logger.error("Invalid course data: %s", v)
        logger.error("Error inserting courses: %d invalid entries, batch rejected", len(result.violations))
        return LoadReport(
            ok=False,
            read=len(entries),
            violations=[v.to_dict() for v in result.violations],
            error="Invalid course data format.",
        )

    docs = [c.model_dump() for c in result.courses]
    try:
        removed = store.clear_all()
        inserted = store.insert_many(docs)
    except (PyMongoError, BSONError, OverflowError) as e:
        logger.exception("Error inserting courses")
        return LoadReport(ok=False, read=len(entries), error=str(e))

    logger.info("Courses inserted successfully (removed=%d inserted=%d)", removed, inserted)
    return LoadReport(ok=True, read=len(entries), inserted=inserted)
