from __future__ import annotations

from typing import Any, Dict, List

import pymongo

from db import CourseStore

BACKEND_TAGS = ["Programming", "Database Management", "Web Development"]
PROGRAM_TAGS = ["BSIS", "BSIT"]

_VIEW_FIELDS = ("description", "tags")


def get_backend_courses(store: CourseStore) -> List[Dict[str, Any]]:
    """Backend-track courses, sorted by description (store collation)."""
    return store.find(
        {"tags": {"$in": BACKEND_TAGS}},
        _VIEW_FIELDS,
        sort=[("description", pymongo.ASCENDING)],
    )


def get_bsis_bsit_courses(store: CourseStore) -> List[Dict[str, Any]]:
    return store.find({"tags": {"$in": PROGRAM_TAGS}}, _VIEW_FIELDS)
