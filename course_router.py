from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from course_store import get_backend_courses, get_bsis_bsit_courses
from db import AppContext
from schemas import CourseView, ErrorResponse, HealthResponse

logger = logging.getLogger("curriculum-api")

router = APIRouter(tags=["courses"])

_ERROR_RESPONSES = {
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def _ctx(request: Request) -> AppContext:
    return request.app.state.ctx


def _not_ready() -> JSONResponse:
    return JSONResponse(status_code=503, content={"error": "Service not ready"})


@router.get("/health", response_model=HealthResponse)
def health(request: Request):
    ctx = _ctx(request)
    store = ctx.store.health() if ctx.store is not None else {"connected": False}
    return {"ok": True, "ready": ctx.ready, "store": store, "load": ctx.last_load}


# Retrieve all backend courses, sorted alphabetically by name.
@router.get("/backend-courses", response_model=List[CourseView], responses=_ERROR_RESPONSES)
def backend_courses(request: Request):
    ctx = _ctx(request)
    if not ctx.ready or ctx.store is None:
        return _not_ready()
    try:
        return get_backend_courses(ctx.store)
    except Exception:
        logger.exception("Error retrieving backend courses")
        return JSONResponse(status_code=500, content={"error": "Error retrieving backend courses"})


@router.get("/bsis-bsit-courses", response_model=List[CourseView], responses=_ERROR_RESPONSES)
def bsis_bsit_courses(request: Request):
    ctx = _ctx(request)
    if not ctx.ready or ctx.store is None:
        return _not_ready()
    try:
        return get_bsis_bsit_courses(ctx.store)
    except Exception:
        logger.exception("Error retrieving BSIS/BSIT courses")
        return JSONResponse(status_code=500, content={"error": "Error retrieving BSIS/BSIT courses"})
