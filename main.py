from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from config import Settings, load_settings
from course_router import router as course_router
from db import AppContext, CourseStore, connect_store
from errors import CurriculumLoadError, StoreConnectionError
from seed_loader import run_load_cycle

logger = logging.getLogger("curriculum-api")

StoreFactory = Callable[[Settings], CourseStore]


async def startup(ctx: AppContext, store_factory: StoreFactory) -> None:
    """Connect, then run the load cycle once. Sets ctx.ready on success.

    A missing or unparseable curriculum file aborts startup.
    """
    try:
        ctx.store = await run_in_threadpool(store_factory, ctx.settings)
    except StoreConnectionError as e:
        logger.error("MongoDB connection error: %s", e)
        return
    logger.info("Connected to MongoDB")

    try:
        await run_in_threadpool(ctx.store.ensure_indexes)
    except Exception:
        logger.warning("Course index creation failed", exc_info=True)

    try:
        report = await run_in_threadpool(run_load_cycle, ctx.store, ctx.settings.courses_file)
    except CurriculumLoadError as e:
        logger.critical("Curriculum load failed: %s", e)
        raise

    ctx.last_load = report.to_dict()
    ctx.ready = report.ok


def create_app(settings: Optional[Settings] = None, store_factory: StoreFactory = connect_store) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx = AppContext(settings=settings)
        app.state.ctx = ctx
        try:
            await startup(ctx, store_factory)
            yield
        finally:
            ctx.close()
            logger.info("Course store closed")

    app = FastAPI(title="Curriculum API", version="1.0.0", lifespan=lifespan)
    app.state.ctx = AppContext(settings=settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(course_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    s = load_settings()
    logger.info("Server is running on port %s", s.port)
    uvicorn.run(app, host=s.host, port=s.port)
