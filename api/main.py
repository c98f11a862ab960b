from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from admin import router as admin_router
from admin.metrics import HitCounter, HitCounterMiddleware
from chirps import router as chirps_router
from core import db
from core.config import Settings, get_settings
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    logger.info("db_pool_ready")
    try:
        yield
    finally:
        await db.close_pool()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title="Chirpy", lifespan=lifespan)

    # One counter per app; shared by the file server wrapper and the admin views.
    counter = HitCounter()
    app.state.hit_counter = counter

    app.include_router(chirps_router.router, tags=["chirps"])
    app.include_router(users_router.router, tags=["users"])
    app.include_router(admin_router.router, tags=["admin"])

    @app.get("/api/healthz", response_class=PlainTextResponse)
    def healthz() -> PlainTextResponse:
        return PlainTextResponse("OK")

    file_server = StaticFiles(directory=settings.filepath_root, html=True)
    app.mount("/app", HitCounterMiddleware(file_server, counter), name="app")

    return app


app = create_app()
