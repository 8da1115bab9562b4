"""Jana API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JanaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Settings, session registry, passkey table and upload store live on app.state, one per app
    - lifespan reads app.state.settings, never the environment a second time
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests and scripts build isolated app instances
    - Uploaded images served by StaticFiles under upload_url_prefix
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import timedelta
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.routes import (
    auth, countdown, health, notes, photos, timeline, uploads, user_settings,
)
from app.config import Settings, get_settings
from app.core.auth_sessions import PasskeyTable, SessionRegistry
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging
from app.services.uploads import UploadStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all()
    app.state.upload_store.root.mkdir(parents=True, exist_ok=True)
    if not len(app.state.passkey_table):
        logger.warning("No passkeys configured (PASSKEYS); nobody can log in")
    logger.info("Jana API started")
    yield
    await manager.dispose()
    logger.info("Jana API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Jana API", version="1.0.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.passkey_table = PasskeyTable(settings.passkeys)
    app.state.session_registry = SessionRegistry(
        timedelta(hours=settings.session_ttl_hours),
    )
    app.state.upload_store = UploadStore(
        Path(settings.upload_dir),
        public_prefix=settings.upload_url_prefix,
        max_bytes=settings.upload_max_bytes,
        allowed_types=settings.upload_allowed_types,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(timeline.router)
    app.include_router(photos.router)
    app.include_router(notes.router)
    app.include_router(user_settings.router)
    app.include_router(countdown.router)
    app.include_router(uploads.router)

    register_error_handlers(app)

    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )
    # React build, mounted last so /api/v1/* and uploads take precedence
    if os.path.isdir("static"):
        app.mount("/", StaticFiles(directory="static", html=True), name="static")
    return app


app = create_app()
