"""Audit Dashboard API — FastAPI application factory."""


import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from audit_dashboard.core.config import Settings, settings as default_settings
from audit_dashboard.core.exceptions import register_exception_handlers
from audit_dashboard.db.base import build_engine, build_session_factory, create_schema
from audit_dashboard.middleware.request_log import RequestLogMiddleware
from audit_dashboard.middleware.security_headers import SecurityHeadersMiddleware
from audit_dashboard.repositories.files import DiskFileStorage, TransientFileStorage
from audit_dashboard.repositories.memory_store import MemoryDatabase, MemoryStore
from audit_dashboard.repositories.sql_store import SqlStore
from audit_dashboard.routers.audits import router as audits_router
from audit_dashboard.routers.auth import router as auth_router
from audit_dashboard.routers.companies import router as companies_router
from audit_dashboard.routers.news import router as news_router
from audit_dashboard.schemas.common import HealthResponse
from audit_dashboard.services.seed import seed_defaults

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the configured persistence backend, seed it, tear it down on exit."""
    settings: Settings = app.state.settings

    if settings.uses_memory_store:
        memory_db = MemoryDatabase()
        files = TransientFileStorage()
        app.state.memory_db = memory_db
        app.state.files = files
        await seed_defaults(MemoryStore(memory_db), settings)
        logger.info("Using in-memory store (data is lost on restart)")
        try:
            yield
        finally:
            logger.info("Dropping in-memory store and %d transient files", files.count)
            memory_db.clear()
            files.clear()
            app.state.memory_db = None
        return

    engine = build_engine(settings)
    app.state.session_factory = build_session_factory(engine)
    app.state.files = DiskFileStorage(settings.upload_dir)
    try:
        await create_schema(engine)
        async with app.state.session_factory() as session:
            await seed_defaults(SqlStore(session), settings)
            await session.commit()
        logger.info("Using SQL store at %s", engine.url.render_as_string(hide_password=True))
        yield
    finally:
        await engine.dispose()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    settings = app_settings or default_settings
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.memory_db = None

    # --- Rate limiting (one budget per client address, shared by all routes) ---
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        application_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )
    app.add_middleware(SlowAPIMiddleware)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Security headers (outermost, so error and 429 responses get them too) ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes (/api/*) ---
    for router in (auth_router, companies_router, audits_router, news_router):
        app.include_router(router, prefix=settings.api_prefix)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(
            timestamp=datetime.now(timezone.utc),
            version=settings.app_version,
            environment=settings.app_env,
            storage=settings.storage_backend,
        )

    return app


app = create_app()
