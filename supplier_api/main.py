"""Supplier Management API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from supplier_api.core.config import Settings, settings as default_settings
from supplier_api.core.exceptions import register_exception_handlers
from supplier_api.db.base import build_engine, build_session_factory, create_tables
from supplier_api.middleware.request_log import RequestLogMiddleware
from supplier_api.routers.reports import router as reports_router
from supplier_api.routers.suppliers import router as suppliers_router
from supplier_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
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


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    _configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One engine per app instance, opened at start and disposed at exit
        engine = build_engine(settings)
        await create_tables(engine)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        logger.info("Connected to record store")
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- CORS (any origin) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Routes ---
    app.include_router(suppliers_router)
    app.include_router(reports_router)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
