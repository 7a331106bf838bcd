"""Invoice Dashboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError → structured JSON responses
    - CORS and session cookie configured from settings (not hardcoded)
    - Database manager created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - SessionMiddleware owns cookie signing; sign-in only writes the user id into it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from dashboard.api.error_handlers import register_error_handlers
from dashboard.api.routes import auth, health, invoices
from dashboard.config import get_settings
from dashboard.infrastructure.database import DatabaseSessionManager
from dashboard.infrastructure.observability import setup_logging
from dashboard.infrastructure.revalidation import VersionedPathRevalidator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        ssl=settings.database_ssl or None,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Invoice dashboard API started")
    yield
    await app.state.db_manager.close()
    app.state.db_manager = None
    logger.info("Invoice dashboard API shut down")


app = FastAPI(
    title="Invoice Dashboard API", version="1.0.0", lifespan=lifespan,
)
app.state.revalidator = VersionedPathRevalidator()

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    max_age=settings.session_max_age_seconds,
    same_site="lax",
    https_only=settings.session_https_only,
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(invoices.router)

register_error_handlers(app)
