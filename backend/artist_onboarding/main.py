"""Artist Onboarding API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map OnboardingError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api.error_handlers: OnboardingError (domain),
      RequestValidationError (Pydantic), Exception (catch-all)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artist_onboarding.api.error_handlers import register_error_handlers
from artist_onboarding.api.routes import (
    admin, artists, artworks, health, onboarding, pricing, product_configuration,
)
from artist_onboarding.config import get_settings
from artist_onboarding.infrastructure import database
from artist_onboarding.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Artist Onboarding API started")
    yield
    await manager.dispose()
    logger.info("Artist Onboarding API shutting down")


app = FastAPI(
    title="Artist Onboarding API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(artists.router)
app.include_router(artworks.router)
app.include_router(product_configuration.router)
app.include_router(pricing.router)
app.include_router(onboarding.router)
app.include_router(admin.router)

register_error_handlers(app)
