"""
FastAPI application factory.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillswap.api.middleware.error_handler import ErrorHandlerMiddleware
from skillswap.api.middleware.logging import LoggingMiddleware
from skillswap.api.routes import (
    exchanges,
    feedback,
    health,
    root,
    saved_skills,
    skills,
    users,
)
from skillswap.config.logging import configure_logging, get_logger
from skillswap.config.settings import settings

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Backend for the SkillSwap skill-exchange marketplace",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if settings.DEBUG else None,
        docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if settings.DEBUG else None,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    # Add routes
    app.include_router(root.router, prefix=settings.API_PREFIX)
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(skills.router, prefix=settings.API_PREFIX)
    app.include_router(saved_skills.router, prefix=settings.API_PREFIX)
    app.include_router(exchanges.router, prefix=settings.API_PREFIX)
    app.include_router(feedback.router, prefix=settings.API_PREFIX)
    app.include_router(users.router, prefix=settings.API_PREFIX)

    if settings.ENABLE_METRICS:
        app.include_router(health.metrics_router, prefix=settings.API_PREFIX)

    return app
