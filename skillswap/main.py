"""
Main application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from skillswap.api.app import create_app
from skillswap.config.database import close_database, get_database
from skillswap.config.logging import get_logger
from skillswap.config.settings import settings
from skillswap.infrastructure.database.collections import ensure_indexes

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting SkillSwap server", environment=settings.ENVIRONMENT)

    db = await get_database()
    try:
        await db.command("ping")
        logger.info("Connected to MongoDB", database=settings.MONGO_DB_NAME)

        if settings.MONGO_CREATE_INDEXES:
            await ensure_indexes(db)
    except PyMongoError as e:
        logger.error("MongoDB unavailable during startup", error=str(e))
        if settings.MONGO_FAIL_FAST:
            raise

    try:
        yield
    finally:
        # Shutdown
        logger.info("Shutting down SkillSwap server")
        await close_database()


def create_main_app() -> FastAPI:
    """Create the main FastAPI application."""
    app = create_app()

    # Add lifespan manager
    app.router.lifespan_context = lifespan

    return app


# Create the main app
app = create_main_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting SkillSwap server", host=settings.API_HOST, port=settings.PORT)

    uvicorn.run(
        "skillswap.main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
