"""
Database configuration and connection management.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from skillswap.config.settings import settings

logger = logging.getLogger(__name__)

_motor_client: Optional[AsyncIOMotorClient] = None


def get_database_url() -> str:
    """Get MongoDB connection string from settings."""
    return str(settings.MONGO_URI)


def create_client(database_url: str = None) -> AsyncIOMotorClient:
    """Create a motor client. No connection is opened until first use."""
    url = database_url or get_database_url()

    return AsyncIOMotorClient(
        url,
        serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        tz_aware=True,
    )


def get_client() -> AsyncIOMotorClient:
    """Return the process-wide motor client, creating it on first call."""
    global _motor_client

    if _motor_client is None:
        _motor_client = create_client()
    return _motor_client


async def get_database() -> AsyncIOMotorDatabase:
    """Dependency for getting the application database."""
    return get_client()[settings.MONGO_DB_NAME]


async def close_database() -> None:
    """Close the motor client if one was created."""
    global _motor_client

    if _motor_client is not None:
        _motor_client.close()
        _motor_client = None
        logger.info("MongoDB client closed")
