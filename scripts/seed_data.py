#!/usr/bin/env python3
"""
Seed the categories collection for development.
"""

import asyncio
import sys

from skillswap.config.database import close_database, get_database
from skillswap.config.logging import configure_logging, get_logger
from skillswap.infrastructure.database.collections import ensure_indexes
from skillswap.infrastructure.database.seed import seed_categories

logger = get_logger(__name__)


async def seed_database() -> int:
    """Create indexes and insert the default categories."""
    db = await get_database()
    try:
        await ensure_indexes(db)
        inserted = await seed_categories(db)
        logger.info("Seed finished", inserted=inserted, database=db.name)
        return inserted
    finally:
        await close_database()


if __name__ == "__main__":
    configure_logging()
    try:
        asyncio.run(seed_database())
    except Exception as e:
        logger.error("Seeding failed", error=str(e))
        sys.exit(1)
