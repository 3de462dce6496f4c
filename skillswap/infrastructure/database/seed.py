"""
Reference data seeding.
"""

from typing import Iterable, List

from skillswap.config.logging import get_logger
from skillswap.infrastructure.database import collections

logger = get_logger(__name__)

DEFAULT_CATEGORIES: List[str] = [
    "Programming",
    "Design",
    "Music",
    "Languages",
    "Cooking",
    "Photography",
    "Fitness",
    "Writing",
    "Marketing",
    "Crafts",
]


async def seed_categories(db, names: Iterable[str] = DEFAULT_CATEGORIES) -> int:
    """Insert the category list when the collection is empty.

    Returns the number of inserted categories (0 when data already exists).
    """
    categories = db[collections.CATEGORIES]

    existing = await categories.count_documents({})
    if existing > 0:
        logger.info("Categories already present, skipping seed", existing=existing)
        return 0

    documents = [{"name": name} for name in names]
    if not documents:
        return 0

    result = await categories.insert_many(documents)
    inserted = len(result.inserted_ids)
    logger.info("Categories seeded", inserted=inserted)
    return inserted
