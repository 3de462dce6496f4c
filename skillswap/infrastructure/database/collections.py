"""
Collection names and index definitions.
"""

from pymongo import ASCENDING, DESCENDING, IndexModel

from skillswap.config.logging import get_logger

logger = get_logger(__name__)

USERS = "users"
SKILLS = "skills"
CATEGORIES = "categories"
EXCHANGES = "exchanges"
SAVED_SKILLS = "savedSkills"
REVIEWS = "reviews"
REPORTS = "reports"

INDEXES = {
    USERS: [IndexModel([("email", ASCENDING)], unique=True, name="uniq_email")],
    SKILLS: [
        IndexModel([("creatorEmail", ASCENDING)], name="creator_email"),
        IndexModel([("createdAt", DESCENDING)], name="created_at_desc"),
    ],
    SAVED_SKILLS: [
        IndexModel([("savedUserEmail", ASCENDING)], name="saved_user_email"),
    ],
    EXCHANGES: [
        IndexModel([("creatorEmail", ASCENDING)], name="creator_email"),
    ],
    REVIEWS: [
        IndexModel(
            [("reviewerEmail", ASCENDING), ("skillId", ASCENDING)],
            unique=True,
            name="uniq_reviewer_skill",
        )
    ],
    REPORTS: [
        IndexModel(
            [("reporterEmail", ASCENDING), ("skillId", ASCENDING)],
            unique=True,
            name="uniq_reporter_skill",
        )
    ],
}


async def ensure_indexes(db) -> None:
    """Create the indexes backing lookups and uniqueness guards."""
    for collection_name, indexes in INDEXES.items():
        names = await db[collection_name].create_indexes(indexes)
        logger.info("Indexes ensured", collection=collection_name, indexes=names)
