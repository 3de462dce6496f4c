"""Skill repository implementation."""

from typing import Any, Dict, List, Optional

from pymongo.results import InsertOneResult, UpdateResult

from skillswap.application.interfaces.repositories import SkillRepositoryInterface
from skillswap.config.logging import get_logger
from skillswap.infrastructure.database import collections
from skillswap.infrastructure.database.repositories.base_repository import (
    MongoRepository,
)

logger = get_logger(__name__)


class SkillRepository(MongoRepository, SkillRepositoryInterface):
    """Skill repository implementation."""

    collection_name = collections.SKILLS

    async def create(self, skill: Dict[str, Any]) -> InsertOneResult:
        """Insert a new skill."""
        return await self.insert(skill)

    async def get_by_id(self, skill_id: str) -> Optional[Dict[str, Any]]:
        """Get skill by ID."""
        return await super().get_by_id(skill_id)

    async def find_by_creator(self, email: str) -> List[Dict[str, Any]]:
        """Find all skills listed by a user."""
        return await self.find({"creatorEmail": email})

    async def mark_unavailable(self, skill_id: str, session=None) -> UpdateResult:
        """Flag a skill as no longer available for exchange."""
        result = await self.update_by_id(skill_id, {"available": False}, session=session)
        logger.debug(
            "Skill marked unavailable",
            skill_id=skill_id,
            matched=result.matched_count,
        )
        return result

    async def trending_categories(self, limit: int = 5) -> List[Dict[str, Any]]:
        """Categories with the most skills, as ``{category, count}`` rows."""
        pipeline = [
            {"$group": {"_id": "$category", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}},
            {"$limit": limit},
            {"$project": {"_id": 0, "category": "$_id", "count": 1}},
        ]
        async with self._operation("aggregate"):
            cursor = self.collection.aggregate(pipeline)
            return await cursor.to_list(length=None)
