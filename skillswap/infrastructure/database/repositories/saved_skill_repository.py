"""Saved skill repository implementation."""

from typing import Any, Dict, Optional

from pymongo.results import DeleteResult, InsertOneResult

from skillswap.application.interfaces.repositories import SavedSkillRepositoryInterface
from skillswap.infrastructure.database import collections
from skillswap.infrastructure.database.repositories.base_repository import (
    MongoRepository,
)


class SavedSkillRepository(MongoRepository, SavedSkillRepositoryInterface):
    """Saved skill repository implementation."""

    collection_name = collections.SAVED_SKILLS

    async def create(self, saved_skill: Dict[str, Any]) -> InsertOneResult:
        """Save a skill for a user."""
        return await self.insert(saved_skill)

    async def delete_by_skill_id(
        self, skill_id: str, email: Optional[str] = None
    ) -> DeleteResult:
        """Remove one saved entry for a skill, the given user's when ``email`` is set.

        Other users' saved copies of the same skill are never touched.
        """
        query: Dict[str, Any] = {"skillId": skill_id}
        if email:
            query["savedUserEmail"] = email

        async with self._operation("delete_one"):
            return await self.collection.delete_one(query)
