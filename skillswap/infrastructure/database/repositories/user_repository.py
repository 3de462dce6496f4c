"""User repository implementation."""

from typing import Any, Dict, Optional

from pymongo.errors import DuplicateKeyError
from pymongo.results import UpdateResult

from skillswap.application.interfaces.repositories import UserRepositoryInterface
from skillswap.config.logging import get_logger
from skillswap.domain.value_objects.user_role import UserRole
from skillswap.infrastructure.database import collections
from skillswap.infrastructure.database.repositories.base_repository import (
    MongoRepository,
)

logger = get_logger(__name__)


class UserRepository(MongoRepository, UserRepositoryInterface):
    """User repository implementation."""

    collection_name = collections.USERS

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get user by email."""
        return await self.find_one({"email": email})

    async def create(self, user: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a user and return the stored document.

        When a concurrent request inserted the same email first, the unique
        index rejects this insert and the existing document is returned.
        """
        document = dict(user)
        try:
            result = await self.insert(document)
        except DuplicateKeyError:
            logger.info("User created concurrently", email=document.get("email"))
            return await self.get_by_email(document.get("email"))

        document["_id"] = result.inserted_id
        return document

    async def update_role(self, user_id: str, role: UserRole) -> UpdateResult:
        """Change a user's role."""
        return await self.update_by_id(user_id, {"role": UserRole(role).value})

    async def update_profile(self, email: str, changes: Dict[str, Any]) -> UpdateResult:
        """Apply a partial update to the user with this email."""
        async with self._operation("update_one"):
            return await self.collection.update_one({"email": email}, {"$set": changes})
