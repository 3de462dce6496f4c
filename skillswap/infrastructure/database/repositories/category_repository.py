"""Category repository implementation."""

from typing import Any, Dict, List

from skillswap.application.interfaces.repositories import CategoryRepositoryInterface
from skillswap.infrastructure.database import collections
from skillswap.infrastructure.database.repositories.base_repository import (
    MongoRepository,
)


class CategoryRepository(MongoRepository, CategoryRepositoryInterface):
    """Category repository implementation."""

    collection_name = collections.CATEGORIES

    async def find_all(self) -> List[Dict[str, Any]]:
        """Get all categories."""
        return await self.find()
