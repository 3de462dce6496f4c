"""Exchange repository implementation."""

from typing import Any, Dict, List, Optional

from pymongo.results import InsertOneResult, UpdateResult

from skillswap.application.interfaces.repositories import ExchangeRepositoryInterface
from skillswap.domain.value_objects.exchange_status import ExchangeStatus
from skillswap.infrastructure.database import collections
from skillswap.infrastructure.database.documents import parse_object_id
from skillswap.infrastructure.database.repositories.base_repository import (
    MongoRepository,
)


class ExchangeRepository(MongoRepository, ExchangeRepositoryInterface):
    """Exchange repository implementation."""

    collection_name = collections.EXCHANGES

    async def create(self, exchange: Dict[str, Any]) -> InsertOneResult:
        """Insert a new exchange request."""
        return await self.insert(exchange)

    async def get_by_id(self, exchange_id: str) -> Optional[Dict[str, Any]]:
        """Get exchange by ID."""
        return await super().get_by_id(exchange_id)

    async def find_accepted_for(self, email: str) -> List[Dict[str, Any]]:
        """Accepted exchanges where the user is either party."""
        return await self.find(
            {
                "$or": [
                    {"creatorEmail": email},
                    {"applicationUserEmail": email},
                ],
                "status": ExchangeStatus.ACCEPTED.value,
            }
        )

    async def update_status(
        self, exchange_id: str, status: ExchangeStatus, session=None
    ) -> UpdateResult:
        """Set the exchange status unless it is already accepted.

        An accepted exchange is never matched, so ``matched_count`` is 0 when
        another request accepted it first.
        """
        query = {
            "_id": parse_object_id(exchange_id),
            "status": {"$ne": ExchangeStatus.ACCEPTED.value},
        }
        async with self._operation("update_one"):
            return await self.collection.update_one(
                query,
                {"$set": {"status": ExchangeStatus(status).value}},
                session=session,
            )
