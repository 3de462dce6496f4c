"""Shared MongoDB repository behaviour."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from skillswap.application.services.query_builder import ListQuery
from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.store_error import StoreError
from skillswap.infrastructure.database.documents import parse_object_id

logger = get_logger(__name__)


class MongoRepository:
    """Thin wrapper over one collection.

    Driver failures are re-raised as ``StoreError``.  ``DuplicateKeyError`` is
    let through so subclasses backing a unique index can translate it, and so
    are transient transaction errors, which the driver retries.
    """

    collection_name: str = ""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.collection_name]

    @asynccontextmanager
    async def _operation(self, name: str) -> AsyncIterator[None]:
        try:
            yield
        except DuplicateKeyError:
            raise
        except PyMongoError as e:
            if e.has_error_label("TransientTransactionError"):
                # Left for the session's with_transaction to retry
                raise
            logger.error(
                "Store operation failed",
                collection=self.collection_name,
                operation=name,
                error=str(e),
            )
            raise StoreError(name, str(e)) from e

    async def insert(self, document: Dict[str, Any]) -> InsertOneResult:
        """Insert a document. The caller's dict is left untouched."""
        async with self._operation("insert"):
            return await self.collection.insert_one(dict(document))

    async def get_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        object_id = parse_object_id(document_id)
        async with self._operation("find_one"):
            return await self.collection.find_one({"_id": object_id})

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        async with self._operation("find_one"):
            return await self.collection.find_one(query)

    async def find(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        async with self._operation("find"):
            cursor = self.collection.find(query or {})
            return await cursor.to_list(length=None)

    async def find_page(self, query: ListQuery) -> Tuple[List[Dict[str, Any]], int]:
        """Return one page of matches plus the total match count."""
        async with self._operation("find_page"):
            cursor = self.collection.find(query.filter)
            if query.sort:
                cursor = cursor.sort(query.sort)
            cursor = cursor.skip(query.skip).limit(query.limit)
            items = await cursor.to_list(length=None)
            total = await self.collection.count_documents(query.filter)

        return items, total

    async def update_by_id(
        self, document_id: str, changes: Dict[str, Any], session=None
    ) -> UpdateResult:
        object_id = parse_object_id(document_id)
        async with self._operation("update_one"):
            return await self.collection.update_one(
                {"_id": object_id}, {"$set": changes}, session=session
            )

    async def delete_by_id(self, document_id: str) -> DeleteResult:
        object_id = parse_object_id(document_id)
        async with self._operation("delete_one"):
            return await self.collection.delete_one({"_id": object_id})
