"""
Transaction service for running multi-document writes atomically.
"""

from typing import Any, Awaitable, Callable, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from skillswap.application.interfaces.services import TransactionServiceInterface
from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.store_error import StoreError

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService(TransactionServiceInterface):
    """Centralized transaction management service."""

    def __init__(self, client: AsyncIOMotorClient):
        self.client = client
        self.logger = logger

    async def execute_in_transaction(self, operation: Callable[[Any], Awaitable[T]]) -> T:
        """
        Execute an operation within a transaction.

        Args:
            operation: Async function receiving the client session; every
                write it performs must pass that session to the driver.
                It runs again from the start after a transient write conflict.

        Returns:
            Result of the operation

        Raises:
            StoreError: The store failed or the retries ran out.
            Exception: Any other exception raised by the operation, after the
                transaction has been aborted.
        """
        try:
            async with await self.client.start_session() as session:
                # The driver retries the whole callback on TransientTransactionError
                # and the commit on UnknownTransactionCommitResult.
                result = await session.with_transaction(operation)
        except PyMongoError as e:
            self.logger.error(
                "Transaction rolled back due to store error", error=str(e), exc_info=True
            )
            raise StoreError("transaction", str(e)) from e
        except Exception as e:
            self.logger.error(
                "Transaction rolled back due to error", error=str(e), exc_info=True
            )
            raise

        self.logger.info("Transaction committed successfully")
        return result
