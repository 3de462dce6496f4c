"""
Service interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")


class TransactionServiceInterface(ABC):
    """Interface for running several writes as one atomic unit."""

    @abstractmethod
    async def execute_in_transaction(
        self, operation: Callable[[Any], Awaitable[T]]
    ) -> T:
        """Run ``operation(session)`` inside a transaction and commit it."""
        pass
