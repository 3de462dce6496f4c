"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from skillswap.application.services.query_builder import ListQuery
from skillswap.domain.value_objects.exchange_status import ExchangeStatus
from skillswap.domain.value_objects.feedback_kind import FeedbackKind
from skillswap.domain.value_objects.user_role import UserRole

Document = Dict[str, Any]


class SkillRepositoryInterface(ABC):
    """Skill repository interface."""

    @abstractmethod
    async def create(self, skill: Document) -> InsertOneResult:
        """Insert a new skill."""
        pass

    @abstractmethod
    async def get_by_id(self, skill_id: str) -> Optional[Document]:
        """Get skill by ID."""
        pass

    @abstractmethod
    async def find_by_creator(self, email: str) -> List[Document]:
        """Find all skills listed by a user."""
        pass

    @abstractmethod
    async def find_page(self, query: ListQuery) -> Tuple[List[Document], int]:
        """Find one page of skills and the total match count."""
        pass

    @abstractmethod
    async def mark_unavailable(self, skill_id: str, session=None) -> UpdateResult:
        """Flag a skill as no longer available for exchange."""
        pass

    @abstractmethod
    async def trending_categories(self, limit: int = 5) -> List[Document]:
        """Categories with the most skills, as ``{category, count}`` rows."""
        pass


class CategoryRepositoryInterface(ABC):
    """Category repository interface."""

    @abstractmethod
    async def find_all(self) -> List[Document]:
        """Get all categories."""
        pass


class ExchangeRepositoryInterface(ABC):
    """Exchange repository interface."""

    @abstractmethod
    async def create(self, exchange: Document) -> InsertOneResult:
        """Insert a new exchange request."""
        pass

    @abstractmethod
    async def get_by_id(self, exchange_id: str) -> Optional[Document]:
        """Get exchange by ID."""
        pass

    @abstractmethod
    async def find_page(self, query: ListQuery) -> Tuple[List[Document], int]:
        """Find one page of exchanges and the total match count."""
        pass

    @abstractmethod
    async def find_accepted_for(self, email: str) -> List[Document]:
        """Accepted exchanges where the user is either party."""
        pass

    @abstractmethod
    async def update_status(
        self, exchange_id: str, status: ExchangeStatus, session=None
    ) -> UpdateResult:
        """Set the exchange status."""
        pass


class SavedSkillRepositoryInterface(ABC):
    """Saved skill repository interface."""

    @abstractmethod
    async def create(self, saved_skill: Document) -> InsertOneResult:
        """Save a skill for a user."""
        pass

    @abstractmethod
    async def find_page(self, query: ListQuery) -> Tuple[List[Document], int]:
        """Find one page of saved skills and the total match count."""
        pass

    @abstractmethod
    async def delete_by_skill_id(
        self, skill_id: str, email: Optional[str] = None
    ) -> DeleteResult:
        """Remove one saved entry for a skill, the given user's when ``email`` is set."""
        pass


class FeedbackRepositoryInterface(ABC):
    """Review/report repository interface."""

    kind: FeedbackKind

    @abstractmethod
    async def find_by_owner_and_skill(
        self, owner_email: str, skill_id: str
    ) -> Optional[Document]:
        """Find the entry an author left for a skill."""
        pass

    @abstractmethod
    async def create(self, feedback: Document) -> InsertOneResult:
        """Insert a new entry."""
        pass

    @abstractmethod
    async def find_by_skill(self, skill_id: str) -> List[Document]:
        """All entries for a skill."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Document]:
        """All entries."""
        pass

    @abstractmethod
    async def delete_by_id(self, feedback_id: str) -> DeleteResult:
        """Delete an entry by ID."""
        pass


class UserRepositoryInterface(ABC):
    """User repository interface."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Document]:
        """Get user by email."""
        pass

    @abstractmethod
    async def create(self, user: Document) -> Document:
        """Insert a user and return the stored document."""
        pass

    @abstractmethod
    async def find_page(self, query: ListQuery) -> Tuple[List[Document], int]:
        """Find one page of users and the total match count."""
        pass

    @abstractmethod
    async def update_role(self, user_id: str, role: UserRole) -> UpdateResult:
        """Change a user's role."""
        pass

    @abstractmethod
    async def update_profile(self, email: str, changes: Document) -> UpdateResult:
        """Apply a partial update to the user with this email."""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> DeleteResult:
        """Delete a user by ID."""
        pass
