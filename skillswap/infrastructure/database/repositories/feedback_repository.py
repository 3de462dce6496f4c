"""Review and report repository implementations."""

from typing import Any, Dict, List, Optional

from pymongo.errors import DuplicateKeyError
from pymongo.results import DeleteResult, InsertOneResult

from skillswap.application.interfaces.repositories import FeedbackRepositoryInterface
from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.conflict_error import DuplicateEntryError
from skillswap.domain.value_objects.feedback_kind import FeedbackKind
from skillswap.infrastructure.database import collections
from skillswap.infrastructure.database.repositories.base_repository import (
    MongoRepository,
)

logger = get_logger(__name__)


class FeedbackRepository(MongoRepository, FeedbackRepositoryInterface):
    """Per-skill feedback keyed by (author email, skillId)."""

    kind: FeedbackKind

    async def find_by_owner_and_skill(
        self, owner_email: str, skill_id: str
    ) -> Optional[Dict[str, Any]]:
        """Find the entry an author left for a skill."""
        return await self.find_one(
            {self.kind.owner_field: owner_email, "skillId": skill_id}
        )

    async def create(self, feedback: Dict[str, Any]) -> InsertOneResult:
        """Insert a new entry. A unique index violation maps to a duplicate error."""
        try:
            return await self.insert(feedback)
        except DuplicateKeyError as e:
            owner_email = feedback.get(self.kind.owner_field)
            skill_id = feedback.get("skillId")
            logger.info(
                "Duplicate feedback rejected by index",
                kind=self.kind.value,
                owner_email=owner_email,
                skill_id=skill_id,
            )
            raise DuplicateEntryError(
                self.kind.value, owner_email, skill_id, self.kind.duplicate_message
            ) from e

    async def find_by_skill(self, skill_id: str) -> List[Dict[str, Any]]:
        """All entries for a skill."""
        return await self.find({"skillId": skill_id})

    async def find_all(self) -> List[Dict[str, Any]]:
        """All entries."""
        return await self.find()


class ReviewRepository(FeedbackRepository):
    """Review repository implementation."""

    collection_name = collections.REVIEWS
    kind = FeedbackKind.REVIEW


class ReportRepository(FeedbackRepository):
    """Report repository implementation."""

    collection_name = collections.REPORTS
    kind = FeedbackKind.REPORT
