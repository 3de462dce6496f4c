"""Review/report submission use case implementation."""

from typing import Any, Dict

from pymongo.results import InsertOneResult

from skillswap.application.interfaces.repositories import FeedbackRepositoryInterface
from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.conflict_error import DuplicateEntryError
from skillswap.domain.exceptions.validation_error import RequiredFieldError

logger = get_logger(__name__)


class RecordFeedbackUseCase:
    """Use case for storing a review or report, at most one per author and skill."""

    def __init__(self, feedback_repo: FeedbackRepositoryInterface):
        self.feedback_repo = feedback_repo

    async def execute(self, feedback: Dict[str, Any]) -> InsertOneResult:
        """Insert ``feedback`` unless its author already covered this skill."""
        kind = self.feedback_repo.kind
        owner_email = feedback.get(kind.owner_field)
        skill_id = feedback.get("skillId")

        if not owner_email:
            raise RequiredFieldError(kind.owner_field)
        if not skill_id:
            raise RequiredFieldError("skillId")

        existing = await self.feedback_repo.find_by_owner_and_skill(owner_email, skill_id)
        if existing:
            logger.info(
                "Duplicate feedback rejected",
                kind=kind.value,
                owner_email=owner_email,
                skill_id=skill_id,
            )
            raise DuplicateEntryError(
                kind.value, owner_email, skill_id, kind.duplicate_message
            )

        result = await self.feedback_repo.create(feedback)

        logger.info(
            "Feedback recorded",
            kind=kind.value,
            feedback_id=str(result.inserted_id),
            skill_id=skill_id,
        )
        return result
