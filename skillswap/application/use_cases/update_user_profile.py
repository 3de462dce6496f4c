"""User profile update use case implementation."""

from typing import Any, Dict

from skillswap.application.interfaces.repositories import UserRepositoryInterface
from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.not_found_error import NotFoundError

logger = get_logger(__name__)

# Identity and role change only through their dedicated endpoints
PROTECTED_FIELDS = frozenset({"_id", "email", "role"})


class UpdateUserProfileUseCase:
    """Use case for partially updating a user's profile by email."""

    def __init__(self, user_repo: UserRepositoryInterface):
        self.user_repo = user_repo

    async def execute(self, email: str, changes: Dict[str, Any]) -> int:
        """Apply ``changes`` and return the number of modified documents."""
        updates = {
            key: value for key, value in changes.items() if key not in PROTECTED_FIELDS
        }

        if not updates:
            user = await self.user_repo.get_by_email(email)
            if not user:
                raise NotFoundError("User", email)
            return 0

        result = await self.user_repo.update_profile(email, updates)
        if result.matched_count == 0:
            raise NotFoundError("User", email)

        logger.info(
            "User profile updated",
            email=email,
            fields=sorted(updates),
            modified=result.modified_count,
        )
        return result.modified_count
