"""User registration use case implementation."""

from typing import Any, Dict, Optional

from skillswap.application.interfaces.repositories import UserRepositoryInterface
from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.validation_error import RequiredFieldError
from skillswap.domain.value_objects.user_role import UserRole

logger = get_logger(__name__)


class RegisterUserUseCase:
    """Use case for creating a user on first contact.

    Repeated calls for the same email return the stored document untouched.
    """

    def __init__(self, user_repo: UserRepositoryInterface):
        self.user_repo = user_repo

    async def execute(
        self, email: str, profile: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Return the user stored under ``email``, creating it if needed."""
        if not email:
            raise RequiredFieldError("email")

        existing = await self.user_repo.get_by_email(email)
        if existing:
            logger.debug("User already registered", email=email)
            return existing

        document = dict(profile or {})
        document.pop("_id", None)
        document["email"] = email
        document["role"] = UserRole.default().value

        user = await self.user_repo.create(document)

        logger.info("User registered", email=email, user_id=str(user.get("_id")))
        return user
