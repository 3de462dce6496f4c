"""
Unit tests for RegisterUserUseCase.
"""

import pytest
from bson import ObjectId

from skillswap.application.use_cases.register_user import RegisterUserUseCase
from skillswap.domain.exceptions.validation_error import RequiredFieldError


class TestRegisterUserUseCase:
    """Test cases for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_creates_new_user_with_default_role(self, mock_user_repository):
        """A first visit stores the profile as a plain user."""
        mock_user_repository.create.side_effect = lambda doc: {**doc, "_id": ObjectId()}
        use_case = RegisterUserUseCase(mock_user_repository)

        user = await use_case.execute(
            "ana@example.com",
            {"name": "Ana", "email": "spoofed@example.com", "role": "admin", "_id": "x"},
        )

        stored = mock_user_repository.create.await_args.args[0]
        assert stored == {"name": "Ana", "email": "ana@example.com", "role": "user"}
        assert user["role"] == "user"

    @pytest.mark.asyncio
    async def test_existing_user_is_returned_untouched(self, mock_user_repository):
        existing = {"_id": ObjectId(), "email": "ana@example.com", "role": "admin"}
        mock_user_repository.get_by_email.return_value = existing
        use_case = RegisterUserUseCase(mock_user_repository)

        user = await use_case.execute("ana@example.com", {"name": "Other"})

        assert user is existing
        mock_user_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_profile_is_optional(self, mock_user_repository):
        mock_user_repository.create.side_effect = lambda doc: doc
        use_case = RegisterUserUseCase(mock_user_repository)

        user = await use_case.execute("ana@example.com")

        assert user == {"email": "ana@example.com", "role": "user"}

    @pytest.mark.asyncio
    async def test_email_required(self, mock_user_repository):
        use_case = RegisterUserUseCase(mock_user_repository)

        with pytest.raises(RequiredFieldError):
            await use_case.execute("")
