"""
User-related API schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from skillswap.domain.value_objects.user_role import UserRole


class UserProfileRequest(BaseModel):
    """User profile payload. Any ``role`` sent here is ignored."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None


class RoleUpdateRequest(BaseModel):
    """New role for a user."""

    role: UserRole


class RoleResponse(BaseModel):
    """Role of a user, null when the user is unknown."""

    role: Optional[str] = None
