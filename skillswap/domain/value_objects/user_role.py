"""
User role value object.
"""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration."""

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def default(cls) -> "UserRole":
        """Role assigned to every newly created user."""
        return cls.USER
