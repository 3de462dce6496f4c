"""
Exchange status value object.
"""

from enum import Enum
from typing import Any, Optional


class ExchangeStatus(str, Enum):
    """Exchange request status enumeration."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"

    @classmethod
    def from_stored(cls, value: Any) -> Optional["ExchangeStatus"]:
        """Status of a stored exchange, or None when missing or unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return None

    def allows_transition(self) -> bool:
        """Check if an exchange in this status may still change status."""
        return self != ExchangeStatus.ACCEPTED

    def cascades_to_skills(self) -> bool:
        """Check if moving to this status marks the exchanged skills unavailable."""
        return self == ExchangeStatus.ACCEPTED
