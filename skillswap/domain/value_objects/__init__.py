"""
Domain value objects package.
"""

from .exchange_status import ExchangeStatus
from .feedback_kind import FeedbackKind
from .user_role import UserRole

__all__ = [
    "ExchangeStatus",
    "FeedbackKind",
    "UserRole",
]
