"""
Database repositories package.
"""

from .category_repository import CategoryRepository
from .exchange_repository import ExchangeRepository
from .feedback_repository import FeedbackRepository, ReportRepository, ReviewRepository
from .saved_skill_repository import SavedSkillRepository
from .skill_repository import SkillRepository
from .transaction_repository import TransactionService
from .user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "ExchangeRepository",
    "FeedbackRepository",
    "ReportRepository",
    "ReviewRepository",
    "SavedSkillRepository",
    "SkillRepository",
    "TransactionService",
    "UserRepository",
]
