"""
Application interfaces package.
"""

from .repositories import (
    CategoryRepositoryInterface,
    ExchangeRepositoryInterface,
    FeedbackRepositoryInterface,
    SavedSkillRepositoryInterface,
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from .services import TransactionServiceInterface

__all__ = [
    "CategoryRepositoryInterface",
    "ExchangeRepositoryInterface",
    "FeedbackRepositoryInterface",
    "SavedSkillRepositoryInterface",
    "SkillRepositoryInterface",
    "UserRepositoryInterface",
    "TransactionServiceInterface",
]
