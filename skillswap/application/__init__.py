"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the application.
"""

from .interfaces.repositories import (
    CategoryRepositoryInterface,
    ExchangeRepositoryInterface,
    FeedbackRepositoryInterface,
    SavedSkillRepositoryInterface,
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from .interfaces.services import TransactionServiceInterface
from .services.query_builder import ListQuery
from .use_cases.record_feedback import RecordFeedbackUseCase
from .use_cases.register_user import RegisterUserUseCase
from .use_cases.transition_exchange import TransitionExchangeUseCase
from .use_cases.update_user_profile import UpdateUserProfileUseCase

__all__ = [
    # Interfaces
    "CategoryRepositoryInterface",
    "ExchangeRepositoryInterface",
    "FeedbackRepositoryInterface",
    "SavedSkillRepositoryInterface",
    "SkillRepositoryInterface",
    "UserRepositoryInterface",
    "TransactionServiceInterface",
    # Services
    "ListQuery",
    # Use Cases
    "RecordFeedbackUseCase",
    "RegisterUserUseCase",
    "TransitionExchangeUseCase",
    "UpdateUserProfileUseCase",
]
