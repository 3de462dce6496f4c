"""
Use cases package.

This package contains the business logic use cases that orchestrate
the repositories and transaction service.
"""

from .record_feedback import RecordFeedbackUseCase
from .register_user import RegisterUserUseCase
from .transition_exchange import (
    TransitionExchangeRequest,
    TransitionExchangeResult,
    TransitionExchangeUseCase,
)
from .update_user_profile import UpdateUserProfileUseCase

__all__ = [
    "RecordFeedbackUseCase",
    "RegisterUserUseCase",
    "TransitionExchangeRequest",
    "TransitionExchangeResult",
    "TransitionExchangeUseCase",
    "UpdateUserProfileUseCase",
]
