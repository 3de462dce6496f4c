"""
FastAPI dependency injection container.
"""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from skillswap.application.use_cases.record_feedback import RecordFeedbackUseCase
from skillswap.application.use_cases.register_user import RegisterUserUseCase
from skillswap.application.use_cases.transition_exchange import (
    TransitionExchangeUseCase,
)
from skillswap.application.use_cases.update_user_profile import (
    UpdateUserProfileUseCase,
)
from skillswap.config.database import get_client, get_database
from skillswap.config.logging import get_logger
from skillswap.infrastructure.database.repositories.category_repository import (
    CategoryRepository,
)
from skillswap.infrastructure.database.repositories.exchange_repository import (
    ExchangeRepository,
)
from skillswap.infrastructure.database.repositories.feedback_repository import (
    ReportRepository,
    ReviewRepository,
)
from skillswap.infrastructure.database.repositories.saved_skill_repository import (
    SavedSkillRepository,
)
from skillswap.infrastructure.database.repositories.skill_repository import (
    SkillRepository,
)
from skillswap.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from skillswap.infrastructure.database.repositories.user_repository import (
    UserRepository,
)
from skillswap.infrastructure.monitoring.health_checks import HealthChecker

logger = get_logger(__name__)


# Database Dependencies
async def get_skill_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> SkillRepository:
    """Get skill repository instance."""
    return SkillRepository(db)


async def get_category_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> CategoryRepository:
    """Get category repository instance."""
    return CategoryRepository(db)


async def get_exchange_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> ExchangeRepository:
    """Get exchange repository instance."""
    return ExchangeRepository(db)


async def get_saved_skill_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> SavedSkillRepository:
    """Get saved skill repository instance."""
    return SavedSkillRepository(db)


async def get_review_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> ReviewRepository:
    """Get review repository instance."""
    return ReviewRepository(db)


async def get_report_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> ReportRepository:
    """Get report repository instance."""
    return ReportRepository(db)


async def get_user_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> UserRepository:
    """Get user repository instance."""
    return UserRepository(db)


# Service Dependencies
async def get_transaction_service() -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(get_client())


async def get_health_checker(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> HealthChecker:
    """Get health checker instance."""
    return HealthChecker(db)


# Type aliases for cleaner dependency injection
SkillRepositoryDep = Annotated[SkillRepository, Depends(get_skill_repository)]
CategoryRepositoryDep = Annotated[CategoryRepository, Depends(get_category_repository)]
ExchangeRepositoryDep = Annotated[ExchangeRepository, Depends(get_exchange_repository)]
SavedSkillRepositoryDep = Annotated[
    SavedSkillRepository, Depends(get_saved_skill_repository)
]
ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
ReportRepositoryDep = Annotated[ReportRepository, Depends(get_report_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
HealthCheckerDep = Annotated[HealthChecker, Depends(get_health_checker)]


# Use case Dependencies
async def get_transition_exchange_use_case(
    exchange_repo: ExchangeRepositoryDep,
    skill_repo: SkillRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> TransitionExchangeUseCase:
    """Get exchange transition use case."""
    return TransitionExchangeUseCase(
        exchange_repo=exchange_repo,
        skill_repo=skill_repo,
        transaction_service=transaction_service,
    )


async def get_review_use_case(review_repo: ReviewRepositoryDep) -> RecordFeedbackUseCase:
    """Get review submission use case."""
    return RecordFeedbackUseCase(review_repo)


async def get_report_use_case(report_repo: ReportRepositoryDep) -> RecordFeedbackUseCase:
    """Get report submission use case."""
    return RecordFeedbackUseCase(report_repo)


async def get_register_user_use_case(user_repo: UserRepositoryDep) -> RegisterUserUseCase:
    """Get user registration use case."""
    return RegisterUserUseCase(user_repo)


async def get_update_user_profile_use_case(
    user_repo: UserRepositoryDep,
) -> UpdateUserProfileUseCase:
    """Get user profile update use case."""
    return UpdateUserProfileUseCase(user_repo)


TransitionExchangeUseCaseDep = Annotated[
    TransitionExchangeUseCase, Depends(get_transition_exchange_use_case)
]
ReviewUseCaseDep = Annotated[RecordFeedbackUseCase, Depends(get_review_use_case)]
ReportUseCaseDep = Annotated[RecordFeedbackUseCase, Depends(get_report_use_case)]
RegisterUserUseCaseDep = Annotated[
    RegisterUserUseCase, Depends(get_register_user_use_case)
]
UpdateUserProfileUseCaseDep = Annotated[
    UpdateUserProfileUseCase, Depends(get_update_user_profile_use_case)
]
