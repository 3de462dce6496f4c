"""Exchange status transition use case implementation."""

from dataclasses import dataclass, field
from typing import List, Optional

from skillswap.application.interfaces.repositories import (
    ExchangeRepositoryInterface,
    SkillRepositoryInterface,
)
from skillswap.application.interfaces.services import TransactionServiceInterface
from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.conflict_error import ExchangeAlreadyAcceptedError
from skillswap.domain.exceptions.not_found_error import NotFoundError
from skillswap.domain.exceptions.validation_error import RequiredFieldError
from skillswap.domain.value_objects.exchange_status import ExchangeStatus

logger = get_logger(__name__)


@dataclass
class TransitionExchangeRequest:
    """Requested status change for one exchange.

    Skill identifiers default to the ones stored on the exchange.
    """

    exchange_id: str
    status: ExchangeStatus
    creator_skill_id: Optional[str] = None
    application_skill_id: Optional[str] = None


@dataclass
class TransitionExchangeResult:
    """Outcome of an applied transition."""

    exchange_id: str
    previous_status: Optional[str]
    status: ExchangeStatus
    unavailable_skill_ids: List[str] = field(default_factory=list)


class TransitionExchangeUseCase:
    """Use case for moving an exchange to a new status.

    Accepting an exchange also marks both exchanged skills unavailable. The
    status write and the skill writes commit together or not at all.
    """

    def __init__(
        self,
        exchange_repo: ExchangeRepositoryInterface,
        skill_repo: SkillRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.exchange_repo = exchange_repo
        self.skill_repo = skill_repo
        self.transaction_service = transaction_service

    async def execute(self, request: TransitionExchangeRequest) -> TransitionExchangeResult:
        """Validate and apply the transition."""
        target = ExchangeStatus(request.status)

        # 1. Load exchange
        exchange = await self.exchange_repo.get_by_id(request.exchange_id)
        if not exchange:
            raise NotFoundError("Exchange", request.exchange_id)

        # 2. Guard: nothing moves out of Accepted
        previous_status = exchange.get("status")
        current = ExchangeStatus.from_stored(previous_status)
        if current is not None and not current.allows_transition():
            logger.info(
                "Transition rejected for accepted exchange",
                exchange_id=request.exchange_id,
                requested_status=target.value,
            )
            raise ExchangeAlreadyAcceptedError(request.exchange_id)

        # 3. Resolve cascade targets before opening the transaction
        skill_ids: List[str] = []
        if target.cascades_to_skills():
            skill_ids = [
                self._resolve_skill_id(
                    request.creator_skill_id, exchange, "creatorSkillId"
                ),
                self._resolve_skill_id(
                    request.application_skill_id, exchange, "applicationSkillId"
                ),
            ]

        # 4. Apply status and cascade atomically
        async def apply(session) -> None:
            result = await self.exchange_repo.update_status(
                request.exchange_id, target, session=session
            )
            if result.matched_count == 0:
                # Accepted by a concurrent request after step 2
                raise ExchangeAlreadyAcceptedError(request.exchange_id)

            for skill_id in skill_ids:
                await self.skill_repo.mark_unavailable(skill_id, session=session)

        await self.transaction_service.execute_in_transaction(apply)

        logger.info(
            "Exchange status updated",
            exchange_id=request.exchange_id,
            previous_status=previous_status,
            status=target.value,
            unavailable_skill_ids=skill_ids,
        )

        return TransitionExchangeResult(
            exchange_id=request.exchange_id,
            previous_status=previous_status,
            status=target,
            unavailable_skill_ids=skill_ids,
        )

    @staticmethod
    def _resolve_skill_id(
        requested: Optional[str], exchange: dict, field_name: str
    ) -> str:
        skill_id = requested or exchange.get(field_name)
        if not skill_id:
            raise RequiredFieldError(field_name)
        return str(skill_id)
