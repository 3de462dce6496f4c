"""Exchange request endpoints."""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, HTTPException, status

from skillswap.api.dependencies import ExchangeRepositoryDep, TransitionExchangeUseCaseDep
from skillswap.api.schemas.common import InsertAcknowledgment, MessageResponse
from skillswap.api.schemas.exchange import (
    ExchangeCreateRequest,
    ExchangePageResponse,
    ExchangeStatusUpdateRequest,
)
from skillswap.application.services.query_builder import build_exchanges_query
from skillswap.application.use_cases.transition_exchange import TransitionExchangeRequest
from skillswap.domain.exceptions.store_error import StoreError
from skillswap.domain.value_objects.exchange_status import ExchangeStatus
from skillswap.infrastructure.database.documents import insert_ack, serialize_documents
from skillswap.infrastructure.monitoring.metrics import record_exchange_transition

logger = structlog.get_logger()
router = APIRouter(tags=["exchanges"])


@router.post("/exchanges", response_model=InsertAcknowledgment)
async def create_exchange(
    exchange_data: ExchangeCreateRequest,
    exchange_repository: ExchangeRepositoryDep,
):
    """Request an exchange of skills. The request always starts ``Pending``."""
    document = exchange_data.model_dump(exclude_none=True)
    document["status"] = ExchangeStatus.PENDING.value
    try:
        result = await exchange_repository.create(document)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create exchange request",
        )

    logger.info(
        "Exchange requested",
        exchange_id=str(result.inserted_id),
        creator_email=exchange_data.creatorEmail,
        application_user_email=exchange_data.applicationUserEmail,
    )
    return insert_ack(result)


@router.get("/exchanges/{email}", response_model=ExchangePageResponse)
async def list_exchanges(
    email: str,
    exchange_repository: ExchangeRepositoryDep,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    """Exchange requests created by a user, searchable by title, one-based pages."""
    query = build_exchanges_query(email=email, search=search, page=page, limit=limit)
    try:
        requests, total = await exchange_repository.find_page(query)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch exchange requests",
        )

    return {"total": total, "requests": serialize_documents(requests)}


@router.patch("/exchanges/{exchange_id}", response_model=MessageResponse)
async def update_exchange_status(
    exchange_id: str,
    update: ExchangeStatusUpdateRequest,
    use_case: TransitionExchangeUseCaseDep,
):
    """Move an exchange to a new status. Accepting it retires both skills."""
    request = TransitionExchangeRequest(
        exchange_id=exchange_id,
        status=update.status,
        creator_skill_id=update.creatorSkillId,
        application_skill_id=update.applicationSkillId,
    )
    try:
        result = await use_case.execute(request)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update exchange status",
        )

    record_exchange_transition(result.status.value)
    return {"message": "Exchange status updated successfully"}


@router.get("/accepted-exchanges/{email}")
async def list_accepted_exchanges(
    email: str, exchange_repository: ExchangeRepositoryDep
) -> List[Dict[str, Any]]:
    """Accepted exchanges where the user is either party."""
    try:
        exchanges = await exchange_repository.find_accepted_for(email)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch accepted exchanges",
        )

    return serialize_documents(exchanges)
