"""Review and report endpoints."""

from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, HTTPException, status

from skillswap.api.dependencies import (
    ReportRepositoryDep,
    ReportUseCaseDep,
    ReviewRepositoryDep,
    ReviewUseCaseDep,
)
from skillswap.api.schemas.common import DeleteAcknowledgment, InsertAcknowledgment
from skillswap.api.schemas.feedback import (
    ReportCreateRequest,
    ReviewCreateRequest,
    ReviewsAndReportsResponse,
)
from skillswap.domain.exceptions.conflict_error import DuplicateEntryError
from skillswap.domain.exceptions.store_error import StoreError
from skillswap.infrastructure.database.documents import (
    delete_ack,
    insert_ack,
    serialize_documents,
)
from skillswap.infrastructure.monitoring.metrics import record_duplicate_feedback

logger = structlog.get_logger()
router = APIRouter(tags=["feedback"])


@router.post("/review", response_model=InsertAcknowledgment)
async def add_review(review: ReviewCreateRequest, use_case: ReviewUseCaseDep):
    """Review a skill, once per reviewer."""
    try:
        result = await use_case.execute(review.model_dump())
    except DuplicateEntryError:
        record_duplicate_feedback("review")
        raise
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add review",
        )

    return insert_ack(result)


@router.post("/report", response_model=InsertAcknowledgment)
async def add_report(report: ReportCreateRequest, use_case: ReportUseCaseDep):
    """Report a skill, once per reporter."""
    try:
        result = await use_case.execute(report.model_dump())
    except DuplicateEntryError:
        record_duplicate_feedback("report")
        raise
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add report",
        )

    return insert_ack(result)


@router.get("/reviews-and-reports/{skill_id}", response_model=ReviewsAndReportsResponse)
async def reviews_and_reports(
    skill_id: str,
    review_repository: ReviewRepositoryDep,
    report_repository: ReportRepositoryDep,
):
    """All reviews and reports left for a skill."""
    try:
        reviews = await review_repository.find_by_skill(skill_id)
        reports = await report_repository.find_by_skill(skill_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch reviews and reports",
        )

    return {
        "reviews": serialize_documents(reviews),
        "reports": serialize_documents(reports),
    }


@router.get("/all-reports")
async def list_reports(report_repository: ReportRepositoryDep) -> List[Dict[str, Any]]:
    """Every report, for moderation."""
    try:
        reports = await report_repository.find_all()
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch reports",
        )

    return serialize_documents(reports)


@router.delete("/delete-report/{report_id}", response_model=DeleteAcknowledgment)
async def delete_report(report_id: str, report_repository: ReportRepositoryDep):
    """Remove a report."""
    try:
        result = await report_repository.delete_by_id(report_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete report",
        )

    logger.info("Report deleted", report_id=report_id, deleted=result.deleted_count)
    return delete_ack(result)
