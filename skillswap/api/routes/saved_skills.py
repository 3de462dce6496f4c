"""Saved skill endpoints."""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, status

from skillswap.api.dependencies import SavedSkillRepositoryDep
from skillswap.api.schemas.common import DeleteAcknowledgment, InsertAcknowledgment
from skillswap.api.schemas.skill import SavedSkillCreateRequest, SavedSkillPageResponse
from skillswap.application.services.query_builder import build_saved_skills_query
from skillswap.domain.exceptions.store_error import StoreError
from skillswap.infrastructure.database.documents import (
    delete_ack,
    insert_ack,
    serialize_documents,
)

logger = structlog.get_logger()
router = APIRouter(tags=["saved-skills"])


@router.post("/save-skill", response_model=InsertAcknowledgment)
async def save_skill(
    saved_skill: SavedSkillCreateRequest,
    saved_skill_repository: SavedSkillRepositoryDep,
):
    """Save a skill to a user's favorites."""
    try:
        result = await saved_skill_repository.create(
            saved_skill.model_dump(exclude_none=True)
        )
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save skill",
        )

    logger.info(
        "Skill saved",
        skill_id=saved_skill.skillId,
        saved_user_email=saved_skill.savedUserEmail,
    )
    return insert_ack(result)


@router.get("/get-saved-skills", response_model=SavedSkillPageResponse)
async def list_saved_skills(
    saved_skill_repository: SavedSkillRepositoryDep,
    email: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
):
    """A user's saved skills, searchable by title, one-based pages."""
    query = build_saved_skills_query(email=email, search=search, page=page, limit=limit)
    try:
        skills, total = await saved_skill_repository.find_page(query)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch saved skills",
        )

    return {"total": total, "skills": serialize_documents(skills)}


@router.delete("/delete-saved-skill/{skill_id}", response_model=DeleteAcknowledgment)
async def delete_saved_skill(
    skill_id: str,
    saved_skill_repository: SavedSkillRepositoryDep,
    email: Optional[str] = None,
):
    """Remove one saved entry for a skill, the caller's when ``email`` is given."""
    try:
        result = await saved_skill_repository.delete_by_skill_id(skill_id, email=email)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete saved skill",
        )

    logger.info(
        "Saved skill deleted",
        skill_id=skill_id,
        deleted=result.deleted_count,
    )
    return delete_ack(result)
