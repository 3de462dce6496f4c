"""Skill, category and trending endpoints."""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, HTTPException, Query, status

from skillswap.api.dependencies import CategoryRepositoryDep, SkillRepositoryDep
from skillswap.api.schemas.common import InsertAcknowledgment
from skillswap.api.schemas.skill import (
    SkillCreateRequest,
    SkillPageResponse,
    TrendingCategory,
)
from skillswap.application.services.query_builder import build_skills_query
from skillswap.domain.exceptions.store_error import StoreError
from skillswap.infrastructure.database.documents import (
    insert_ack,
    serialize_document,
    serialize_documents,
)

logger = structlog.get_logger()
router = APIRouter(tags=["skills"])

TRENDING_LIMIT = 5


@router.post("/create-skills", response_model=InsertAcknowledgment)
async def create_skill(skill_data: SkillCreateRequest, skill_repository: SkillRepositoryDep):
    """List a new skill."""
    try:
        result = await skill_repository.create(skill_data.model_dump(exclude_none=True))
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create skill",
        )

    logger.info(
        "Skill created",
        skill_id=str(result.inserted_id),
        creator_email=skill_data.creatorEmail,
    )
    return insert_ack(result)


@router.get("/get-skills", response_model=SkillPageResponse)
async def list_skills(
    skill_repository: SkillRepositoryDep,
    search: Optional[str] = Query(None, alias="searchParams"),
    page: Optional[str] = None,
    size: Optional[str] = None,
    sort_by_date: Optional[str] = Query(None, alias="sortByDate"),
):
    """Search skills by category, zero-based pages of ``size`` items."""
    query = build_skills_query(
        search=search, page=page, size=size, sort_by_date=sort_by_date
    )
    try:
        skills, count = await skill_repository.find_page(query)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch skills",
        )

    return {"skills": serialize_documents(skills), "count": count}


@router.get("/get-skill/{skill_id}")
async def get_skill(skill_id: str, skill_repository: SkillRepositoryDep) -> Optional[Dict[str, Any]]:
    """Fetch one skill, null when it does not exist."""
    try:
        skill = await skill_repository.get_by_id(skill_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch skill",
        )

    return serialize_document(skill)


@router.get("/get-skills/{email}")
async def list_skills_by_creator(
    email: str, skill_repository: SkillRepositoryDep
) -> List[Dict[str, Any]]:
    """All skills listed by one user."""
    try:
        skills = await skill_repository.find_by_creator(email)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user skills",
        )

    return serialize_documents(skills)


@router.get("/categories")
async def list_categories(category_repository: CategoryRepositoryDep) -> List[Dict[str, Any]]:
    """All skill categories."""
    try:
        categories = await category_repository.find_all()
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch categories",
        )

    return serialize_documents(categories)


@router.get("/trending-skills", response_model=List[TrendingCategory])
async def trending_skills(skill_repository: SkillRepositoryDep):
    """Top categories by number of listed skills."""
    try:
        return await skill_repository.trending_categories(limit=TRENDING_LIMIT)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch trending skills",
        )
