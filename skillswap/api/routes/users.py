"""User and administration endpoints."""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, Body, HTTPException, status

from skillswap.api.dependencies import (
    RegisterUserUseCaseDep,
    UpdateUserProfileUseCaseDep,
    UserRepositoryDep,
)
from skillswap.api.schemas.common import (
    DeleteAcknowledgment,
    MessageResponse,
    UpdateAcknowledgment,
)
from skillswap.api.schemas.user import RoleResponse, RoleUpdateRequest, UserProfileRequest
from skillswap.application.services.query_builder import build_users_query
from skillswap.domain.exceptions.store_error import StoreError
from skillswap.infrastructure.database.documents import (
    delete_ack,
    serialize_document,
    serialize_documents,
    update_ack,
)

logger = structlog.get_logger()
router = APIRouter(tags=["users"])


@router.post("/users/{email}")
async def register_user(
    email: str,
    use_case: RegisterUserUseCaseDep,
    profile: Optional[UserProfileRequest] = None,
) -> Dict[str, Any]:
    """Create the user on first contact, otherwise return the stored user."""
    payload = profile.model_dump(exclude_none=True) if profile else {}
    try:
        user = await use_case.execute(email, payload)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save user",
        )

    return serialize_document(user)


@router.get("/users/role/{email}", response_model=RoleResponse)
async def get_user_role(email: str, user_repository: UserRepositoryDep):
    """Role of a user."""
    try:
        user = await user_repository.get_by_email(email)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user role",
        )

    return {"role": user.get("role") if user else None}


@router.get("/user/{email}")
async def get_user(email: str, user_repository: UserRepositoryDep) -> Optional[Dict[str, Any]]:
    """Fetch a user by email, null when unknown."""
    try:
        user = await user_repository.get_by_email(email)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user",
        )

    return serialize_document(user)


@router.patch("/user/{email}", response_model=MessageResponse)
async def update_user(
    email: str,
    use_case: UpdateUserProfileUseCaseDep,
    changes: Dict[str, Any] = Body(...),
):
    """Partially update a user's profile."""
    try:
        await use_case.execute(email, changes)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user",
        )

    return {"message": "Profile updated successfully"}


@router.get("/allUsers")
async def list_users(
    user_repository: UserRepositoryDep,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Search users by name, one-based pages."""
    query = build_users_query(search=search, page=page, limit=limit)
    try:
        users, total = await user_repository.find_page(query)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch users",
        )

    logger.debug("Users listed", returned=len(users), total=total)
    return serialize_documents(users)


@router.patch("/make-role/{user_id}", response_model=UpdateAcknowledgment)
async def make_role(
    user_id: str,
    update: RoleUpdateRequest,
    user_repository: UserRepositoryDep,
):
    """Change a user's role."""
    try:
        result = await user_repository.update_role(user_id, update.role)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user role",
        )

    logger.info("User role changed", user_id=user_id, role=update.role.value)
    return update_ack(result)


@router.delete("/delete-user/{user_id}", response_model=DeleteAcknowledgment)
async def delete_user(user_id: str, user_repository: UserRepositoryDep):
    """Remove a user."""
    try:
        result = await user_repository.delete_by_id(user_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete user",
        )

    logger.info("User deleted", user_id=user_id, deleted=result.deleted_count)
    return delete_ack(result)
