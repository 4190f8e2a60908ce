import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import PlainTextResponse
from accounts.api.dependencies import get_user_service
from accounts.schemas.user import (
    UserPage,
    UserPassword,
    UserRegistration,
    UserResponse,
    UserUpdate,
)
from accounts.services.user_service import UserService
from accounts.storage.pagination import MAX_PAGE_NUMBER, PageRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"])

# Ids are 64-bit integers in the database
UserId = Path(..., ge=1, le=2**63 - 1)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserRegistration, service: UserService = Depends(get_user_service)):
    """Register a new user"""
    logger.info(f"Creating user: {payload.email}")
    return service.create_user(payload)


@router.get("", response_model=UserPage)
def get_all_users(
    page: Optional[int] = Query(None, le=MAX_PAGE_NUMBER),
    size: Optional[int] = Query(None),
    sort: Optional[List[str]] = Query(None),
    service: UserService = Depends(get_user_service)
):
    """List users one page at a time"""
    logger.info("Getting all users")
    result = service.get_users(PageRequest.of(page, size, sort))
    return result.to_dict()


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(user_id: int = UserId, service: UserService = Depends(get_user_service)):
    """Get a specific user"""
    logger.info(f"Getting user: {user_id}")
    return service.get_user_by_id(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    payload: UserUpdate,
    user_id: int = UserId,
    service: UserService = Depends(get_user_service)
):
    """Update name and/or email"""
    logger.info(f"Updating user: {user_id}")
    return service.update_user(user_id, payload)


@router.patch("/{user_id}", response_class=PlainTextResponse)
def change_password(
    payload: UserPassword,
    user_id: int = UserId,
    service: UserService = Depends(get_user_service)
):
    """Replace the user's password"""
    logger.info(f"Change password for user with id: {user_id}")
    return service.change_password(user_id, payload)


@router.delete("/{user_id}", response_class=PlainTextResponse)
def delete_user(user_id: int = UserId, service: UserService = Depends(get_user_service)):
    """Delete a user permanently"""
    logger.info(f"Deleting user with id: {user_id}")
    return service.delete_user(user_id)
