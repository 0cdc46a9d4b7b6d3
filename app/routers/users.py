"""User profile endpoints."""
from typing import List

from fastapi import APIRouter, Depends, status

from app.core.store import UserStore, get_store
from app.dependencies.profile import PROFILE_REQUEST_BODY, profile_body
from app.schemas.user import UserProfile
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserProfile])
async def list_users(store: UserStore = Depends(get_store)):
    return UserService.list_users(store)


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(user_id: str, store: UserStore = Depends(get_store)):
    return UserService.get_user(store, user_id)


@router.post(
    "",
    response_model=UserProfile,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=PROFILE_REQUEST_BODY,
)
async def create_user(
    payload: UserProfile = Depends(profile_body),
    store: UserStore = Depends(get_store),
):
    return UserService.create_user(store, payload)


@router.put("/{user_id}", response_model=UserProfile, openapi_extra=PROFILE_REQUEST_BODY)
async def update_user(
    user_id: str,
    payload: UserProfile = Depends(profile_body),
    store: UserStore = Depends(get_store),
):
    return UserService.update_user(store, user_id, payload)
