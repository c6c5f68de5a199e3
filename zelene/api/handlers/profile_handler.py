"""
Profile Handler

    GET   /profile/me          current member's profile
    PATCH /profile/me          partial settings update
    GET   /profile/{user_id}   public profile
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from zelene.api.dependencies import CurrentUser
from zelene.api.dependencies.services import get_profile_service
from zelene.shared.schemas.profile import ProfileResponse, ProfileUpdateRequest
from zelene.shared.services.profile_service import ProfileService


router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
async def get_current_profile(
    current_user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
):
    """Profile of the signed-in member."""
    return await service.get_current_profile(current_user["user_id"])


@router.patch("/me", response_model=ProfileResponse)
async def update_profile(
    data: ProfileUpdateRequest,
    current_user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
):
    """
    Update any subset of account, profile and social fields.

    Raises:
        400: Invalid field values
        409: Username or email already exists
    """
    return await service.update_profile(current_user["user_id"], data)


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
):
    """Public profile of any user."""
    return await service.get_profile(user_id)
