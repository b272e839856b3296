"""
User Handler

    PATCH  /api/users/me         edit own profile
    DELETE /api/users/me         delete own account and everything it owns
    GET    /api/users/{user_id}  public profile of any user
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from booknotes.shared.schemas.user import PublicUserResponse, UserResponse, UserUpdate
from booknotes.shared.services.user_service import UserService
from booknotes.api.dependencies import CurrentUser
from booknotes.api.dependencies.services import get_user_service


router = APIRouter()


@router.patch("/me", response_model=UserResponse)
async def update_me(
    data: UserUpdate,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """Update name, address or avatar. Omitted fields are left unchanged."""
    user = await user_service.update_profile(
        current_user.id,
        name=data.name,
        address=data.address,
        avatar_url=data.avatar_url,
    )
    return UserResponse.from_user(user)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_me(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    await user_service.delete_account(current_user.id)


@router.get("/{user_id}", response_model=PublicUserResponse)
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.get_profile(user_id)
    return PublicUserResponse.from_user(user)
