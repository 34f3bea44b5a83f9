"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel, Field

from qna.application.usecase.profile import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    TopProfilesRequest,
    TopProfilesUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from qna.domain.service import JWTService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing the caller's own profile."""

    username: str | None = Field(default=None, max_length=30)
    full_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=500)


@router.get("", response_model=ListProfilesResponse)
async def list_users(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
    limit: int = Query(default=100, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListProfilesResponse:
    """List profiles, highest reputation first."""
    return await list_profiles_use_case.execute(
        ListProfilesRequest(limit=limit, offset=offset)
    )


@router.get("/top", response_model=ListProfilesResponse)
async def top_users(
    top_profiles_use_case: FromDishka[TopProfilesUseCase],
    limit: int = Query(default=5, ge=1, le=20),
) -> ListProfilesResponse:
    """Leaderboard of the highest-reputation profiles."""
    return await top_profiles_use_case.execute(TopProfilesRequest(limit=limit))


@router.patch("/me", response_model=UpdateProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateProfileResponse:
    """Update the authenticated user's profile.

    Omitted fields are unchanged.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user_id,
            username=request.username,
            full_name=request.full_name,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
    )


@router.get("/{username}", response_model=GetProfileResponse)
async def get_user_profile(
    username: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> GetProfileResponse:
    """Get a user's public profile and their recent questions."""
    return await get_profile_use_case.execute(GetProfileRequest(username=username))
