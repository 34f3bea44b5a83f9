"""List profiles use cases."""

from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.model.profile import Profile
from qna.domain.service import ProfileService

from .get_profile import ProfileItem


async def profile_items(
    profile_service: ProfileService, profiles: list[Profile]
) -> list[ProfileItem]:
    """Build response items with each profile's best-answer count."""
    counts = await profile_service.best_answer_counts([p.id for p in profiles])
    return [ProfileItem.from_profile(p, counts[p.id]) for p in profiles]


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    limit: int = Field(default=100, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListProfilesResponse(BaseModel):
    """Profiles ordered by reputation, highest first."""

    profiles: list[ProfileItem]


class ListProfilesUseCase(BaseUseCase[ListProfilesRequest, ListProfilesResponse]):
    """Use case for the users directory."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        profiles = await self.profile_service.list_profiles(
            limit=request.limit, offset=request.offset
        )
        return ListProfilesResponse(
            profiles=await profile_items(self.profile_service, profiles)
        )


class TopProfilesRequest(BaseModel):
    """Top profiles request."""

    limit: int = Field(default=5, ge=1, le=20)


class TopProfilesUseCase(BaseUseCase[TopProfilesRequest, ListProfilesResponse]):
    """Use case for the reputation leaderboard."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: TopProfilesRequest) -> ListProfilesResponse:
        profiles = await self.profile_service.top_profiles(limit=request.limit)
        return ListProfilesResponse(
            profiles=await profile_items(self.profile_service, profiles)
        )
