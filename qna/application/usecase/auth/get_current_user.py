"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.profile import ProfileItem
from qna.domain.service import ProfileService
from qna.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str | None = None  # From the session, None if anonymous


class GetCurrentUserResponse(BaseModel):
    """Current user, or null when nobody is signed in."""

    user: ProfileItem | None


class GetCurrentUserUseCase(BaseUseCase[GetCurrentUserRequest, GetCurrentUserResponse]):
    """Use case for resolving the session to a profile.

    Never fails for anonymous callers; a token for a profile that no
    longer exists also reads as signed out.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get current user use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        caller_id = UserId(UUID(request.user_id)) if request.user_id else None
        profile = await self.profile_service.current_user(caller_id)
        if profile is None:
            return GetCurrentUserResponse(user=None)

        best_answers = await self.profile_service.best_answer_count(profile.id)
        return GetCurrentUserResponse(
            user=ProfileItem.from_profile(profile, best_answers)
        )
