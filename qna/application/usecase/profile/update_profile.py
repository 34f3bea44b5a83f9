"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import UnauthenticatedError, ValidationError
from qna.domain.service import ProfileService
from qna.domain.value import UserId, Username

from .get_profile import ProfileItem


class UpdateProfileRequest(BaseModel):
    """Update profile request. Omitted fields are left unchanged."""

    user_id: str | None = None  # From the session, None if anonymous
    username: str | None = None
    full_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    profile: ProfileItem


class UpdateProfileUseCase(BaseUseCase[UpdateProfileRequest, UpdateProfileResponse]):
    """Use case for editing the caller's own profile.

    Reputation and admin status cannot be changed here.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            UnauthenticatedError: If there is no caller
            ValidationError: If the username is malformed
            NotFoundError: If the caller has no profile
            BusinessRuleViolationError: If the username is taken
        """
        if request.user_id is None:
            raise UnauthenticatedError("update your profile")

        username = None
        if request.username is not None:
            try:
                username = Username(request.username.strip())
            except PydanticValidationError as e:
                raise ValidationError(e.errors()[0]["msg"]) from e

        profile = await self.profile_service.update_profile(
            UserId(UUID(request.user_id)),
            username=username,
            full_name=request.full_name,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
        best_answers = await self.profile_service.best_answer_count(profile.id)
        return UpdateProfileResponse(
            profile=ProfileItem.from_profile(profile, best_answers)
        )
