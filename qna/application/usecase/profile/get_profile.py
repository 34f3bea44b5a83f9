"""Get profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.question import QuestionItem
from qna.domain.error import NotFoundError
from qna.domain.model.profile import Profile
from qna.domain.service import ProfileService, QuestionService
from qna.domain.value import Username


class ProfileItem(BaseModel):
    """Public profile in responses."""

    user_id: str
    username: str
    full_name: str | None
    avatar_url: str | None
    bio: str | None
    reputation: int
    is_admin: bool
    created_at: datetime
    best_answer_count: int = 0  # Answers marked best, derived from answers

    @classmethod
    def from_profile(
        cls, profile: Profile, best_answer_count: int = 0
    ) -> "ProfileItem":
        return cls(
            user_id=str(profile.id),
            username=profile.username.root,
            full_name=profile.full_name,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            reputation=profile.reputation,
            is_admin=profile.is_admin,
            created_at=profile.created_at,
            best_answer_count=best_answer_count,
        )


class GetProfileRequest(BaseModel):
    """Get profile request."""

    username: str
    questions_limit: int = 10


class GetProfileResponse(BaseModel):
    """Profile with the user's most recent questions."""

    profile: ProfileItem
    questions: list[QuestionItem]


class GetProfileUseCase(BaseUseCase[GetProfileRequest, GetProfileResponse]):
    """Use case for viewing a user's public profile."""

    def __init__(
        self, profile_service: ProfileService, question_service: QuestionService
    ) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
            question_service: Question domain service
        """
        self.profile_service = profile_service
        self.question_service = question_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If no profile has the username
        """
        with logfire.span("get_profile.execute", username=request.username):
            try:
                username = Username(request.username)
            except PydanticValidationError as e:
                # A malformed username can never exist
                raise NotFoundError("Profile", request.username) from e

            profile = await self.profile_service.get_profile_by_username(username)
            if not profile:
                raise NotFoundError("Profile", request.username)

            questions = await self.question_service.list_questions_by_author(
                profile.id, limit=request.questions_limit
            )

            return GetProfileResponse(
                profile=ProfileItem.from_profile(
                    profile,
                    await self.profile_service.best_answer_count(profile.id),
                ),
                questions=[QuestionItem.from_question(q) for q in questions],
            )
