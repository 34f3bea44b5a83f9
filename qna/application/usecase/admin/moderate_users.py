"""Admin user moderation use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.profile import (
    ListProfilesResponse,
    ProfileItem,
    profile_items,
)
from qna.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    PartialMutationError,
    StoreFailureError,
)
from qna.domain.model.question import Question
from qna.domain.service import ProfileService, QuestionService, ScoreService, TagService
from qna.domain.value import UserId


def _caller(admin_id: str | None) -> UserId | None:
    return UserId(UUID(admin_id)) if admin_id else None


class AdminListUsersRequest(BaseModel):
    """Admin list users request."""

    admin_id: str | None = None  # From the session
    limit: int = Field(default=100, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class AdminListUsersUseCase(BaseUseCase[AdminListUsersRequest, ListProfilesResponse]):
    """Use case for listing every profile in the admin area."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: AdminListUsersRequest) -> ListProfilesResponse:
        await self.profile_service.require_admin(
            _caller(request.admin_id), "list users"
        )
        profiles = await self.profile_service.list_profiles(
            limit=request.limit, offset=request.offset
        )
        return ListProfilesResponse(
            profiles=await profile_items(self.profile_service, profiles)
        )


class GrantAdminRequest(BaseModel):
    """Grant admin request."""

    user_id: str  # Profile to promote
    admin_id: str | None = None  # From the session


class GrantAdminResponse(BaseModel):
    """Grant admin response."""

    profile: ProfileItem


class GrantAdminUseCase(BaseUseCase[GrantAdminRequest, GrantAdminResponse]):
    """Use case for making a user an administrator."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize grant admin use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GrantAdminRequest) -> GrantAdminResponse:
        """Execute grant admin flow.

        Raises:
            UnauthenticatedError: If there is no caller
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the target profile does not exist
        """
        admin = await self.profile_service.require_admin(
            _caller(request.admin_id), "grant admin"
        )
        profile = await self.profile_service.grant_admin(UserId(UUID(request.user_id)))
        logfire.info(
            "Admin granted by admin", admin_id=str(admin.id), user_id=request.user_id
        )
        return GrantAdminResponse(
            profile=ProfileItem.from_profile(
                profile, await self.profile_service.best_answer_count(profile.id)
            )
        )


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str  # Profile to delete
    admin_id: str | None = None  # From the session


class DeleteUserUseCase(BaseUseCase[DeleteUserRequest, None]):
    """Use case for deleting a user's profile.

    Deleting a profile also removes the user's questions, answers, votes
    and messages. The counters those records fed on other questions, and
    the usage counts of the tags on the removed questions, are repaired
    in the same request.
    """

    QUESTION_PAGE_SIZE = 100

    def __init__(
        self,
        profile_service: ProfileService,
        question_service: QuestionService,
        score_service: ScoreService,
        tag_service: TagService,
    ) -> None:
        """Initialize delete user use case.

        Args:
            profile_service: Profile domain service
            question_service: Question domain service
            score_service: Score domain service (counter repair)
            tag_service: Tag domain service (usage counts)
        """
        self.profile_service = profile_service
        self.question_service = question_service
        self.score_service = score_service
        self.tag_service = tag_service

    async def execute(self, request: DeleteUserRequest) -> None:
        """Execute delete user flow.

        Raises:
            UnauthenticatedError: If there is no caller
            NotAuthorizedError: If the caller is not an admin
            BusinessRuleViolationError: If an admin tries to delete themselves
            NotFoundError: If the profile does not exist
            PartialMutationError: If the profile was deleted but a repair failed
        """
        admin = await self.profile_service.require_admin(
            _caller(request.admin_id), "delete users"
        )
        user_id = UserId(UUID(request.user_id))
        if user_id == admin.id:
            raise BusinessRuleViolationError("Admins cannot delete their own account")

        with logfire.span("delete_user.execute", user_id=request.user_id):
            affected = await self.score_service.questions_affected_by_user(user_id)
            authored = await self._questions_by(user_id)

            if not await self.profile_service.delete_profile(user_id):
                raise NotFoundError("Profile", request.user_id)

            try:
                for question in authored:
                    await self.tag_service.record_usage([], removed=question.tag_names)
                reports = await self.score_service.reconcile_questions(affected)
            except StoreFailureError as e:
                logfire.error(
                    "User deleted but counters not repaired",
                    user_id=request.user_id,
                    error=str(e),
                )
                raise PartialMutationError(
                    "delete_user",
                    completed=["profile.delete"],
                    failed="counters.reconcile",
                ) from e

            logfire.info(
                "User deleted by admin",
                admin_id=str(admin.id),
                user_id=request.user_id,
                questions_removed=len(authored),
                questions_repaired=sum(1 for r in reports if r.drifted),
            )

    async def _questions_by(self, user_id: UserId) -> list[Question]:
        questions: list[Question] = []
        while True:
            page = await self.question_service.list_questions_by_author(
                user_id, limit=self.QUESTION_PAGE_SIZE, offset=len(questions)
            )
            questions.extend(page)
            if len(page) < self.QUESTION_PAGE_SIZE:
                return questions
