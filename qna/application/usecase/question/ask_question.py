"""Ask question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import ValidationError
from qna.domain.service import ProfileService, QuestionService, TagService
from qna.domain.value import TagName, UserId


def parse_tag_names(names: list[str]) -> list[TagName]:
    """Normalize raw tag strings into tag names.

    Raises:
        ValidationError: If a tag name is malformed
    """
    try:
        return [TagName(name.strip().lower()) for name in names]
    except PydanticValidationError as e:
        raise ValidationError(e.errors()[0]["msg"]) from e


class AskQuestionRequest(BaseModel):
    """Ask question request."""

    title: str
    content: str
    tag_names: list[str]  # 1-5 existing tags
    author_id: str | None = None  # From the session, None if anonymous


class AskQuestionResponse(BaseModel):
    """Ask question response."""

    question_id: str
    title: str
    content: str
    tag_names: list[str]
    votes: int
    answer_count: int
    created_at: datetime


class AskQuestionUseCase(BaseUseCase[AskQuestionRequest, AskQuestionResponse]):
    """Use case for asking a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize ask question use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service
            profile_service: Profile domain service (caller check)
        """
        self.question_service = question_service
        self.tag_service = tag_service
        self.profile_service = profile_service

    async def execute(self, request: AskQuestionRequest) -> AskQuestionResponse:
        """Execute ask question flow.

        Steps:
        1. Require an identity with an existing profile
        2. Check title, body and tag count against content limits
        3. Check every tag exists
        4. Save the question
        5. Bump the usage counter of each tag

        Raises:
            UnauthenticatedError: If there is no caller or no such profile
            ValidationError: If content limits are violated or tags are unknown
        """
        caller_id = UserId(UUID(request.author_id)) if request.author_id else None
        author = await self.profile_service.require_profile(caller_id, "ask a question")
        author_id = author.id

        with logfire.span(
            "ask_question.execute", author_id=request.author_id, tags=request.tag_names
        ):
            tag_names = parse_tag_names(request.tag_names)
            self.question_service.validate_content(
                request.title, request.content, tag_names
            )
            await self.tag_service.validate_tags_exist(tag_names)

            question = await self.question_service.create_question(
                author_id=author_id,
                title=request.title,
                content=request.content,
                tag_names=tag_names,
            )
            await self.tag_service.record_usage(tag_names)

            return AskQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                content=question.content,
                tag_names=[tag.root for tag in question.tag_names],
                votes=question.votes,
                answer_count=question.answer_count,
                created_at=question.created_at,
            )
