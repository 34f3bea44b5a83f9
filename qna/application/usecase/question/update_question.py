"""Update question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import UnauthenticatedError
from qna.domain.service import QuestionService, TagService
from qna.domain.value import QuestionId, UserId

from .ask_question import parse_tag_names
from .list_questions import QuestionItem


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields are left unchanged."""

    question_id: str  # UUID string
    user_id: str | None = None  # From the session, None if anonymous
    title: str | None = None
    content: str | None = None
    tag_names: list[str] | None = None


class UpdateQuestionResponse(BaseModel):
    """Update question response."""

    question: QuestionItem


class UpdateQuestionUseCase(BaseUseCase[UpdateQuestionRequest, UpdateQuestionResponse]):
    """Use case for editing a question.

    Only the question's author may edit it.
    """

    def __init__(
        self, question_service: QuestionService, tag_service: TagService
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service
        """
        self.question_service = question_service
        self.tag_service = tag_service

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Execute update question flow.

        Raises:
            UnauthenticatedError: If there is no caller
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is not the author
            ValidationError: If edited content violates limits or tags are unknown
        """
        if request.user_id is None:
            raise UnauthenticatedError("edit a question")

        question_id = QuestionId(UUID(request.question_id))
        caller_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_question.execute",
            question_id=request.question_id,
            user_id=request.user_id,
        ):
            tag_names = None
            if request.tag_names is not None:
                tag_names = parse_tag_names(request.tag_names)
                await self.tag_service.validate_tags_exist(tag_names)

            before, after = await self.question_service.update_question(
                question_id,
                caller_id,
                title=request.title,
                content=request.content,
                tag_names=tag_names,
            )

            old_tags = {t.root: t for t in before.tag_names}
            new_tags = {t.root: t for t in after.tag_names}
            added = [t for name, t in new_tags.items() if name not in old_tags]
            removed = [t for name, t in old_tags.items() if name not in new_tags]
            if added or removed:
                await self.tag_service.record_usage(added, removed)

            return UpdateQuestionResponse(question=QuestionItem.from_question(after))
