"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.config import ContentSettings
from qna.domain.error import ValidationError
from qna.domain.model.answer import Answer
from qna.domain.repository import AnswerRepository, AnswerSortOrder
from qna.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            content_settings: Content validation limits
        """
        self.answer_repository = answer_repository
        self.content_settings = content_settings

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Answer:
        """Create an answer to a question.

        The caller is responsible for checking the question exists.

        Args:
            question_id: Question being answered
            author_id: Answering user
            content: Answer body

        Returns:
            Saved answer

        Raises:
            ValidationError: If the answer is too short
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            content = content.strip()
            minimum = self.content_settings.answer_content_min
            if len(content) < minimum:
                raise ValidationError(
                    f"Your answer must be at least {minimum} characters long"
                )

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
            return answer

    async def list_answers(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    ) -> list[Answer]:
        """List a question's answers, best answer first."""
        with logfire.span(
            "answer_service.list_answers", question_id=str(question_id), sort=sort.value
        ):
            return await self.answer_repository.find_by_question(question_id, sort=sort)
