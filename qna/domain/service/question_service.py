"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from qna.config import ContentSettings
from qna.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from qna.domain.model.question import Question
from qna.domain.repository import QuestionRepository, QuestionSortOrder
from qna.domain.value import QuestionId, TagName, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            content_settings: Content validation limits
        """
        self.question_repository = question_repository
        self.content_settings = content_settings

    def validate_content(
        self, title: str, content: str, tag_names: list[TagName]
    ) -> None:
        """Check a question's title, body and tags against content limits.

        Raises:
            ValidationError: On the first violated rule
        """
        limits = self.content_settings
        title = title.strip()
        if len(title) < limits.question_title_min:
            raise ValidationError(
                f"Title must be at least {limits.question_title_min} characters"
            )
        if len(title) > limits.question_title_max:
            raise ValidationError(
                f"Title must be at most {limits.question_title_max} characters"
            )
        if len(content.strip()) < limits.question_content_min:
            raise ValidationError(
                f"Question details must be at least {limits.question_content_min} characters"
            )
        if not tag_names:
            raise ValidationError("At least one tag is required")
        if len(tag_names) > limits.max_tags:
            raise ValidationError(
                f"You can only add up to {limits.max_tags} tags per question"
            )
        if len({t.root for t in tag_names}) != len(tag_names):
            raise ValidationError("Duplicate tags are not allowed")

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        content: str,
        tag_names: list[TagName],
    ) -> Question:
        """Create a new question.

        Tags are expected to have been checked for existence already.

        Args:
            author_id: Asking user
            title: Question title
            content: Question body
            tag_names: 1-5 tag names

        Returns:
            Saved question

        Raises:
            ValidationError: If content limits are violated
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            title=title,
        ):
            self.validate_content(title, content, tag_names)

            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                content=content.strip(),
                author_id=author_id,
                tag_names=tag_names,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List questions with their total count.

        Returns:
            Tuple of (page of questions, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            tag=tag.root if tag else None,
            unanswered=unanswered,
        ):
            search = search.strip() if search else None
            questions = await self.question_repository.find_all(
                sort=sort,
                tag=tag,
                search=search or None,
                unanswered=unanswered,
                limit=limit,
                offset=offset,
            )
            total = await self.question_repository.count(
                tag=tag, search=search or None, unanswered=unanswered
            )
            return questions, total

    async def list_questions_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """List a user's questions, newest first."""
        return await self.question_repository.find_by_author(
            author_id, limit=limit, offset=offset
        )

    async def update_question(
        self,
        question_id: QuestionId,
        caller_id: UserId,
        title: str | None = None,
        content: str | None = None,
        tag_names: list[TagName] | None = None,
    ) -> tuple[Question, Question]:
        """Edit a question. Only its author may do so.

        Returns:
            Tuple of (question before the edit, question after the edit)

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is not the author
            ValidationError: If the edited content violates limits
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            caller_id=str(caller_id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            if question.author_id != caller_id:
                logfire.warn(
                    "Unauthorized question edit attempt",
                    question_id=str(question_id),
                    caller_id=str(caller_id),
                )
                raise NotAuthorizedError(
                    "edit", "question", str(question_id), str(caller_id)
                )

            new_title = title if title is not None else question.title
            new_content = content if content is not None else question.content
            new_tags = tag_names if tag_names is not None else question.tag_names
            self.validate_content(new_title, new_content, new_tags)

            updated = question.model_copy(
                update={
                    "title": new_title.strip(),
                    "content": new_content.strip(),
                    "tag_names": new_tags,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.question_repository.save(updated)
            logfire.info("Question updated", question_id=str(question_id))
            return question, saved

    async def increment_answer_count(self, question_id: QuestionId) -> Question:
        """Increment a question's answer count.

        Reads the current count and writes count + 1 with no
        compare-and-swap, so two concurrent increments can lose one.
        Reconciliation re-derives the true count.

        Args:
            question_id: Question ID

        Returns:
            Question with the new count

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "question_service.increment_answer_count", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.error(
                    "Question not found for answer count increment",
                    question_id=str(question_id),
                )
                raise NotFoundError("Question", str(question_id))

            new_count = question.answer_count + 1
            await self.question_repository.set_answer_count(question_id, new_count)
            logfire.info(
                "Answer count incremented",
                question_id=str(question_id),
                new_count=new_count,
            )
            return question.model_copy(update={"answer_count": new_count})

    async def record_view(self, question_id: QuestionId) -> None:
        """Atomically count one view of the question."""
        with logfire.span("question_service.record_view", question_id=str(question_id)):
            await self.question_repository.increment_views(question_id)
