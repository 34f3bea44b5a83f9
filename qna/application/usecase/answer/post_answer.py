"""Post answer use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import (
    NotFoundError,
    PartialMutationError,
    StoreFailureError,
)
from qna.domain.model.answer import Answer
from qna.domain.service import AnswerService, ProfileService, QuestionService
from qna.domain.value import QuestionId, UserId


class AnswerItem(BaseModel):
    """Answer in responses."""

    answer_id: str
    question_id: str
    author_id: str
    content: str
    votes: int
    is_best_answer: bool
    created_at: datetime
    updated_at: datetime
    user_vote: int = 0  # Caller's vote: -1, 0 or +1

    @classmethod
    def from_answer(cls, answer: Answer, user_vote: int = 0) -> "AnswerItem":
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            content=answer.content,
            votes=answer.votes,
            is_best_answer=answer.is_best_answer,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
            user_vote=user_vote,
        )


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    question_id: str  # UUID string
    content: str
    author_id: str | None = None  # From the session, None if anonymous


class PostAnswerResponse(BaseModel):
    """Post answer response."""

    answer: AnswerItem
    answer_count: int  # Question's answer count after the increment


class PostAnswerUseCase(BaseUseCase[PostAnswerRequest, PostAnswerResponse]):
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize post answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            profile_service: Profile domain service (caller check)
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.profile_service = profile_service

    async def execute(self, request: PostAnswerRequest) -> PostAnswerResponse:
        """Execute post answer flow.

        Steps:
        1. Require an identity with an existing profile
        2. Check the question exists
        3. Save the answer
        4. Increment the question's answer count (read, then write count+1)

        Raises:
            UnauthenticatedError: If there is no caller or no such profile
            NotFoundError: If the question does not exist
            ValidationError: If the answer is too short
            PartialMutationError: If the answer was saved but the count was not
        """
        caller_id = UserId(UUID(request.author_id)) if request.author_id else None
        author = await self.profile_service.require_profile(caller_id, "post an answer")
        author_id = author.id
        question_id = QuestionId(UUID(request.question_id))

        with logfire.span(
            "post_answer.execute",
            question_id=request.question_id,
            author_id=request.author_id,
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", request.question_id)

            answer = await self.answer_service.create_answer(
                question_id, author_id, request.content
            )

            try:
                question = await self.question_service.increment_answer_count(
                    question_id
                )
            except StoreFailureError as e:
                logfire.error(
                    "Answer saved but answer count not incremented",
                    question_id=request.question_id,
                    answer_id=str(answer.id),
                    error=str(e),
                )
                raise PartialMutationError(
                    "post_answer",
                    completed=["answer.insert"],
                    failed="question.answer_count",
                ) from e

            return PostAnswerResponse(
                answer=AnswerItem.from_answer(answer),
                answer_count=question.answer_count,
            )
