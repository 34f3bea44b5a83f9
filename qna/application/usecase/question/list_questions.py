"""List questions use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.model.question import Question
from qna.domain.repository import QuestionSortOrder
from qna.domain.service import QuestionService, VoteService
from qna.domain.value import UserId, VotableType

from .ask_question import parse_tag_names


class QuestionItem(BaseModel):
    """Question summary in listings."""

    question_id: str
    title: str
    content: str
    author_id: str
    tag_names: list[str]
    votes: int
    answer_count: int
    views: int
    has_best_answer: bool
    created_at: datetime
    updated_at: datetime
    user_vote: int = 0  # Caller's vote: -1, 0 or +1

    @classmethod
    def from_question(cls, question: Question, user_vote: int = 0) -> "QuestionItem":
        return cls(
            question_id=str(question.id),
            title=question.title,
            content=question.content,
            author_id=str(question.author_id),
            tag_names=[tag.root for tag in question.tag_names],
            votes=question.votes,
            answer_count=question.answer_count,
            views=question.views,
            has_best_answer=question.has_best_answer,
            created_at=question.created_at,
            updated_at=question.updated_at,
            user_vote=user_vote,
        )


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    tag: str | None = None
    search: str | None = None
    unanswered: bool = False
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    total: int
    limit: int
    offset: int


class ListQuestionsUseCase(BaseUseCase[ListQuestionsRequest, ListQuestionsResponse]):
    """Use case for listing questions with filtering and pagination."""

    def __init__(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            vote_service: Vote domain service (caller's vote directions)
        """
        self.question_service = question_service
        self.vote_service = vote_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters, sort order and pagination

        Returns:
            Page of questions with the total match count
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            tag=request.tag,
            unanswered=request.unanswered,
            limit=request.limit,
            offset=request.offset,
        ):
            tag_filter = parse_tag_names([request.tag])[0] if request.tag else None

            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                tag=tag_filter,
                search=request.search,
                unanswered=request.unanswered,
                limit=request.limit,
                offset=request.offset,
            )

            # Batch query to avoid N+1
            voter_id = UserId(UUID(request.user_id)) if request.user_id else None
            directions = await self.vote_service.get_vote_directions(
                voter_id, VotableType.QUESTION, [q.id for q in questions]
            )

            items = [
                QuestionItem.from_question(q, directions.get(q.id, 0))
                for q in questions
            ]
            logfire.info("Questions listed", count=len(items), total=total)

            return ListQuestionsResponse(
                questions=items,
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
