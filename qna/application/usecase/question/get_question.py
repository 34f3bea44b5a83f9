"""Get question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.answer import AnswerItem
from qna.domain.error import NotFoundError
from qna.domain.repository import AnswerSortOrder
from qna.domain.service import AnswerService, QuestionService, VoteService
from qna.domain.value import QuestionId, UserId, VotableType

from .list_questions import QuestionItem


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    answer_sort: AnswerSortOrder = AnswerSortOrder.VOTES
    user_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionResponse(BaseModel):
    """Question detail with its answers."""

    question: QuestionItem
    answers: list[AnswerItem]
    is_author: bool  # Whether the caller may edit and pick the best answer


class GetQuestionUseCase(BaseUseCase[GetQuestionRequest, GetQuestionResponse]):
    """Use case for viewing a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Counts a view, then loads the answers (best answer first) and the
        caller's vote on the question and on each answer.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(UUID(request.question_id))
        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None

        with logfire.span("get_question.execute", question_id=request.question_id):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", request.question_id)

            await self.question_service.record_view(question_id)
            question = question.model_copy(update={"views": question.views + 1})

            answers = await self.answer_service.list_answers(
                question_id, sort=request.answer_sort
            )

            question_vote = await self.vote_service.get_vote_direction(
                viewer_id, VotableType.QUESTION, question_id
            )
            answer_votes = await self.vote_service.get_vote_directions(
                viewer_id, VotableType.ANSWER, [a.id for a in answers]
            )

            return GetQuestionResponse(
                question=QuestionItem.from_question(question, question_vote),
                answers=[
                    AnswerItem.from_answer(a, answer_votes.get(a.id, 0))
                    for a in answers
                ],
                is_author=viewer_id is not None and viewer_id == question.author_id,
            )
