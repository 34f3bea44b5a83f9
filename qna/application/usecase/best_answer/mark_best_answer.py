"""Mark best answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import BestAnswerService
from qna.domain.value import AnswerId, QuestionId, UserId


class MarkBestAnswerRequest(BaseModel):
    """Mark best answer request."""

    question_id: str  # UUID string
    answer_id: str  # UUID string
    user_id: str | None = None  # From the session, None if anonymous


class MarkBestAnswerResponse(BaseModel):
    """Mark best answer response."""

    question_id: str
    answer_id: str
    has_best_answer: bool


class MarkBestAnswerUseCase(BaseUseCase[MarkBestAnswerRequest, MarkBestAnswerResponse]):
    """Use case for accepting an answer.

    Only the question's author may accept an answer. Accepting another
    answer later moves the flag; there is no way to clear it.
    """

    def __init__(self, best_answer_service: BestAnswerService) -> None:
        """Initialize mark best answer use case.

        Args:
            best_answer_service: Best-answer domain service
        """
        self.best_answer_service = best_answer_service

    async def execute(self, request: MarkBestAnswerRequest) -> MarkBestAnswerResponse:
        """Execute mark best answer flow.

        Raises:
            UnauthenticatedError: If there is no caller
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the caller is not the question's author
            PartialMutationError: If the question was flagged but the answer was not
        """
        caller_id = UserId(UUID(request.user_id)) if request.user_id else None

        question = await self.best_answer_service.mark_best(
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
            caller_id,
        )

        return MarkBestAnswerResponse(
            question_id=str(question.id),
            answer_id=request.answer_id,
            has_best_answer=question.has_best_answer,
        )
