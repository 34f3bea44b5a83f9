"""Reconcile question counters use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.model.score import CounterDrift
from qna.domain.service import ProfileService, ScoreService
from qna.domain.value import QuestionId, UserId


class ReconcileQuestionRequest(BaseModel):
    """Reconcile question request."""

    question_id: str  # UUID string
    admin_id: str | None = None  # From the session


class ReconcileQuestionResponse(BaseModel):
    """Authoritative counters after reconciliation."""

    question_id: str
    question_votes: int
    answer_count: int
    answer_votes: dict[str, int]
    drift: list[CounterDrift]


class ReconcileQuestionUseCase(BaseUseCase[ReconcileQuestionRequest, ReconcileQuestionResponse]):
    """Use case for repairing a question's denormalized counters.

    Re-derives the question's score, answer count and every answer's score
    from the stored records and overwrites whatever drifted.
    """

    def __init__(
        self, profile_service: ProfileService, score_service: ScoreService
    ) -> None:
        """Initialize reconcile question use case.

        Args:
            profile_service: Profile domain service (admin check)
            score_service: Score domain service
        """
        self.profile_service = profile_service
        self.score_service = score_service

    async def execute(
        self, request: ReconcileQuestionRequest
    ) -> ReconcileQuestionResponse:
        """Execute reconcile flow.

        Raises:
            UnauthenticatedError: If there is no caller
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the question does not exist
        """
        caller_id = UserId(UUID(request.admin_id)) if request.admin_id else None
        await self.profile_service.require_admin(caller_id, "reconcile counters")

        report = await self.score_service.reconcile_question(
            QuestionId(UUID(request.question_id))
        )
        return ReconcileQuestionResponse(
            question_id=str(report.question_id),
            question_votes=report.question_votes,
            answer_count=report.answer_count,
            answer_votes={str(k): v for k, v in report.answer_votes.items()},
            drift=report.drift,
        )
