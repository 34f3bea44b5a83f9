"""Cast vote use case."""

from typing import Literal
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import PartialMutationError, StoreFailureError
from qna.domain.model.score import ScoreProjection
from qna.domain.service import ProfileService, ScoreService, VoteService
from qna.domain.value import UserId, VotableType, VoteDirection, VoteOutcome


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_type: VotableType
    target_id: str  # UUID string
    direction: Literal[1, -1]
    voter_id: str | None = None  # From the session, None if anonymous
    # Score the client is currently showing, projected forward by the delta
    displayed_score: int | None = None


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    target_type: VotableType
    target_id: str
    outcome: VoteOutcome
    delta: int
    direction: int  # Caller's vote after the cast: -1, 0 or +1
    projected_score: int | None = None


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a question or answer.

    Records the vote in the ledger, then moves the target's stored score
    by the resulting delta.
    """

    def __init__(
        self,
        vote_service: VoteService,
        score_service: ScoreService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service (ledger)
            score_service: Score domain service (stored counters)
            profile_service: Profile domain service (caller check)
        """
        self.vote_service = vote_service
        self.score_service = score_service
        self.profile_service = profile_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            UnauthenticatedError: If there is no caller or no such profile
            NotFoundError: If the target does not exist
            StoreFailureError: If the ledger write fails
            PartialMutationError: If the ledger changed but the score did not
        """
        voter_id = UserId(UUID(request.voter_id)) if request.voter_id else None
        if voter_id is not None:
            await self.profile_service.require_profile(voter_id, "vote")
        target_id = UUID(request.target_id)

        result = await self.vote_service.cast_vote(
            voter_id,
            request.target_type,
            target_id,
            VoteDirection(request.direction),
        )

        try:
            await self.score_service.apply_vote(
                request.target_type, target_id, result.delta
            )
        except StoreFailureError as e:
            logfire.error(
                "Vote recorded but score not updated",
                target_type=request.target_type.value,
                target_id=request.target_id,
                outcome=result.outcome.value,
                delta=result.delta,
                error=str(e),
            )
            raise PartialMutationError(
                "cast_vote",
                completed=[f"vote.{result.outcome.value}"],
                failed=f"{request.target_type.value}.votes",
            ) from e

        projected_score = None
        if request.displayed_score is not None:
            projection = ScoreProjection(
                target_type=request.target_type,
                target_id=target_id,
                score=request.displayed_score,
            )
            projected_score = projection.apply(result).score

        return CastVoteResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            outcome=result.outcome,
            delta=result.delta,
            direction=result.direction,
            projected_score=projected_score,
        )
