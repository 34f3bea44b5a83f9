"""Get my vote use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import VoteService
from qna.domain.value import UserId, VotableType


class GetMyVoteRequest(BaseModel):
    """Get my vote request."""

    target_type: VotableType
    target_id: str  # UUID string
    voter_id: str | None = None  # Current user ID (if authenticated)


class GetMyVoteResponse(BaseModel):
    """The caller's vote on a target."""

    target_type: VotableType
    target_id: str
    direction: int  # -1, 0 or +1


class GetMyVoteUseCase(BaseUseCase[GetMyVoteRequest, GetMyVoteResponse]):
    """Use case for reading the caller's vote on a target.

    Anonymous callers and lookup failures both read as 0.
    """

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetMyVoteRequest) -> GetMyVoteResponse:
        voter_id = UserId(UUID(request.voter_id)) if request.voter_id else None
        direction = await self.vote_service.get_vote_direction(
            voter_id, request.target_type, UUID(request.target_id)
        )
        return GetMyVoteResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            direction=direction,
        )
