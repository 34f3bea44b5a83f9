"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from qna.domain.error import StoreFailureError
from qna.domain.model.vote import Vote
from qna.domain.repository.vote import VoteRepository
from qna.domain.value import UserId, VotableType, VoteDirection, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._votes.get(vote_id)

    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_type: VotableType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target."""
        for vote in self._votes.values():
            if (
                vote.voter_id == voter_id
                and vote.target_type == target_type
                and vote.target_id == target_id
            ):
                return vote
        return None

    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a voter's votes on multiple targets (batch query)."""
        wanted = set(target_ids)
        return [
            v
            for v in self._votes.values()
            if v.voter_id == voter_id
            and v.target_type == target_type
            and v.target_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            StoreFailureError: If the voter already voted on the target
        """
        existing = await self.find_by_voter_and_target(
            vote.voter_id, vote.target_type, vote.target_id
        )
        if existing:
            raise StoreFailureError("vote_repository.save", "duplicate vote")

        self._votes[vote.id] = vote
        return vote

    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change the direction of an existing vote."""
        vote = self._votes.get(vote_id)
        if vote is None:
            return None

        updated = vote.model_copy(update={"direction": direction})
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        return self._votes.pop(vote_id, None) is not None

    async def sum_by_target(self, target_type: VotableType, target_id: UUID) -> int:
        """Sum the directions of all votes on a target."""
        return sum(
            int(v.direction)
            for v in self._votes.values()
            if v.target_type == target_type and v.target_id == target_id
        )

    async def sum_by_targets(
        self, target_type: VotableType, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Sum vote directions for several targets."""
        totals = {target_id: 0 for target_id in target_ids}
        for vote in self._votes.values():
            if vote.target_type == target_type and vote.target_id in totals:
                totals[vote.target_id] += int(vote.direction)
        return totals

    async def find_by_voter(self, voter_id: UserId) -> list[Vote]:
        """Find every vote a user has cast."""
        return [v for v in self._votes.values() if v.voter_id == voter_id]

    def remove_by_voter(self, voter_id: UserId) -> None:
        """Drop a user's votes, as the profile foreign key cascade does."""
        for vote_id in [v.id for v in self._votes.values() if v.voter_id == voter_id]:
            del self._votes[vote_id]
