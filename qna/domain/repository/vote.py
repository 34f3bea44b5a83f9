"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from qna.domain.model.vote import Vote
from qna.domain.value import UserId, VotableType, VoteDirection, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer and raise
    StoreFailureError when the underlying store fails.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_type: VotableType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target.

        Args:
            voter_id: The voter's ID
            target_type: Type of target (question or answer)
            target_id: ID of the target

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a voter's votes on multiple targets (batch query).

        Args:
            voter_id: The voter's ID
            target_type: Type of targets
            target_ids: IDs of the targets to check

        Returns:
            Votes by the voter on the given targets
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote
        """
        pass

    @abstractmethod
    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change the direction of an existing vote.

        Args:
            vote_id: The vote to update
            direction: New direction

        Returns:
            The updated vote, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def sum_by_target(self, target_type: VotableType, target_id: UUID) -> int:
        """Sum the directions of all votes on a target.

        Args:
            target_type: Type of target
            target_id: ID of the target

        Returns:
            Net score (0 when there are no votes)
        """
        pass

    @abstractmethod
    async def sum_by_targets(
        self, target_type: VotableType, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Sum vote directions for several targets in one query.

        Args:
            target_type: Type of targets
            target_ids: IDs of the targets

        Returns:
            Mapping of every requested target ID to its net score
        """
        pass

    @abstractmethod
    async def find_by_voter(self, voter_id: UserId) -> list[Vote]:
        """Find every vote a user has cast."""
        pass
