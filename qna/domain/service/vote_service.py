"""Vote domain service (the vote ledger).

The ledger owns the (voter, target) -> direction mapping. It decides
whether a cast vote inserts, removes or flips the caller's record and
reports the score delta; applying that delta to any counter is left to
the caller.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire

from qna.domain.error import NotFoundError, StoreFailureError, UnauthenticatedError
from qna.domain.model.vote import Vote, VoteResult
from qna.domain.repository import VoteRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VotableType,
    VoteDirection,
    VoteId,
    VoteOutcome,
)

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service

    async def cast_vote(
        self,
        voter_id: UserId | None,
        target_type: VotableType,
        target_id: UUID,
        direction: VoteDirection,
    ) -> VoteResult:
        """Cast a vote on a question or answer.

        - No existing vote: insert it (APPLIED, delta = direction)
        - Same direction as existing: delete it (TOGGLED, delta = -direction)
        - Opposite direction: flip it (CHANGED, delta = 2 * direction)

        The steps are separate store calls. A failure during the lookup
        leaves everything untouched; a failure during the write propagates
        as StoreFailureError without any compensation here.
        If the record disappears between lookup and write, a toggle-off
        reports a zero delta and a flip raises StoreFailureError.

        Args:
            voter_id: Authenticated caller, None if anonymous
            target_type: Question or answer
            target_id: ID of the target
            direction: Up or down

        Returns:
            Outcome, score delta and the caller's resulting direction

        Raises:
            UnauthenticatedError: If there is no caller (no store access)
            NotFoundError: If the target does not exist
            StoreFailureError: If a store call fails
        """
        if voter_id is None:
            logfire.warn(
                "Vote attempt without identity",
                target_type=target_type.value,
                target_id=str(target_id),
            )
            raise UnauthenticatedError("vote")

        direction = VoteDirection(direction)

        with logfire.span(
            "vote_service.cast_vote",
            voter_id=str(voter_id),
            target_type=target_type.value,
            target_id=str(target_id),
            direction=int(direction),
        ):
            await self._ensure_target_exists(target_type, target_id)

            existing = await self.vote_repository.find_by_voter_and_target(
                voter_id, target_type, target_id
            )

            if existing is None:
                now = datetime.now()
                vote = Vote(
                    id=VoteId(uuid4()),
                    voter_id=voter_id,
                    target_type=target_type,
                    target_id=target_id,
                    direction=direction,
                    created_at=now,
                    updated_at=now,
                )
                await self.vote_repository.save(vote)
                result = VoteResult(
                    outcome=VoteOutcome.APPLIED,
                    delta=int(direction),
                    direction=int(direction),
                )

            elif existing.direction == direction:
                deleted = await self.vote_repository.delete(existing.id)
                if not deleted:
                    # Another request already removed it and moved the score
                    logfire.warn(
                        "Vote vanished before toggle-off",
                        vote_id=str(existing.id),
                        voter_id=str(voter_id),
                    )
                result = VoteResult(
                    outcome=VoteOutcome.TOGGLED,
                    delta=-int(direction) if deleted else 0,
                    direction=0,
                )

            else:
                updated = await self.vote_repository.update_direction(
                    existing.id, direction
                )
                if updated is None:
                    logfire.warn(
                        "Vote vanished before direction change",
                        vote_id=str(existing.id),
                        voter_id=str(voter_id),
                    )
                    raise StoreFailureError(
                        "vote_repository.update_direction",
                        "vote removed concurrently",
                    )
                result = VoteResult(
                    outcome=VoteOutcome.CHANGED,
                    delta=2 * int(direction),
                    direction=int(direction),
                )

            logfire.info(
                "Vote cast",
                voter_id=str(voter_id),
                target_type=target_type.value,
                target_id=str(target_id),
                outcome=result.outcome.value,
                delta=result.delta,
            )
            return result

    async def get_vote_direction(
        self,
        voter_id: UserId | None,
        target_type: VotableType,
        target_id: UUID,
    ) -> int:
        """Get the caller's current vote on a target.

        Never fails: anonymous callers and store errors both read as 0.

        Args:
            voter_id: Authenticated caller, None if anonymous
            target_type: Question or answer
            target_id: ID of the target

        Returns:
            -1, 0 or +1
        """
        if voter_id is None:
            return 0

        try:
            vote = await self.vote_repository.find_by_voter_and_target(
                voter_id, target_type, target_id
            )
        except StoreFailureError as e:
            logfire.error(
                "Vote lookup failed, treating as no vote",
                voter_id=str(voter_id),
                target_id=str(target_id),
                error=str(e),
            )
            return 0

        return int(vote.direction) if vote else 0

    async def get_vote_directions(
        self,
        voter_id: UserId | None,
        target_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Get the caller's votes on several targets.

        Args:
            voter_id: Authenticated caller, None if anonymous
            target_type: Type of the targets
            target_ids: IDs to check

        Returns:
            Mapping of every requested ID to -1, 0 or +1
        """
        directions = {target_id: 0 for target_id in target_ids}
        if voter_id is None or not target_ids:
            return directions

        try:
            votes = await self.vote_repository.find_by_voter_and_targets(
                voter_id, target_type, list(target_ids)
            )
        except StoreFailureError as e:
            logfire.error(
                "Batch vote lookup failed, treating as no votes",
                voter_id=str(voter_id),
                count=len(target_ids),
                error=str(e),
            )
            return directions

        for vote in votes:
            directions[vote.target_id] = int(vote.direction)
        return directions

    async def _ensure_target_exists(
        self, target_type: VotableType, target_id: UUID
    ) -> None:
        if target_type == VotableType.QUESTION:
            question = await self.question_service.get_question_by_id(
                QuestionId(target_id)
            )
            if question is None:
                raise NotFoundError("Question", str(target_id))
        else:  # VotableType.ANSWER
            answer = await self.answer_service.get_answer_by_id(AnswerId(target_id))
            if answer is None:
                raise NotFoundError("Answer", str(target_id))
