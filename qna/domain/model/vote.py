"""Vote entity and the result of casting a vote.

Each user holds at most one vote per question or answer. Casting the
same direction twice removes the vote, casting the opposite direction
flips it.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId, VotableType, VoteDirection, VoteId, VoteOutcome
from qna.domain.value.common import ValueObject


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per target, enforced by lookup-before-write
    - Direction is +1 or -1, a removed vote is deleted rather than zeroed
    - Polymorphic reference to the target (question or answer)
    """

    id: VoteId
    voter_id: UserId
    target_type: VotableType
    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class VoteResult(ValueObject):
    """Outcome of a cast vote.

    ``delta`` is what the target's score must move by; ``direction`` is the
    caller's vote after the cast (0 when the vote was toggled off).
    """

    outcome: VoteOutcome
    delta: int = Field(ge=-2, le=2)
    direction: int = Field(ge=-1, le=1)
