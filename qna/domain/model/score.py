"""Locally held scores.

A client displaying a question or answer keeps its own copy of the score
and moves it by the delta of each vote it casts instead of re-reading
the stored counter. The stored counter and this projection may drift
when other users vote concurrently; reconciliation re-fetches.
"""

from uuid import UUID

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.model.vote import VoteResult
from qna.domain.value import VotableType
from qna.domain.value.common import ValueObject


class ScoreProjection(DomainModel):
    """Displayed score of one target plus the viewer's own vote on it."""

    target_type: VotableType
    target_id: UUID
    score: int
    direction: int = Field(default=0, ge=-1, le=1)

    def apply(self, result: VoteResult) -> "ScoreProjection":
        """Return the projection after a cast vote.

        The delta already carries the right sign and magnitude for every
        outcome, so the next score is always ``score + delta``.
        """
        return self.model_copy(
            update={"score": self.score + result.delta, "direction": result.direction}
        )


class CounterDrift(ValueObject):
    """A stored counter that did not match its source records."""

    target_type: VotableType
    target_id: UUID
    counter: str  # "votes" or "answer_count"
    stored: int
    actual: int


class ReconcileReport(ValueObject):
    """Result of re-deriving a question's counters from its records."""

    question_id: UUID
    question_votes: int
    answer_count: int
    answer_votes: dict[UUID, int] = Field(default_factory=dict)
    drift: list[CounterDrift] = Field(default_factory=list)

    @property
    def drifted(self) -> bool:
        """Whether any counter had to be corrected."""
        return bool(self.drift)
