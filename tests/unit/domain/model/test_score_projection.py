"""Unit tests for ScoreProjection."""

from uuid import uuid4

import pytest

from qna.domain.model.score import ScoreProjection
from qna.domain.model.vote import VoteResult
from qna.domain.value import VotableType, VoteOutcome


def _projection(score: int, direction: int = 0) -> ScoreProjection:
    return ScoreProjection(
        target_type=VotableType.ANSWER,
        target_id=uuid4(),
        score=score,
        direction=direction,
    )


@pytest.mark.parametrize(
    "score, direction, result, expected_score",
    [
        (4, 0, VoteResult(outcome=VoteOutcome.APPLIED, delta=1, direction=1), 5),
        (4, 1, VoteResult(outcome=VoteOutcome.TOGGLED, delta=-1, direction=0), 3),
        (4, 1, VoteResult(outcome=VoteOutcome.CHANGED, delta=-2, direction=-1), 2),
        (-1, -1, VoteResult(outcome=VoteOutcome.TOGGLED, delta=1, direction=0), 0),
    ],
)
def test_apply_moves_score_by_delta(score, direction, result, expected_score):
    projection = _projection(score, direction)

    updated = projection.apply(result)

    assert updated.score == expected_score
    assert updated.direction == result.direction
    assert updated.target_id == projection.target_id


def test_apply_does_not_mutate_original():
    projection = _projection(10)

    projection.apply(VoteResult(outcome=VoteOutcome.APPLIED, delta=1, direction=1))

    assert projection.score == 10
    assert projection.direction == 0
