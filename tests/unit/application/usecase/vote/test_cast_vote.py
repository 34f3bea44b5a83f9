"""Unit tests for CastVoteUseCase and GetMyVoteUseCase."""

from uuid import uuid4

import pytest

from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetMyVoteRequest,
    GetMyVoteUseCase,
)
from qna.domain.error import (
    PartialMutationError,
    StoreFailureError,
    UnauthenticatedError,
)
from qna.domain.repository import (
    AnswerRepository,
    ProfileRepository,
    QuestionRepository,
    VoteRepository,
)
from qna.domain.value import VotableType, VoteOutcome
from tests.conftest import make_answer, make_profile, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _voter(unit_env) -> str:
    profile_repo = await unit_env.get(ProfileRepository)
    profile = await profile_repo.save(make_profile(f"voter-{uuid4().hex[:8]}"))
    return str(profile.id)


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_moves_stored_score(self, unit_env):
        """Casting a vote updates the ledger and the question's total."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(votes=3))
        voter_id = await _voter(unit_env)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                target_type=VotableType.QUESTION,
                target_id=str(question.id),
                direction=1,
                voter_id=voter_id,
            )
        )

        # Assert
        assert response.outcome == VoteOutcome.APPLIED
        assert response.delta == 1
        assert response.direction == 1
        assert response.projected_score is None
        stored = await question_repo.find_by_id(question.id)
        assert stored.votes == 4

    @pytest.mark.asyncio
    async def test_up_then_down_on_answer(self, unit_env):
        """Flipping a vote moves the answer total by two."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))
        voter_id = await _voter(unit_env)

        def request(direction: int) -> CastVoteRequest:
            return CastVoteRequest(
                target_type=VotableType.ANSWER,
                target_id=str(answer.id),
                direction=direction,
                voter_id=voter_id,
            )

        # Act
        await use_case.execute(request(1))
        response = await use_case.execute(request(-1))

        # Assert
        assert response.outcome == VoteOutcome.CHANGED
        assert response.delta == -2
        assert (await answer_repo.find_by_id(answer.id)).votes == -1

    @pytest.mark.asyncio
    async def test_projects_displayed_score(self, unit_env):
        """The client's displayed score is moved by the delta, not re-read."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(votes=0))

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                target_type=VotableType.QUESTION,
                target_id=str(question.id),
                direction=-1,
                voter_id=await _voter(unit_env),
                displayed_score=7,
            )
        )

        # Assert
        assert response.projected_score == 6
        assert (await question_repo.find_by_id(question.id)).votes == -1

    @pytest.mark.asyncio
    async def test_score_failure_is_partial_mutation(self, unit_env, monkeypatch):
        """Ledger write succeeded but the counter did not."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        question = await question_repo.save(make_question(votes=2))
        voter_id = await _voter(unit_env)

        async def fail(*args, **kwargs):
            raise StoreFailureError("question_repository.adjust_votes")

        monkeypatch.setattr(question_repo, "adjust_votes", fail)

        # Act
        with pytest.raises(PartialMutationError) as exc_info:
            await use_case.execute(
                CastVoteRequest(
                    target_type=VotableType.QUESTION,
                    target_id=str(question.id),
                    direction=1,
                    voter_id=voter_id,
                )
            )

        # Assert
        assert exc_info.value.completed == ["vote.applied"]
        assert exc_info.value.failed == "question.votes"
        assert (await question_repo.find_by_id(question.id)).votes == 2
        assert await vote_repo.sum_by_target(VotableType.QUESTION, question.id) == 1

    @pytest.mark.asyncio
    async def test_lookup_failure_leaves_score_alone(self, unit_env, monkeypatch):
        """Nothing is written when the existing-vote lookup fails."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        question = await question_repo.save(make_question(votes=5))
        voter_id = await _voter(unit_env)
        adjusted = []

        async def fail(*args, **kwargs):
            raise StoreFailureError("vote_repository.find_by_voter_and_target")

        async def record_adjust(*args, **kwargs):
            adjusted.append(args)

        monkeypatch.setattr(vote_repo, "find_by_voter_and_target", fail)
        monkeypatch.setattr(question_repo, "adjust_votes", record_adjust)

        # Act
        with pytest.raises(StoreFailureError) as exc_info:
            await use_case.execute(
                CastVoteRequest(
                    target_type=VotableType.QUESTION,
                    target_id=str(question.id),
                    direction=1,
                    voter_id=voter_id,
                )
            )

        # Assert
        assert not isinstance(exc_info.value, PartialMutationError)
        assert adjusted == []
        assert (await question_repo.find_by_id(question.id)).votes == 5
        assert await vote_repo.sum_by_target(VotableType.QUESTION, question.id) == 0

    @pytest.mark.asyncio
    async def test_voter_without_profile_is_unauthenticated(self, unit_env):
        """A valid session for a deleted profile cannot vote."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        question = await question_repo.save(make_question())

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                CastVoteRequest(
                    target_type=VotableType.QUESTION,
                    target_id=str(question.id),
                    direction=1,
                    voter_id=str(uuid4()),
                )
            )
        assert await vote_repo.sum_by_target(VotableType.QUESTION, question.id) == 0

    @pytest.mark.asyncio
    async def test_lost_toggle_off_does_not_move_score(self, unit_env, monkeypatch):
        """If the record is already gone, the score is not lowered twice."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        question = await question_repo.save(make_question(votes=0))
        voter_id = await _voter(unit_env)
        request = CastVoteRequest(
            target_type=VotableType.QUESTION,
            target_id=str(question.id),
            direction=1,
            voter_id=voter_id,
        )
        await use_case.execute(request)

        async def already_deleted(*args, **kwargs):
            return False

        monkeypatch.setattr(vote_repo, "delete", already_deleted)

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.outcome == VoteOutcome.TOGGLED
        assert response.delta == 0
        assert response.direction == 0
        assert (await question_repo.find_by_id(question.id)).votes == 1


class TestGetMyVoteUseCase:
    """Tests for GetMyVoteUseCase."""

    @pytest.mark.asyncio
    async def test_reads_back_cast_vote(self, unit_env):
        # Arrange
        cast = await unit_env.get(CastVoteUseCase)
        get_my_vote = await unit_env.get(GetMyVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())
        voter_id = await _voter(unit_env)
        await cast.execute(
            CastVoteRequest(
                target_type=VotableType.QUESTION,
                target_id=str(question.id),
                direction=-1,
                voter_id=voter_id,
            )
        )

        # Act
        mine = await get_my_vote.execute(
            GetMyVoteRequest(
                target_type=VotableType.QUESTION,
                target_id=str(question.id),
                voter_id=voter_id,
            )
        )
        anonymous = await get_my_vote.execute(
            GetMyVoteRequest(
                target_type=VotableType.QUESTION, target_id=str(question.id)
            )
        )

        # Assert
        assert mine.direction == -1
        assert anonymous.direction == 0
