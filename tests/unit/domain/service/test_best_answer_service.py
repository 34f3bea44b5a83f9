"""Unit tests for BestAnswerService."""

from uuid import uuid4

import pytest

from qna.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    PartialMutationError,
    StoreFailureError,
    UnauthenticatedError,
)
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.service import BestAnswerService
from qna.domain.value import AnswerId, UserId
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _question_with_answers(unit_env, count: int = 3):
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)
    author_id = UserId(uuid4())
    question = await question_repo.save(make_question(author_id=author_id))
    answers = [
        await answer_repo.save(make_answer(question.id)) for _ in range(count)
    ]
    return author_id, question, answers


async def _flagged(answer_repo, question_id) -> list:
    return [a for a in await answer_repo.find_by_question(question_id) if a.is_best_answer]


class TestMarkBest:
    """Tests for mark_best."""

    @pytest.mark.asyncio
    async def test_author_marks_best_answer(self, unit_env):
        """The chosen answer is flagged and the question records it."""
        # Arrange
        service = await unit_env.get(BestAnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author_id, question, answers = await _question_with_answers(unit_env)

        # Act
        result = await service.mark_best(question.id, answers[1].id, author_id)

        # Assert
        assert result.has_best_answer
        assert (await question_repo.find_by_id(question.id)).has_best_answer
        flagged = await _flagged(answer_repo, question.id)
        assert [a.id for a in flagged] == [answers[1].id]

    @pytest.mark.asyncio
    async def test_remarking_keeps_exactly_one_best(self, unit_env):
        """Choosing a different answer clears the previous one."""
        # Arrange
        service = await unit_env.get(BestAnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        author_id, question, answers = await _question_with_answers(unit_env)
        await service.mark_best(question.id, answers[0].id, author_id)

        # Act
        await service.mark_best(question.id, answers[2].id, author_id)

        # Assert
        flagged = await _flagged(answer_repo, question.id)
        assert [a.id for a in flagged] == [answers[2].id]
        # Best answer sorts first
        listed = await answer_repo.find_by_question(question.id)
        assert listed[0].id == answers[2].id

    @pytest.mark.asyncio
    async def test_marking_same_answer_twice_is_idempotent(self, unit_env):
        # Arrange
        service = await unit_env.get(BestAnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        author_id, question, answers = await _question_with_answers(unit_env)
        await service.mark_best(question.id, answers[0].id, author_id)

        # Act
        await service.mark_best(question.id, answers[0].id, author_id)

        # Assert
        flagged = await _flagged(answer_repo, question.id)
        assert [a.id for a in flagged] == [answers[0].id]

    @pytest.mark.asyncio
    async def test_other_questions_are_untouched(self, unit_env):
        """Selection only clears siblings on the same question."""
        # Arrange
        service = await unit_env.get(BestAnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        author_id, question, answers = await _question_with_answers(unit_env)
        other_author, other_question, other_answers = await _question_with_answers(
            unit_env, count=1
        )
        await service.mark_best(other_question.id, other_answers[0].id, other_author)

        # Act
        await service.mark_best(question.id, answers[0].id, author_id)

        # Assert
        assert (await answer_repo.find_by_id(other_answers[0].id)).is_best_answer

    @pytest.mark.asyncio
    async def test_non_author_is_rejected_without_writes(self, unit_env):
        """Only the question's author may choose the best answer."""
        # Arrange
        service = await unit_env.get(BestAnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        _, question, answers = await _question_with_answers(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.mark_best(question.id, answers[0].id, UserId(uuid4()))

        assert not (await question_repo.find_by_id(question.id)).has_best_answer
        assert await _flagged(answer_repo, question.id) == []

    @pytest.mark.asyncio
    async def test_anonymous_caller_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(BestAnswerService)
        _, question, answers = await _question_with_answers(unit_env)

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await service.mark_best(question.id, answers[0].id, None)

    @pytest.mark.asyncio
    async def test_answer_from_another_question_is_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(BestAnswerService)
        author_id, question, _ = await _question_with_answers(unit_env)
        _, _, foreign = await _question_with_answers(unit_env, count=1)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await service.mark_best(question.id, foreign[0].id, author_id)

    @pytest.mark.asyncio
    async def test_missing_answer_is_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(BestAnswerService)
        author_id, question, _ = await _question_with_answers(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.mark_best(question.id, AnswerId(uuid4()), author_id)

    @pytest.mark.asyncio
    async def test_failed_selection_reports_partial_mutation(
        self, unit_env, monkeypatch
    ):
        """The question flag stays raised when the answer write fails."""
        # Arrange
        service = await unit_env.get(BestAnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author_id, question, answers = await _question_with_answers(unit_env)

        async def fail(question_id, answer_id):
            raise StoreFailureError("answer_repository.select_best", "OperationalError")

        monkeypatch.setattr(answer_repo, "select_best", fail)

        # Act & Assert
        with pytest.raises(PartialMutationError) as exc_info:
            await service.mark_best(question.id, answers[0].id, author_id)

        assert exc_info.value.completed == ["question.has_best_answer"]
        assert exc_info.value.failed == "answer.is_best_answer"
        assert (await question_repo.find_by_id(question.id)).has_best_answer
