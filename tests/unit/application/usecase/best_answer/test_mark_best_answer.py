"""Unit tests for MarkBestAnswerUseCase."""

from uuid import uuid4

import pytest

from qna.application.usecase.best_answer import (
    MarkBestAnswerRequest,
    MarkBestAnswerUseCase,
)
from qna.domain.error import NotAuthorizedError, UnauthenticatedError
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import UserId
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMarkBestAnswerUseCase:
    """Tests for MarkBestAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_author_moves_best_answer(self, unit_env):
        """Accepting a second answer clears the first."""
        # Arrange
        use_case = await unit_env.get(MarkBestAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author_id = UserId(uuid4())
        question = await question_repo.save(make_question(author_id=author_id))
        first = await answer_repo.save(make_answer(question.id))
        second = await answer_repo.save(make_answer(question.id))

        def request(answer_id) -> MarkBestAnswerRequest:
            return MarkBestAnswerRequest(
                question_id=str(question.id),
                answer_id=str(answer_id),
                user_id=str(author_id),
            )

        # Act
        await use_case.execute(request(first.id))
        response = await use_case.execute(request(second.id))

        # Assert
        assert response.has_best_answer
        assert response.answer_id == str(second.id)
        answers = await answer_repo.find_by_question(question.id)
        assert [a.id for a in answers if a.is_best_answer] == [second.id]

    @pytest.mark.asyncio
    async def test_other_user_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(MarkBestAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                MarkBestAnswerRequest(
                    question_id=str(question.id),
                    answer_id=str(answer.id),
                    user_id=str(answer.author_id),
                )
            )
        assert not (await answer_repo.find_by_id(answer.id)).is_best_answer

    @pytest.mark.asyncio
    async def test_anonymous_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(MarkBestAnswerUseCase)

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                MarkBestAnswerRequest(question_id=str(uuid4()), answer_id=str(uuid4()))
            )
