"""Unit tests for AskQuestionUseCase."""

from uuid import UUID, uuid4

import pytest

from qna.application.usecase.question import AskQuestionRequest, AskQuestionUseCase
from qna.domain.error import UnauthenticatedError, ValidationError
from qna.domain.repository import (
    ProfileRepository,
    QuestionRepository,
    TagRepository,
)
from qna.domain.value import QuestionId, TagName
from tests.conftest import make_profile, make_tag
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TITLE = "How do I merge two dictionaries?"
CONTENT = "I have two dicts and want a single dict with keys from both of them."


async def _author(unit_env) -> str:
    profile_repo = await unit_env.get(ProfileRepository)
    profile = await profile_repo.save(make_profile(f"author-{uuid4().hex[:8]}"))
    return str(profile.id)


class TestAskQuestionUseCase:
    """Tests for AskQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_ask_question_records_tag_usage(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AskQuestionUseCase)
        tag_repo = await unit_env.get(TagRepository)
        question_repo = await unit_env.get(QuestionRepository)
        await tag_repo.save(make_tag("python", question_count=4))

        # Act
        response = await use_case.execute(
            AskQuestionRequest(
                title=TITLE,
                content=CONTENT,
                tag_names=[" Python "],
                author_id=await _author(unit_env),
            )
        )

        # Assert
        assert response.tag_names == ["python"]
        assert response.votes == 0
        assert response.answer_count == 0
        stored = await question_repo.find_by_id(QuestionId(UUID(response.question_id)))
        assert stored is not None
        assert (await tag_repo.find_by_name(TagName("python"))).question_count == 5

    @pytest.mark.asyncio
    async def test_unknown_tag_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AskQuestionUseCase)
        tag_repo = await unit_env.get(TagRepository)
        await tag_repo.save(make_tag("python"))

        # Act & Assert
        with pytest.raises(ValidationError, match="Tags not found: cobol"):
            await use_case.execute(
                AskQuestionRequest(
                    title=TITLE,
                    content=CONTENT,
                    tag_names=["python", "cobol"],
                    author_id=await _author(unit_env),
                )
            )

    @pytest.mark.asyncio
    async def test_too_many_tags(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AskQuestionUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                AskQuestionRequest(
                    title=TITLE,
                    content=CONTENT,
                    tag_names=["a1", "b2", "c3", "d4", "e5", "f6"],
                    author_id=await _author(unit_env),
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_cannot_ask(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AskQuestionUseCase)

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                AskQuestionRequest(title=TITLE, content=CONTENT, tag_names=["python"])
            )

    @pytest.mark.asyncio
    async def test_session_without_profile_cannot_ask(self, unit_env):
        """A token for a deleted user is rejected and no tag count moves."""
        # Arrange
        use_case = await unit_env.get(AskQuestionUseCase)
        tag_repo = await unit_env.get(TagRepository)
        await tag_repo.save(make_tag("python", question_count=4))

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                AskQuestionRequest(
                    title=TITLE,
                    content=CONTENT,
                    tag_names=["python"],
                    author_id=str(uuid4()),
                )
            )
        assert (await tag_repo.find_by_name(TagName("python"))).question_count == 4
