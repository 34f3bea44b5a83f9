"""Unit tests for QuestionService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from qna.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from qna.domain.repository import QuestionRepository, QuestionSortOrder
from qna.domain.service import QuestionService
from qna.domain.value import QuestionId, TagName, UserId
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TITLE = "Why does my asyncio task never finish?"
CONTENT = "I create a task with create_task and await it, but the program hangs forever."


class TestCreateQuestion:
    """Tests for create_question and content validation."""

    @pytest.mark.asyncio
    async def test_creates_question_with_zeroed_counters(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        author_id = UserId(uuid4())

        # Act
        question = await question_service.create_question(
            author_id, f"  {TITLE}  ", CONTENT, [TagName("python")]
        )

        # Assert
        assert question.title == TITLE
        assert question.author_id == author_id
        assert question.votes == 0
        assert question.answer_count == 0
        assert question.views == 0
        assert not question.has_best_answer

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title, content, tags, message",
        [
            ("Too short", CONTENT, ["python"], "Title must be at least 15"),
            ("x" * 151, CONTENT, ["python"], "Title must be at most 150"),
            (TITLE, "short body", ["python"], "at least 30 characters"),
            (TITLE, CONTENT, [], "At least one tag"),
            (TITLE, CONTENT, ["a1", "b1", "c1", "d1", "e1", "f1"], "up to 5 tags"),
            (TITLE, CONTENT, ["python", "python"], "Duplicate tags"),
        ],
    )
    async def test_rejects_invalid_content(
        self, unit_env, title, content, tags, message
    ):
        # Arrange
        question_service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(ValidationError, match=message):
            await question_service.create_question(
                UserId(uuid4()), title, content, [TagName(t) for t in tags]
            )


class TestUpdateQuestion:
    """Tests for update_question."""

    @pytest.mark.asyncio
    async def test_author_edit_keeps_counters(self, unit_env):
        """Editing text never resets votes, answers or views."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(votes=4, answer_count=2))
        await question_repo.increment_views(question.id)

        # Act
        before, after = await question_service.update_question(
            question.id, question.author_id, title=TITLE
        )

        # Assert
        assert before.title != TITLE
        assert after.title == TITLE
        stored = await question_repo.find_by_id(question.id)
        assert stored.votes == 4
        assert stored.answer_count == 2
        assert stored.views == 1

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await question_service.update_question(
                question.id, UserId(uuid4()), content=CONTENT
            )

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await question_service.update_question(
                QuestionId(uuid4()), UserId(uuid4()), title=TITLE
            )


class TestCounters:
    """Tests for answer count and view counters."""

    @pytest.mark.asyncio
    async def test_increment_answer_count(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(answer_count=2))

        # Act
        updated = await question_service.increment_answer_count(question.id)

        # Assert
        assert updated.answer_count == 3
        assert (await question_repo.find_by_id(question.id)).answer_count == 3

    @pytest.mark.asyncio
    async def test_increment_answer_count_missing_question(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await question_service.increment_answer_count(QuestionId(uuid4()))

    @pytest.mark.asyncio
    async def test_record_view(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        # Act
        await question_service.record_view(question.id)
        await question_service.record_view(question.id)

        # Assert
        assert (await question_repo.find_by_id(question.id)).views == 2


class TestListQuestions:
    """Tests for list_questions."""

    @pytest.mark.asyncio
    async def test_sorts_and_filters(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        now = datetime.now()
        old = await question_repo.save(
            make_question(votes=9, created_at=now - timedelta(days=2))
        )
        new = await question_repo.save(
            make_question(tag_names=["react"], answer_count=1, created_at=now)
        )

        # Act
        newest, total = await question_service.list_questions()
        by_votes, _ = await question_service.list_questions(sort=QuestionSortOrder.VOTES)
        tagged, tagged_total = await question_service.list_questions(
            tag=TagName("react")
        )
        unanswered, _ = await question_service.list_questions(unanswered=True)

        # Assert
        assert total == 2
        assert [q.id for q in newest] == [new.id, old.id]
        assert [q.id for q in by_votes] == [old.id, new.id]
        assert [q.id for q in tagged] == [new.id]
        assert tagged_total == 1
        assert [q.id for q in unanswered] == [old.id]

    @pytest.mark.asyncio
    async def test_search_matches_title_and_content(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        match = await question_repo.save(make_question(title="Closing a Generator early"))
        await question_repo.save(make_question())

        # Act
        found, total = await question_service.list_questions(search="  generator ")

        # Assert
        assert [q.id for q in found] == [match.id]
        assert total == 1
