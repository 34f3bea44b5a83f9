"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest

from qna.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)
from qna.domain.repository import AnswerRepository, ProfileRepository
from qna.domain.service import ProfileService
from qna.domain.value import UserId, Username
from tests.conftest import make_answer, make_profile, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProfileLookup:
    """Tests for lookups and listings."""

    @pytest.mark.asyncio
    async def test_current_user_anonymous_is_none(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)

        # Act & Assert
        assert await profile_service.current_user(None) is None

    @pytest.mark.asyncio
    async def test_current_user_resolves_profile(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await profile_repo.save(make_profile("alice"))

        # Act
        current = await profile_service.current_user(profile.id)

        # Assert
        assert current == profile

    @pytest.mark.asyncio
    async def test_top_profiles_by_reputation(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        await profile_repo.save(make_profile("low", reputation=1))
        await profile_repo.save(make_profile("high", reputation=50))
        await profile_repo.save(make_profile("mid", reputation=10))

        # Act
        top = await profile_service.top_profiles(limit=2)

        # Assert
        assert [p.username.root for p in top] == ["high", "mid"]

    @pytest.mark.asyncio
    async def test_best_answer_counts_cover_every_user(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        answer_repo = await unit_env.get(AnswerRepository)
        alice = UserId(uuid4())
        bob = UserId(uuid4())
        question_id = make_question().id
        await answer_repo.save(
            make_answer(question_id, author_id=alice, is_best_answer=True)
        )
        await answer_repo.save(make_answer(question_id, author_id=bob))

        # Act
        counts = await profile_service.best_answer_counts([alice, bob])

        # Assert
        assert counts == {alice: 1, bob: 0}
        assert await profile_service.best_answer_count(bob) == 0


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_updates_fields(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await profile_repo.save(make_profile("alice"))

        # Act
        updated = await profile_service.update_profile(
            profile.id, username=Username("alice_b"), bio="  Python dev  "
        )

        # Assert
        assert updated.username.root == "alice_b"
        assert updated.bio == "Python dev"
        assert await profile_repo.find_by_username(Username("alice")) is None

    @pytest.mark.asyncio
    async def test_taken_username_is_rejected(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        await profile_repo.save(make_profile("bob"))
        alice = await profile_repo.save(make_profile("alice"))

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already taken"):
            await profile_service.update_profile(alice.id, username=Username("bob"))

    @pytest.mark.asyncio
    async def test_missing_profile_raises_not_found(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await profile_service.update_profile(UserId(uuid4()), bio="hello")


class TestAdmin:
    """Tests for admin checks and moderation."""

    @pytest.mark.asyncio
    async def test_require_profile_returns_existing_profile(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        user = await profile_repo.save(make_profile("alice"))

        # Act
        profile = await profile_service.require_profile(user.id, "post")

        # Assert
        assert profile.id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("caller", [None, "deleted"])
    async def test_require_profile_rejects_missing_caller(self, unit_env, caller):
        """No session and a session for a deleted user are both rejected."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        caller_id = UserId(uuid4()) if caller else None

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await profile_service.require_profile(caller_id, "post")

    @pytest.mark.asyncio
    async def test_require_admin_anonymous(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await profile_service.require_admin(None, "moderate")

    @pytest.mark.asyncio
    async def test_require_admin_rejects_regular_user(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        user = await profile_repo.save(make_profile("alice"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await profile_service.require_admin(user.id, "moderate")

    @pytest.mark.asyncio
    async def test_grant_admin_then_require_admin(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        user = await profile_repo.save(make_profile("alice"))

        # Act
        granted = await profile_service.grant_admin(user.id)
        admin = await profile_service.require_admin(user.id, "moderate")

        # Assert
        assert granted.is_admin
        assert admin.id == user.id

    @pytest.mark.asyncio
    async def test_delete_profile(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        user = await profile_repo.save(make_profile("alice"))

        # Act & Assert
        assert await profile_service.delete_profile(user.id)
        assert not await profile_service.delete_profile(user.id)
