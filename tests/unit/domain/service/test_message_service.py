"""Unit tests for MessageService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError, UnauthenticatedError, ValidationError
from qna.domain.repository import MessageRepository, ProfileRepository
from qna.domain.service import MessageService
from qna.domain.value import UserId
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _pair(unit_env):
    profile_repo = await unit_env.get(ProfileRepository)
    alice = await profile_repo.save(make_profile("alice"))
    bob = await profile_repo.save(make_profile("bob"))
    return alice, bob


class TestSendMessage:
    """Tests for send_message."""

    @pytest.mark.asyncio
    async def test_sends_message(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        alice, bob = await _pair(unit_env)

        # Act
        message = await message_service.send_message(alice.id, bob.id, "  Hi Bob  ")

        # Assert
        assert message.sender_id == alice.id
        assert message.receiver_id == bob.id
        assert message.content == "Hi Bob"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content, match",
        [("   ", "cannot be empty"), ("x" * 2001, "at most 2000")],
    )
    async def test_rejects_bad_content(self, unit_env, content, match):
        # Arrange
        message_service = await unit_env.get(MessageService)
        alice, bob = await _pair(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match=match):
            await message_service.send_message(alice.id, bob.id, content)

    @pytest.mark.asyncio
    async def test_cannot_message_yourself(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        alice, _ = await _pair(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match="yourself"):
            await message_service.send_message(alice.id, alice.id, "Hello me")

    @pytest.mark.asyncio
    async def test_unknown_receiver(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        alice, _ = await _pair(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await message_service.send_message(alice.id, UserId(uuid4()), "Hello")

    @pytest.mark.asyncio
    async def test_anonymous_sender(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        _, bob = await _pair(unit_env)

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await message_service.send_message(None, bob.id, "Hello")

    @pytest.mark.asyncio
    async def test_deleted_sender_cannot_send(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        _, bob = await _pair(unit_env)
        ghost = UserId(uuid4())

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await message_service.send_message(ghost, bob.id, "Hello")
        assert await message_repo.find_conversation(ghost, bob.id) == []


class TestConversation:
    """Tests for get_conversation and moderation helpers."""

    @pytest.mark.asyncio
    async def test_conversation_is_both_directions_oldest_first(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        alice, bob = await _pair(unit_env)
        first = await message_service.send_message(alice.id, bob.id, "Question?")
        reply = await message_service.send_message(bob.id, alice.id, "Answer.")
        # Make ordering independent of clock resolution
        await message_repo.save(
            first.model_copy(update={"created_at": datetime.now() - timedelta(minutes=1)})
        )

        # Act
        conversation = await message_service.get_conversation(alice.id, bob.id)

        # Assert
        assert [m.id for m in conversation] == [first.id, reply.id]

    @pytest.mark.asyncio
    async def test_conversation_requires_identity(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await message_service.get_conversation(None, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_message(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        alice, bob = await _pair(unit_env)
        message = await message_service.send_message(alice.id, bob.id, "Hello")

        # Act & Assert
        assert await message_service.delete_message(message.id)
        assert await message_service.list_all_messages() == []
