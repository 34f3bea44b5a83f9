"""Message domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.config import ContentSettings
from qna.domain.error import NotFoundError, UnauthenticatedError, ValidationError
from qna.domain.model.message import Message
from qna.domain.repository import MessageRepository, ProfileRepository
from qna.domain.value import MessageId, UserId

from .base import Service


class MessageService(Service):
    """Domain service for direct messages."""

    def __init__(
        self,
        message_repository: MessageRepository,
        profile_repository: ProfileRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize message service.

        Args:
            message_repository: Message repository
            profile_repository: Profile repository (receiver lookup)
            content_settings: Content validation limits
        """
        self.message_repository = message_repository
        self.profile_repository = profile_repository
        self.content_settings = content_settings

    async def send_message(
        self, sender_id: UserId | None, receiver_id: UserId, content: str
    ) -> Message:
        """Send a direct message.

        Raises:
            UnauthenticatedError: If there is no sender or no such profile
            ValidationError: If the content is empty, too long, or the
                sender is messaging themselves
            NotFoundError: If the receiver does not exist
        """
        if sender_id is None:
            raise UnauthenticatedError("send messages")

        with logfire.span(
            "message_service.send_message",
            sender_id=str(sender_id),
            receiver_id=str(receiver_id),
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Message cannot be empty")
            if len(content) > self.content_settings.message_max_length:
                raise ValidationError(
                    f"Message must be at most {self.content_settings.message_max_length} characters"
                )
            if sender_id == receiver_id:
                raise ValidationError("You cannot message yourself")

            sender = await self.profile_repository.find_by_id(sender_id)
            if not sender:
                raise UnauthenticatedError("send messages")

            receiver = await self.profile_repository.find_by_id(receiver_id)
            if not receiver:
                raise NotFoundError("Profile", str(receiver_id))

            message = Message(
                id=MessageId(uuid4()),
                sender_id=sender_id,
                receiver_id=receiver_id,
                content=content,
                created_at=datetime.now(),
            )
            saved = await self.message_repository.save(message)
            logfire.info("Message sent", message_id=str(saved.id))
            return saved

    async def get_conversation(
        self, caller_id: UserId | None, other_id: UserId
    ) -> list[Message]:
        """Get the caller's conversation with another user, oldest first.

        Raises:
            UnauthenticatedError: If there is no caller
        """
        if caller_id is None:
            raise UnauthenticatedError("read messages")

        with logfire.span(
            "message_service.get_conversation",
            caller_id=str(caller_id),
            other_id=str(other_id),
        ):
            return await self.message_repository.find_conversation(caller_id, other_id)

    async def list_all_messages(self, limit: int = 100, offset: int = 0) -> list[Message]:
        """List every message, newest first (moderation)."""
        with logfire.span("message_service.list_all_messages", limit=limit):
            return await self.message_repository.find_all(limit=limit, offset=offset)

    async def delete_message(self, message_id: MessageId) -> bool:
        """Delete a message (moderation).

        Returns:
            True if deleted, False if it did not exist
        """
        with logfire.span("message_service.delete_message", message_id=str(message_id)):
            deleted = await self.message_repository.delete(message_id)
            if deleted:
                logfire.info("Message deleted", message_id=str(message_id))
            else:
                logfire.warn("No message to delete", message_id=str(message_id))
            return deleted
