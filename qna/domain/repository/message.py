"""Message repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.message import Message
from qna.domain.value import MessageId, UserId


class MessageRepository(ABC):
    """Repository for direct messages."""

    @abstractmethod
    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        """Find a message by ID."""
        pass

    @abstractmethod
    async def find_conversation(
        self, user_a: UserId, user_b: UserId, limit: int = 200
    ) -> list[Message]:
        """Find messages exchanged between two users in either direction.

        Args:
            user_a: One participant
            user_b: The other participant
            limit: Maximum number of messages to return

        Returns:
            Messages ordered oldest first
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Message]:
        """Find all messages, newest first (moderation view)."""
        pass

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Insert a message."""
        pass

    @abstractmethod
    async def delete(self, message_id: MessageId) -> bool:
        """Delete a message.

        Returns:
            True if a message was deleted, False if none existed
        """
        pass
