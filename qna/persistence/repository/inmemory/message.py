"""In-memory message repository for testing."""

from typing import Optional

from qna.domain.model.message import Message
from qna.domain.repository.message import MessageRepository
from qna.domain.value import MessageId, UserId


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self) -> None:
        self._messages: dict[MessageId, Message] = {}

    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        """Find a message by ID."""
        return self._messages.get(message_id)

    async def find_conversation(
        self, user_a: UserId, user_b: UserId, limit: int = 200
    ) -> list[Message]:
        """Find messages between two users, oldest first."""
        messages = [
            m
            for m in self._messages.values()
            if (m.sender_id, m.receiver_id) in ((user_a, user_b), (user_b, user_a))
        ]
        messages.sort(key=lambda m: m.created_at)
        return messages[:limit]

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Message]:
        """Find all messages, newest first."""
        messages = sorted(
            self._messages.values(), key=lambda m: m.created_at, reverse=True
        )
        return messages[offset : offset + limit]

    async def save(self, message: Message) -> Message:
        """Save a message."""
        self._messages[message.id] = message
        return message

    async def delete(self, message_id: MessageId) -> bool:
        """Delete a message."""
        return self._messages.pop(message_id, None) is not None

    def remove_by_user(self, user_id: UserId) -> None:
        """Drop every message a user sent or received."""
        for message_id in [
            m.id
            for m in self._messages.values()
            if user_id in (m.sender_id, m.receiver_id)
        ]:
            del self._messages[message_id]
