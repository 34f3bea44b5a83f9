"""PostgreSQL implementation of Message repository."""

from typing import Optional

from sqlalchemy import and_, asc, delete, desc, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Message
from qna.domain.repository import MessageRepository
from qna.domain.value import MessageId, UserId
from qna.persistence.error import store_operation
from qna.persistence.mappers import message_to_dict, row_to_message
from qna.persistence.tables import messages_table


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation("message_repository.find_by_id")
    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        """Find a message by ID."""
        stmt = select(messages_table).where(messages_table.c.id == message_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_message(row._asdict()) if row else None

    @store_operation("message_repository.find_conversation")
    async def find_conversation(
        self, user_a: UserId, user_b: UserId, limit: int = 200
    ) -> list[Message]:
        """Find messages between two users in both directions, oldest first."""
        stmt = (
            select(messages_table)
            .where(
                or_(
                    and_(
                        messages_table.c.sender_id == user_a,
                        messages_table.c.receiver_id == user_b,
                    ),
                    and_(
                        messages_table.c.sender_id == user_b,
                        messages_table.c.receiver_id == user_a,
                    ),
                )
            )
            .order_by(asc(messages_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_message(row._asdict()) for row in result.fetchall()]

    @store_operation("message_repository.find_all")
    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Message]:
        """Find all messages, newest first."""
        stmt = (
            select(messages_table)
            .order_by(desc(messages_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_message(row._asdict()) for row in result.fetchall()]

    @store_operation("message_repository.save")
    async def save(self, message: Message) -> Message:
        """Insert a message."""
        await self.session.execute(
            insert(messages_table).values(**message_to_dict(message))
        )
        await self.session.flush()
        return message

    @store_operation("message_repository.delete")
    async def delete(self, message_id: MessageId) -> bool:
        """Delete a message."""
        stmt = delete(messages_table).where(messages_table.c.id == message_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
