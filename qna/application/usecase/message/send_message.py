"""Send message use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.model.message import Message
from qna.domain.service import MessageService
from qna.domain.value import UserId


class MessageItem(BaseModel):
    """Direct message in responses."""

    message_id: str
    sender_id: str
    receiver_id: str
    content: str
    created_at: datetime

    @classmethod
    def from_message(cls, message: Message) -> "MessageItem":
        return cls(
            message_id=str(message.id),
            sender_id=str(message.sender_id),
            receiver_id=str(message.receiver_id),
            content=message.content,
            created_at=message.created_at,
        )


class SendMessageRequest(BaseModel):
    """Send message request."""

    receiver_id: str  # UUID string
    content: str
    sender_id: str | None = None  # From the session, None if anonymous


class SendMessageResponse(BaseModel):
    """Send message response."""

    message: MessageItem


class SendMessageUseCase(BaseUseCase[SendMessageRequest, SendMessageResponse]):
    """Use case for sending a direct message."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize send message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: SendMessageRequest) -> SendMessageResponse:
        """Execute send message flow.

        Raises:
            UnauthenticatedError: If there is no caller
            ValidationError: If the content is empty or too long
            NotFoundError: If the receiver does not exist
        """
        sender_id = UserId(UUID(request.sender_id)) if request.sender_id else None
        message = await self.message_service.send_message(
            sender_id, UserId(UUID(request.receiver_id)), request.content
        )
        return SendMessageResponse(message=MessageItem.from_message(message))
