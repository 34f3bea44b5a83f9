"""Get conversation use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import MessageService
from qna.domain.value import UserId

from .send_message import MessageItem


class GetConversationRequest(BaseModel):
    """Get conversation request."""

    other_user_id: str  # UUID string
    user_id: str | None = None  # From the session, None if anonymous


class GetConversationResponse(BaseModel):
    """Messages exchanged with one user, oldest first."""

    messages: list[MessageItem]


class GetConversationUseCase(BaseUseCase[GetConversationRequest, GetConversationResponse]):
    """Use case for reading a conversation with another user."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: GetConversationRequest) -> GetConversationResponse:
        caller_id = UserId(UUID(request.user_id)) if request.user_id else None
        messages = await self.message_service.get_conversation(
            caller_id, UserId(UUID(request.other_user_id))
        )
        return GetConversationResponse(
            messages=[MessageItem.from_message(m) for m in messages]
        )
