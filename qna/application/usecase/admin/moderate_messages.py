"""Admin message moderation use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.message import MessageItem
from qna.domain.error import NotFoundError
from qna.domain.service import MessageService, ProfileService
from qna.domain.value import MessageId, UserId


class AdminListMessagesRequest(BaseModel):
    """Admin list messages request."""

    admin_id: str | None = None  # From the session
    limit: int = Field(default=100, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class AdminListMessagesResponse(BaseModel):
    """All messages, newest first."""

    messages: list[MessageItem]


class AdminListMessagesUseCase(BaseUseCase[AdminListMessagesRequest, AdminListMessagesResponse]):
    """Use case for reviewing every direct message."""

    def __init__(
        self, profile_service: ProfileService, message_service: MessageService
    ) -> None:
        self.profile_service = profile_service
        self.message_service = message_service

    async def execute(
        self, request: AdminListMessagesRequest
    ) -> AdminListMessagesResponse:
        caller_id = UserId(UUID(request.admin_id)) if request.admin_id else None
        await self.profile_service.require_admin(caller_id, "list messages")

        messages = await self.message_service.list_all_messages(
            limit=request.limit, offset=request.offset
        )
        return AdminListMessagesResponse(
            messages=[MessageItem.from_message(m) for m in messages]
        )


class DeleteMessageRequest(BaseModel):
    """Delete message request."""

    message_id: str  # UUID string
    admin_id: str | None = None  # From the session


class DeleteMessageUseCase(BaseUseCase[DeleteMessageRequest, None]):
    """Use case for removing a direct message."""

    def __init__(
        self, profile_service: ProfileService, message_service: MessageService
    ) -> None:
        """Initialize delete message use case.

        Args:
            profile_service: Profile domain service (admin check)
            message_service: Message domain service
        """
        self.profile_service = profile_service
        self.message_service = message_service

    async def execute(self, request: DeleteMessageRequest) -> None:
        """Execute delete message flow.

        Raises:
            UnauthenticatedError: If there is no caller
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the message does not exist
        """
        caller_id = UserId(UUID(request.admin_id)) if request.admin_id else None
        await self.profile_service.require_admin(caller_id, "delete messages")

        if not await self.message_service.delete_message(
            MessageId(UUID(request.message_id))
        ):
            raise NotFoundError("Message", request.message_id)
