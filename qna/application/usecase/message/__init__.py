"""Direct message use cases."""

from .get_conversation import (
    GetConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
)
from .send_message import (
    MessageItem,
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)

__all__ = [
    "GetConversationRequest",
    "GetConversationResponse",
    "GetConversationUseCase",
    "MessageItem",
    "SendMessageRequest",
    "SendMessageResponse",
    "SendMessageUseCase",
]
