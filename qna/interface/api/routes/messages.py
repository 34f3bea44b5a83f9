"""Direct message routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from qna.application.usecase.message import (
    GetConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)
from qna.domain.service import JWTService

router = APIRouter(prefix="/messages", tags=["messages"], route_class=DishkaRoute)


class SendMessageAPIRequest(BaseModel):
    """API request for sending a direct message."""

    content: str = Field(min_length=1)


@router.get("/{user_id}", response_model=GetConversationResponse)
async def get_conversation(
    user_id: UUID,
    get_conversation_use_case: FromDishka[GetConversationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetConversationResponse:
    """Get the caller's conversation with another user, oldest first."""
    caller_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_conversation_use_case.execute(
        GetConversationRequest(other_user_id=str(user_id), user_id=caller_id)
    )


@router.post(
    "/{user_id}",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    user_id: UUID,
    request: SendMessageAPIRequest,
    send_message_use_case: FromDishka[SendMessageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SendMessageResponse:
    """Send a direct message to another user."""
    caller_id = jwt_service.get_user_id_from_token(auth_token)
    return await send_message_use_case.execute(
        SendMessageRequest(
            receiver_id=str(user_id), content=request.content, sender_id=caller_id
        )
    )
