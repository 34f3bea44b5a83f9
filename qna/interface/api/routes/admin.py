"""Admin moderation routes.

Every route requires an authenticated caller with the admin flag.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status

from qna.application.usecase.admin import (
    AdminListMessagesRequest,
    AdminListMessagesResponse,
    AdminListMessagesUseCase,
    AdminListUsersRequest,
    AdminListUsersUseCase,
    DeleteMessageRequest,
    DeleteMessageUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GrantAdminRequest,
    GrantAdminResponse,
    GrantAdminUseCase,
    ReconcileQuestionRequest,
    ReconcileQuestionResponse,
    ReconcileQuestionUseCase,
)
from qna.application.usecase.profile import ListProfilesResponse
from qna.domain.service import JWTService

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/users", response_model=ListProfilesResponse)
async def list_users(
    admin_list_users_use_case: FromDishka[AdminListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListProfilesResponse:
    """List every profile."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)
    return await admin_list_users_use_case.execute(
        AdminListUsersRequest(admin_id=admin_id, limit=limit, offset=offset)
    )


@router.post("/users/{user_id}/admin", response_model=GrantAdminResponse)
async def grant_admin(
    user_id: UUID,
    grant_admin_use_case: FromDishka[GrantAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GrantAdminResponse:
    """Make a user an administrator."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)
    return await grant_admin_use_case.execute(
        GrantAdminRequest(user_id=str(user_id), admin_id=admin_id)
    )


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a user's profile."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)
    await delete_user_use_case.execute(
        DeleteUserRequest(user_id=str(user_id), admin_id=admin_id)
    )


@router.get("/messages", response_model=AdminListMessagesResponse)
async def list_messages(
    admin_list_messages_use_case: FromDishka[AdminListMessagesUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> AdminListMessagesResponse:
    """List every direct message, newest first."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)
    return await admin_list_messages_use_case.execute(
        AdminListMessagesRequest(admin_id=admin_id, limit=limit, offset=offset)
    )


@router.delete("/messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(
    message_id: UUID,
    delete_message_use_case: FromDishka[DeleteMessageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a direct message."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)
    await delete_message_use_case.execute(
        DeleteMessageRequest(message_id=str(message_id), admin_id=admin_id)
    )


@router.post(
    "/questions/{question_id}/reconcile", response_model=ReconcileQuestionResponse
)
async def reconcile_question(
    question_id: UUID,
    reconcile_question_use_case: FromDishka[ReconcileQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReconcileQuestionResponse:
    """Recompute a question's stored counters from the vote and answer rows.

    Returns the corrected values and any drift that was repaired.
    """
    admin_id = jwt_service.get_user_id_from_token(auth_token)
    return await reconcile_question_use_case.execute(
        ReconcileQuestionRequest(question_id=str(question_id), admin_id=admin_id)
    )
