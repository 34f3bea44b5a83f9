"""Authentication routes.

Sign-in happens outside this API; a signed session token arrives in the
auth_token cookie and is only read and cleared here.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel

from qna.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from qna.application.usecase.profile import ProfileItem
from qna.config import Settings
from qna.domain.service import JWTService

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Session status for the frontend header."""

    authenticated: bool
    user: ProfileItem | None = None


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Who the session cookie belongs to.

    Never fails: anonymous callers get ``authenticated=false``.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        return AuthStatusResponse(authenticated=False)

    result = await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )
    # A valid token for a deleted profile is treated as signed out
    return AuthStatusResponse(authenticated=result.user is not None, user=result.user)
