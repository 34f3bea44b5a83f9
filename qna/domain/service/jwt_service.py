"""Session identity domain service."""

from uuid import UUID

import logfire

from qna.config import AuthSettings
from qna.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Resolves the session cookie into a caller identity."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Caller's profile id, or None for anonymous callers.

        A missing, expired or forged token, or one whose subject is not
        a UUID, means "no identity"; it never raises.
        """
        if not token:
            return None

        try:
            user_id = self.verify_token(token).user_id
            UUID(user_id)
        except (JWTError, ValueError) as e:
            logfire.debug("Session token rejected, treating as anonymous", error=str(e))
            return None
        return user_id
