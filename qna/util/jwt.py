"""Session token encoding and verification.

Tokens are HS256-signed JWTs carrying the profile id and username. The
identity provider in front of the API mints them with the same secret;
``create_token`` exists for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from qna.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims of a session token."""

    user_id: str
    username: str
    exp: datetime


class JWTError(Exception):
    """Token is expired, badly signed or missing claims."""

    pass


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a session token that expires after ``jwt_expiry_days``."""
    claims = {
        "user_id": user_id,
        "username": username,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a session token and check its signature and expiry.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except PydanticValidationError as e:
        raise JWTError("Token is missing claims") from e
