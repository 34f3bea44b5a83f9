"""Profile aggregate root.

A profile is the public face of an authenticated user. Its id is the
identity carried in the session token.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId, Username


class Profile(DomainModel):
    """User profile."""

    id: UserId
    username: Username
    full_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    reputation: int = Field(default=0, ge=0)
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
