"""Domain value objects for the Q&A community.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum

from pydantic import field_validator

from qna.domain.value.common import RootValueObject


class VoteDirection(IntEnum):
    """Direction of a vote.

    Stored as +1/-1. "No vote" is the absence of a vote record,
    never a stored zero.
    """

    UP = 1
    DOWN = -1

    @property
    def opposite(self) -> "VoteDirection":
        """The other direction."""
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteOutcome(str, Enum):
    """What casting a vote did to the caller's vote record."""

    APPLIED = "applied"  # No previous vote, record inserted
    TOGGLED = "toggled"  # Same direction again, record deleted
    CHANGED = "changed"  # Opposite direction, record flipped


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Lowercase, 2-30 characters. Besides alphanumerics and hyphens, the
    characters ``.``, ``+`` and ``#`` are allowed so that tags such as
    'c++', 'c#' and 'node.js' can exist.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9][a-z0-9.+#-]{1,29}$", v):
            raise ValueError(
                "Tag name must be 2-30 characters, lowercase, alphanumeric "
                "with '-', '.', '+' or '#'"
            )
        return v


class Username(RootValueObject[str]):
    """Public username of a profile.

    3-30 characters: letters, numbers, underscores and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[a-zA-Z0-9_-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters and can only contain "
                "letters, numbers, underscores and hyphens"
            )
        return v
