"""Domain value objects for the Q&A community."""

from qna.domain.value.identifiers import (
    AnswerId,
    MessageId,
    QuestionId,
    TagId,
    UserId,
    VoteId,
)
from qna.domain.value.types import (
    TagName,
    Username,
    VotableType,
    VoteDirection,
    VoteOutcome,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    "TagId",
    "MessageId",
    # Types
    "TagName",
    "Username",
    "VotableType",
    "VoteDirection",
    "VoteOutcome",
]
