"""Strongly typed identifiers for Q&A domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# A UserId is the id of a profile record
UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
VoteId = NewType("VoteId", UUID)
TagId = NewType("TagId", UUID)
MessageId = NewType("MessageId", UUID)
