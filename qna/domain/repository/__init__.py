"""Repository interfaces for the Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from qna.domain.repository.answer import AnswerRepository, AnswerSortOrder
from qna.domain.repository.message import MessageRepository
from qna.domain.repository.profile import ProfileRepository
from qna.domain.repository.question import QuestionRepository, QuestionSortOrder
from qna.domain.repository.tag import TagRepository
from qna.domain.repository.vote import VoteRepository

__all__ = [
    "AnswerRepository",
    "AnswerSortOrder",
    "MessageRepository",
    "ProfileRepository",
    "QuestionRepository",
    "QuestionSortOrder",
    "TagRepository",
    "VoteRepository",
]
