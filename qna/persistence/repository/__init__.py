"""PostgreSQL repository implementations."""

from qna.persistence.repository.answer import PostgresAnswerRepository
from qna.persistence.repository.message import PostgresMessageRepository
from qna.persistence.repository.profile import PostgresProfileRepository
from qna.persistence.repository.question import PostgresQuestionRepository
from qna.persistence.repository.tag import PostgresTagRepository
from qna.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresMessageRepository",
    "PostgresProfileRepository",
    "PostgresQuestionRepository",
    "PostgresTagRepository",
    "PostgresVoteRepository",
]
