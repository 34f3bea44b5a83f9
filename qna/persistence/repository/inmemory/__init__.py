"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .message import InMemoryMessageRepository
from .profile import InMemoryProfileRepository
from .question import InMemoryQuestionRepository
from .tag import InMemoryTagRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryMessageRepository",
    "InMemoryProfileRepository",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
    "InMemoryVoteRepository",
]
