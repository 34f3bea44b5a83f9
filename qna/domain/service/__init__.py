"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .best_answer_service import BestAnswerService
from .jwt_service import JWTService
from .message_service import MessageService
from .profile_service import ProfileService
from .question_service import QuestionService
from .score_service import ScoreService
from .tag_service import TagService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "BestAnswerService",
    "JWTService",
    "MessageService",
    "ProfileService",
    "QuestionService",
    "ScoreService",
    "Service",
    "TagService",
    "VoteService",
]
