"""Domain model entities for the Q&A community."""

from qna.domain.model.answer import Answer
from qna.domain.model.message import Message
from qna.domain.model.profile import Profile
from qna.domain.model.question import Question
from qna.domain.model.score import CounterDrift, ReconcileReport, ScoreProjection
from qna.domain.model.tag import Tag
from qna.domain.model.vote import Vote, VoteResult

__all__ = [
    "Profile",
    "Question",
    "Answer",
    "Vote",
    "VoteResult",
    "Tag",
    "Message",
    "ScoreProjection",
    "CounterDrift",
    "ReconcileReport",
]
