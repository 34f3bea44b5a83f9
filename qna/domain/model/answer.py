"""Answer entity."""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    ``is_best_answer`` is only ever changed by the best-answer selector,
    which keeps at most one flagged answer per question.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=30000)
    votes: int = 0
    is_best_answer: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
