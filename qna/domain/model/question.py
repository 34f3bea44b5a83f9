"""Question aggregate root.

Questions carry three denormalized counters (votes, answer_count, views)
and the has_best_answer flag. None of them is authoritative: votes and
answer_count can be re-derived from vote and answer records.
"""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import QuestionId, TagName, UserId


class Question(DomainModel):
    """Question aggregate root.

    Business rules:
    - 1-5 tags, all of which must exist
    - Only the author can edit the question or choose its best answer
    - has_best_answer is True iff exactly one answer has is_best_answer
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=30000)
    author_id: UserId
    tag_names: list[TagName] = Field(default_factory=list, max_length=5)
    votes: int = 0  # Net score, may go negative
    answer_count: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    has_best_answer: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_unanswered(self) -> bool:
        """Whether the question has no answers and no accepted answer."""
        return self.answer_count == 0 and not self.has_best_answer
