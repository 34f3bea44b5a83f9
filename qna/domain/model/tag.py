"""Tag entity for categorizing questions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Questions carry 1-5 existing tags. ``question_count`` is a
    denormalized usage counter kept by atomic increments.
    """

    id: TagId
    name: TagName
    description: Optional[str] = Field(default=None, max_length=200)
    question_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
