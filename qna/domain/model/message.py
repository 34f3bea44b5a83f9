"""Direct message entity."""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import MessageId, UserId


class Message(DomainModel):
    """A direct message between two users."""

    id: MessageId
    sender_id: UserId
    receiver_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)

    def involves(self, user_id: UserId) -> bool:
        """Whether the user sent or received this message."""
        return user_id in (self.sender_id, self.receiver_id)
