"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from qna.domain.model.question import Question
from qna.domain.value import QuestionId, TagName, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    VOTES = "votes"  # votes DESC, then views DESC
    ANSWERS = "answers"  # answer_count DESC
    VIEWS = "views"  # views DESC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            tag: Only questions carrying this tag
            search: Case-insensitive substring of title or content
            unanswered: Only questions without answers and best answer
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            Questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """Find questions asked by a user, newest first."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def adjust_votes(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add ``delta`` to the question's vote total.

        Uses a store-level increment so concurrent voters never overwrite
        each other.

        Args:
            question_id: The question ID
            delta: Signed amount to add
        """
        pass

    @abstractmethod
    async def set_votes(self, question_id: QuestionId, votes: int) -> None:
        """Overwrite the vote total (used by reconciliation)."""
        pass

    @abstractmethod
    async def set_answer_count(self, question_id: QuestionId, count: int) -> None:
        """Overwrite the answer count.

        This is a plain write with no compare-and-swap.

        Args:
            question_id: The question ID
            count: New answer count
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def set_has_best_answer(self, question_id: QuestionId, value: bool) -> None:
        """Set the question's has_best_answer flag."""
        pass
