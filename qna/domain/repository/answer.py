"""Answer repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, QuestionId, UserId


class AnswerSortOrder(str, Enum):
    """Sort order for a question's answers.

    The best answer is always listed first regardless of order.
    """

    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # votes DESC, then created_at ASC


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    ) -> list[Answer]:
        """Find all answers to a question.

        Args:
            question_id: The question ID
            sort: Sort order (best answer always first)

        Returns:
            Answers to the question
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count the answer records referencing a question."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> list[Answer]:
        """Find every answer written by a user."""
        pass

    @abstractmethod
    async def count_best_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count the best answers of each author.

        Args:
            author_ids: Authors to count for

        Returns:
            Mapping of every requested author to their best-answer count
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def adjust_votes(self, answer_id: AnswerId, delta: int) -> None:
        """Atomically add ``delta`` to the answer's vote total."""
        pass

    @abstractmethod
    async def set_votes(self, answer_id: AnswerId, votes: int) -> None:
        """Overwrite the vote total (used by reconciliation)."""
        pass

    @abstractmethod
    async def select_best(self, question_id: QuestionId, answer_id: AnswerId) -> int:
        """Flag one answer as best and clear the flag on its siblings.

        Implemented as a single conditional write over all answers of the
        question, so no intermediate state with two flagged answers (or a
        cleared flag on the chosen one) is ever stored.

        Args:
            question_id: The question whose answers are updated
            answer_id: The answer to flag

        Returns:
            Number of answers flagged (1, or 0 if the answer does not
            belong to the question)
        """
        pass
