"""In-memory answer repository for testing."""

from typing import Optional, Sequence

from qna.domain.model.answer import Answer
from qna.domain.repository.answer import AnswerRepository, AnswerSortOrder
from qna.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    ) -> list[Answer]:
        """Find a question's answers, best answer first."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        if sort == AnswerSortOrder.VOTES:
            answers.sort(key=lambda a: a.votes, reverse=True)
        answers.sort(key=lambda a: a.is_best_answer, reverse=True)
        return answers

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count the answers of a question."""
        return sum(1 for a in self._answers.values() if a.question_id == question_id)

    async def find_by_author(self, author_id: UserId) -> list[Answer]:
        """Find every answer written by a user."""
        return [a for a in self._answers.values() if a.author_id == author_id]

    async def count_best_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count best answers per author."""
        counts = {author_id: 0 for author_id in author_ids}
        for answer in self._answers.values():
            if answer.is_best_answer and answer.author_id in counts:
                counts[answer.author_id] += 1
        return counts

    async def save(self, answer: Answer) -> Answer:
        """Save an answer. Updating keeps the stored votes and best flag."""
        existing = self._answers.get(answer.id)
        if existing is not None:
            answer = answer.model_copy(
                update={
                    "votes": existing.votes,
                    "is_best_answer": existing.is_best_answer,
                }
            )
        self._answers[answer.id] = answer
        return answer

    async def adjust_votes(self, answer_id: AnswerId, delta: int) -> None:
        """Add ``delta`` to the vote total."""
        answer = self._answers.get(answer_id)
        if answer is not None:
            self._answers[answer_id] = answer.model_copy(
                update={"votes": answer.votes + delta}
            )

    async def set_votes(self, answer_id: AnswerId, votes: int) -> None:
        """Overwrite the vote total."""
        answer = self._answers.get(answer_id)
        if answer is not None:
            self._answers[answer_id] = answer.model_copy(update={"votes": votes})

    async def select_best(self, question_id: QuestionId, answer_id: AnswerId) -> int:
        """Flag one answer as best and clear the flag on its siblings."""
        flagged = 0
        for answer in list(self._answers.values()):
            if answer.question_id != question_id:
                continue
            is_best = answer.id == answer_id
            flagged += int(is_best)
            self._answers[answer.id] = answer.model_copy(
                update={"is_best_answer": is_best}
            )
        return flagged

    def remove_by_author(self, author_id: UserId) -> None:
        """Drop a user's answers, as the profile foreign key cascade does."""
        for answer_id in [
            a.id for a in self._answers.values() if a.author_id == author_id
        ]:
            del self._answers[answer_id]

    def remove_by_questions(self, question_ids: set[QuestionId]) -> None:
        """Drop the answers of deleted questions."""
        for answer_id in [
            a.id for a in self._answers.values() if a.question_id in question_ids
        ]:
            del self._answers[answer_id]
