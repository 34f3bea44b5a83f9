"""In-memory question repository for testing."""

from typing import Optional

from qna.domain.model.question import Question
from qna.domain.repository.question import QuestionRepository, QuestionSortOrder
from qna.domain.value import QuestionId, TagName, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def _update(self, question_id: QuestionId, **changes) -> None:
        question = self._questions.get(question_id)
        if question is not None:
            self._questions[question_id] = question.model_copy(update=changes)

    def _filter(
        self,
        tag: Optional[TagName],
        search: Optional[str],
        unanswered: bool,
    ) -> list[Question]:
        questions = list(self._questions.values())

        if tag is not None:
            questions = [q for q in questions if tag in q.tag_names]
        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.content.lower()
            ]
        if unanswered:
            questions = [q for q in questions if q.is_unanswered]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._filter(tag, search, unanswered)

        # Newest first is the tiebreak for every order; sorts are stable
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.VOTES:
            questions.sort(key=lambda q: (q.votes, q.views), reverse=True)
        elif sort == QuestionSortOrder.ANSWERS:
            questions.sort(key=lambda q: q.answer_count, reverse=True)
        elif sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: q.views, reverse=True)

        return questions[offset : offset + limit]

    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._filter(tag, search, unanswered))

    async def find_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """Find questions asked by a user, newest first."""
        questions = [q for q in self._questions.values() if q.author_id == author_id]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def save(self, question: Question) -> Question:
        """Save a question.

        Updating keeps the stored counters, which only change through
        their own operations.
        """
        existing = self._questions.get(question.id)
        if existing is not None:
            question = question.model_copy(
                update={
                    "votes": existing.votes,
                    "answer_count": existing.answer_count,
                    "views": existing.views,
                    "has_best_answer": existing.has_best_answer,
                }
            )
        self._questions[question.id] = question
        return question

    async def adjust_votes(self, question_id: QuestionId, delta: int) -> None:
        """Add ``delta`` to the vote total."""
        question = self._questions.get(question_id)
        if question is not None:
            self._update(question_id, votes=question.votes + delta)

    async def set_votes(self, question_id: QuestionId, votes: int) -> None:
        """Overwrite the vote total."""
        self._update(question_id, votes=votes)

    async def set_answer_count(self, question_id: QuestionId, count: int) -> None:
        """Overwrite the answer count."""
        self._update(question_id, answer_count=count)

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment the view counter by 1."""
        question = self._questions.get(question_id)
        if question is not None:
            self._update(question_id, views=question.views + 1)

    async def set_has_best_answer(self, question_id: QuestionId, value: bool) -> None:
        """Set the has_best_answer flag."""
        self._update(question_id, has_best_answer=value)

    def remove_by_author(self, author_id: UserId) -> set[QuestionId]:
        """Drop a user's questions, returning the removed IDs."""
        removed = {q.id for q in self._questions.values() if q.author_id == author_id}
        for question_id in removed:
            del self._questions[question_id]
        return removed
