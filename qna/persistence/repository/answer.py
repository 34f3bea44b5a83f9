"""PostgreSQL implementation of Answer repository."""

from typing import Optional, Sequence

from sqlalchemy import asc, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository, AnswerSortOrder
from qna.domain.value import AnswerId, QuestionId, UserId
from qna.persistence.error import store_operation
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation("answer_repository.find_by_id")
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    @store_operation("answer_repository.find_by_question")
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    ) -> list[Answer]:
        """Find a question's answers, best answer first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(desc(answers_table.c.is_best_answer))
        )
        if sort == AnswerSortOrder.VOTES:
            stmt = stmt.order_by(desc(answers_table.c.votes))
        stmt = stmt.order_by(asc(answers_table.c.created_at))

        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    @store_operation("answer_repository.count_by_question")
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count the answer records of a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @store_operation("answer_repository.find_by_author")
    async def find_by_author(self, author_id: UserId) -> list[Answer]:
        """Find every answer written by a user."""
        stmt = select(answers_table).where(answers_table.c.author_id == author_id)
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    @store_operation("answer_repository.count_best_by_authors")
    async def count_best_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count best answers per author in one grouped query."""
        counts = {author_id: 0 for author_id in author_ids}
        if not author_ids:
            return counts

        stmt = (
            select(answers_table.c.author_id, func.count())
            .where(
                answers_table.c.author_id.in_(author_ids),
                answers_table.c.is_best_answer.is_(True),
            )
            .group_by(answers_table.c.author_id)
        )
        result = await self.session.execute(stmt)
        for author_id, count in result.fetchall():
            counts[UserId(author_id)] = count
        return counts

    @store_operation("answer_repository.save")
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update content)."""
        exists_stmt = select(answers_table.c.id).where(answers_table.c.id == answer.id)
        existing = (await self.session.execute(exists_stmt)).fetchone()

        if existing:
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(content=answer.content, updated_at=answer.updated_at)
            )
        else:
            stmt = insert(answers_table).values(**answer_to_dict(answer))

        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    @store_operation("answer_repository.adjust_votes")
    async def adjust_votes(self, answer_id: AnswerId, delta: int) -> None:
        """Atomically add ``delta`` to the answer's vote total."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(votes=answers_table.c.votes + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation("answer_repository.set_votes")
    async def set_votes(self, answer_id: AnswerId, votes: int) -> None:
        """Overwrite the vote total."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(votes=votes)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation("answer_repository.select_best")
    async def select_best(self, question_id: QuestionId, answer_id: AnswerId) -> int:
        """Flag one answer as best and clear the flag on its siblings.

        A single UPDATE, so no statement boundary ever sees two flagged
        answers for the question.
        """
        stmt = (
            update(answers_table)
            .where(answers_table.c.question_id == question_id)
            .values(is_best_answer=(answers_table.c.id == answer_id))
            .returning(answers_table.c.is_best_answer)
        )
        result = await self.session.execute(stmt)
        flagged = sum(1 for (is_best,) in result.fetchall() if is_best)
        await self.session.flush()
        return flagged
