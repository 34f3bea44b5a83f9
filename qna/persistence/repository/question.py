"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, and_, delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository, QuestionSortOrder
from qna.domain.value import QuestionId, TagName, UserId
from qna.persistence.error import store_operation
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import question_tags_table, questions_table, tags_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_questions(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> list of tag names
        """
        if not question_ids:
            return {}

        stmt = (
            select(question_tags_table.c.question_id, tags_table.c.name)
            .select_from(question_tags_table)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(question_tags_table.c.question_id.in_(question_ids))
        )
        result = await self.session.execute(stmt)

        tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            tag_map[row.question_id].append(row.name)
        return tag_map

    async def _to_questions(self, rows) -> list[Question]:
        tag_map = await self._fetch_tags_for_questions([row.id for row in rows])
        return [row_to_question(row._asdict(), tag_map.get(row.id, [])) for row in rows]

    def _apply_filters(
        self,
        stmt: Select,
        tag: Optional[TagName],
        search: Optional[str],
        unanswered: bool,
    ) -> Select:
        if tag:
            stmt = (
                stmt.join(
                    question_tags_table,
                    questions_table.c.id == question_tags_table.c.question_id,
                )
                .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.name == tag.root)
            )
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern),
                    questions_table.c.content.ilike(pattern),
                )
            )
        if unanswered:
            stmt = stmt.where(
                and_(
                    questions_table.c.answer_count == 0,
                    questions_table.c.has_best_answer.is_(False),
                )
            )
        return stmt

    @store_operation("question_repository.find_by_id")
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        questions = await self._to_questions([row])
        return questions[0]

    @store_operation("question_repository.find_all")
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
        stmt = self._apply_filters(
            select(questions_table).select_from(questions_table),
            tag,
            search,
            unanswered,
        )

        if sort == QuestionSortOrder.VOTES:
            stmt = stmt.order_by(
                desc(questions_table.c.votes), desc(questions_table.c.views)
            )
        elif sort == QuestionSortOrder.ANSWERS:
            stmt = stmt.order_by(desc(questions_table.c.answer_count))
        elif sort == QuestionSortOrder.VIEWS:
            stmt = stmt.order_by(desc(questions_table.c.views))
        stmt = stmt.order_by(desc(questions_table.c.created_at))

        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        questions = await self._to_questions(result.fetchall())
        logfire.info("Found questions", count=len(questions))
        return questions

    @store_operation("question_repository.count")
    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(questions_table), tag, search, unanswered
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @store_operation("question_repository.find_by_author")
    async def find_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """Find questions asked by a user, newest first."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.author_id == author_id)
            .order_by(desc(questions_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return await self._to_questions(result.fetchall())

    @store_operation("question_repository.save")
    async def save(self, question: Question) -> Question:
        """Save a question (create or update) together with its tags."""
        question_dict = question_to_dict(question)

        exists_stmt = select(questions_table.c.id).where(
            questions_table.c.id == question.id
        )
        existing = (await self.session.execute(exists_stmt)).fetchone()

        if existing:
            # Counters are owned by their own atomic operations
            content = {
                k: v
                for k, v in question_dict.items()
                if k not in ("votes", "answer_count", "views", "has_best_answer")
            }
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question.id)
                .values(**content)
            )
            await self.session.execute(stmt)
            await self.session.execute(
                delete(question_tags_table).where(
                    question_tags_table.c.question_id == question.id
                )
            )
        else:
            await self.session.execute(insert(questions_table).values(**question_dict))

        tag_rows = (
            await self.session.execute(
                select(tags_table.c.id, tags_table.c.name).where(
                    tags_table.c.name.in_([tag.root for tag in question.tag_names])
                )
            )
        ).fetchall()
        tag_id_map = {row.name: row.id for row in tag_rows}

        for tag_name in question.tag_names:
            tag_id = tag_id_map.get(tag_name.root)
            if tag_id:
                await self.session.execute(
                    insert(question_tags_table).values(
                        question_id=question.id, tag_id=tag_id
                    )
                )

        await self.session.flush()
        return question

    @store_operation("question_repository.adjust_votes")
    async def adjust_votes(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add ``delta`` to the vote total."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(votes=questions_table.c.votes + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation("question_repository.set_votes")
    async def set_votes(self, question_id: QuestionId, votes: int) -> None:
        """Overwrite the vote total."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(votes=votes)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation("question_repository.set_answer_count")
    async def set_answer_count(self, question_id: QuestionId, count: int) -> None:
        """Overwrite the answer count."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(answer_count=count)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation("question_repository.increment_views")
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation("question_repository.set_has_best_answer")
    async def set_has_best_answer(self, question_id: QuestionId, value: bool) -> None:
        """Set the question's has_best_answer flag."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(has_best_answer=value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
