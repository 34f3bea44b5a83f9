"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Tag
from qna.domain.repository import TagRepository
from qna.domain.value import TagId, TagName
from qna.persistence.error import store_operation
from qna.persistence.mappers import row_to_tag, tag_to_dict
from qna.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @store_operation("tag_repository.save")
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        tag_dict = tag_to_dict(tag)
        existing = await self.find_by_id(tag.id)

        if existing:
            stmt = (
                update(tags_table).where(tags_table.c.id == tag.id).values(**tag_dict)
            )
        else:
            stmt = insert(tags_table).values(**tag_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return tag

    @store_operation("tag_repository.find_by_id")
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    @store_operation("tag_repository.find_by_name")
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    @store_operation("tag_repository.find_by_names")
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    @store_operation("tag_repository.find_all")
    async def find_all(
        self,
        search: Optional[str] = None,
        order_by: str = "name",
        limit: int = 100,
    ) -> list[Tag]:
        """Find tags, alphabetical or most used first."""
        stmt = select(tags_table)
        if search:
            stmt = stmt.where(tags_table.c.name.ilike(f"%{search}%"))

        if order_by == "popular":
            stmt = stmt.order_by(tags_table.c.question_count.desc())
        stmt = stmt.order_by(tags_table.c.name.asc()).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    @store_operation("tag_repository.adjust_question_count")
    async def adjust_question_count(self, names: list[TagName], delta: int) -> None:
        """Atomically add ``delta`` to the usage counter of each named tag."""
        if not names:
            return

        stmt = (
            update(tags_table)
            .where(tags_table.c.name.in_([name.root for name in names]))
            .where(tags_table.c.question_count + delta >= 0)
            .values(question_count=tags_table.c.question_count + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()
