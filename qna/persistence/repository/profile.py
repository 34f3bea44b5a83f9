"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Profile
from qna.domain.repository import ProfileRepository
from qna.domain.value import UserId, Username
from qna.persistence.error import store_operation
from qna.persistence.mappers import profile_to_dict, row_to_profile
from qna.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation("profile_repository.find_by_id")
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    @store_operation("profile_repository.find_by_username")
    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        stmt = select(profiles_table).where(profiles_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    @store_operation("profile_repository.find_all")
    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Profile]:
        """Find profiles ordered by reputation, highest first."""
        stmt = (
            select(profiles_table)
            .order_by(
                desc(profiles_table.c.reputation), profiles_table.c.username.asc()
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    @store_operation("profile_repository.save")
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        profile_dict = profile_to_dict(profile)
        existing = await self.find_by_id(profile.id)

        if existing:
            stmt = (
                update(profiles_table)
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = insert(profiles_table).values(**profile_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return profile

    @store_operation("profile_repository.delete")
    async def delete(self, user_id: UserId) -> bool:
        """Delete a profile (cascades to its content)."""
        stmt = delete(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
