"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import UserId, VotableType, VoteDirection, VoteId
from qna.persistence.error import store_operation
from qna.persistence.mappers import row_to_vote, vote_to_dict
from qna.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation("vote_repository.find_by_id")
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    @store_operation("vote_repository.find_by_voter_and_target")
    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_type: VotableType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    @store_operation("vote_repository.find_by_voter_and_targets")
    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a voter's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    @store_operation("vote_repository.save")
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    @store_operation("vote_repository.update_direction")
    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change the direction of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(direction=int(direction), updated_at=datetime.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    @store_operation("vote_repository.delete")
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @store_operation("vote_repository.sum_by_target")
    async def sum_by_target(self, target_type: VotableType, target_id: UUID) -> int:
        """Sum the directions of all votes on a target."""
        stmt = select(func.coalesce(func.sum(votes_table.c.direction), 0)).where(
            and_(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    @store_operation("vote_repository.sum_by_targets")
    async def sum_by_targets(
        self, target_type: VotableType, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Sum vote directions for several targets in one query."""
        totals = {target_id: 0 for target_id in target_ids}
        if not target_ids:
            return totals

        stmt = (
            select(votes_table.c.target_id, func.sum(votes_table.c.direction))
            .where(
                and_(
                    votes_table.c.target_type == target_type.value,
                    votes_table.c.target_id.in_(target_ids),
                )
            )
            .group_by(votes_table.c.target_id)
        )
        result = await self.session.execute(stmt)
        for target_id, total in result.fetchall():
            totals[target_id] = int(total or 0)
        return totals

    @store_operation("vote_repository.find_by_voter")
    async def find_by_voter(self, voter_id: UserId) -> list[Vote]:
        """Find every vote a user has cast."""
        stmt = select(votes_table).where(votes_table.c.voter_id == voter_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
