"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Vote
from ballot.domain.repository import VoteRepository
from ballot.domain.value import AnswerId, VoteFilter, VoteId
from ballot.persistence.mappers import row_to_vote, vote_to_dict
from ballot.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find(
        self, vote_filter: VoteFilter, limit: Optional[int] = None
    ) -> List[Vote]:
        """Find votes matching a filter, newest first."""
        if not vote_filter.answer_ids:
            return []

        stmt = select(votes_table).where(
            votes_table.c.answer_id.in_(vote_filter.answer_ids)
        )
        if vote_filter.voter_id is not None:
            stmt = stmt.where(votes_table.c.voter_id == vote_filter.voter_id)
        if vote_filter.has_voter:
            stmt = stmt.where(votes_table.c.voter_id.is_not(None))
        if vote_filter.created_after is not None:
            stmt = stmt.where(votes_table.c.created_at > vote_filter.created_after)
        if vote_filter.valid_on is not None:
            stmt = stmt.where(
                or_(
                    votes_table.c.valid_until.is_(None),
                    votes_table.c.valid_until >= vote_filter.valid_on,
                )
            )

        stmt = stmt.order_by(votes_table.c.created_at.desc(), votes_table.c.id)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def invalidate_expired(self, now: datetime) -> int:
        """Flag expired votes.

        Runs in a SAVEPOINT so a failure leaves the surrounding request
        transaction usable.
        """
        stmt = (
            update(votes_table)
            .where(
                votes_table.c.is_invalid.is_(False),
                votes_table.c.valid_until < now,
            )
            .values(is_invalid=True)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def invalidate_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Flag every vote of the given answers."""
        if not answer_ids:
            return 0

        stmt = (
            update(votes_table)
            .where(
                votes_table.c.answer_id.in_(answer_ids),
                votes_table.c.is_invalid.is_(False),
            )
            .values(is_invalid=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_sign(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, Tuple[int, int]]:
        """Count valid positive and negative votes per answer in one query."""
        counts: Dict[AnswerId, Tuple[int, int]] = {
            answer_id: (0, 0) for answer_id in answer_ids
        }
        if not answer_ids:
            return counts

        stmt = (
            select(
                votes_table.c.answer_id,
                func.count().filter(votes_table.c.value > 0).label("positive"),
                func.count().filter(votes_table.c.value < 0).label("negative"),
            )
            .where(
                votes_table.c.answer_id.in_(answer_ids),
                votes_table.c.is_invalid.is_(False),
            )
            .group_by(votes_table.c.answer_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            counts[AnswerId(row.answer_id)] = (row.positive, row.negative)
        return counts
