"""PostgreSQL implementation of Parameter repository."""

from typing import List, Optional
from uuid import uuid4

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Parameter
from ballot.domain.model.common import utc_now
from ballot.domain.repository import ParameterRepository
from ballot.domain.value import ParameterFilter, PollId, SortDirection
from ballot.persistence.mappers import row_to_parameter
from ballot.persistence.tables import parameters_table


class PostgresParameterRepository(ParameterRepository):
    """PostgreSQL implementation of ParameterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_key(self, poll_id: PollId, key: str) -> Optional[Parameter]:
        """Find a poll's parameter by key."""
        stmt = select(parameters_table).where(
            and_(
                parameters_table.c.poll_id == poll_id,
                parameters_table.c.key == key,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_parameter(row._asdict()) if row else None

    async def find(
        self, poll_id: PollId, parameter_filter: ParameterFilter
    ) -> List[Parameter]:
        """List a poll's parameters matching the filter."""
        key = parameters_table.c.key
        stmt = select(parameters_table).where(parameters_table.c.poll_id == poll_id)

        if parameter_filter.key is not None:
            stmt = stmt.where(key == parameter_filter.key)
        if parameter_filter.key_contains is not None:
            stmt = stmt.where(key.contains(parameter_filter.key_contains, autoescape=True))
        if parameter_filter.key_starts_with is not None:
            stmt = stmt.where(
                key.startswith(parameter_filter.key_starts_with, autoescape=True)
            )
        if parameter_filter.key_ends_with is not None:
            stmt = stmt.where(
                key.endswith(parameter_filter.key_ends_with, autoescape=True)
            )

        # Order by requested direction, creation order otherwise
        if parameter_filter.order == SortDirection.DESC:
            stmt = stmt.order_by(key.desc())
        elif parameter_filter.order == SortDirection.ASC:
            stmt = stmt.order_by(key)
        else:
            stmt = stmt.order_by(parameters_table.c.created_at, parameters_table.c.id)

        if parameter_filter.limit is not None:
            stmt = stmt.limit(parameter_filter.limit)

        result = await self.session.execute(stmt)
        return [row_to_parameter(row._asdict()) for row in result.fetchall()]

    async def upsert(self, poll_id: PollId, key: str, value: str) -> Parameter:
        """Insert the parameter or replace its value on key conflict."""
        now = utc_now()
        stmt = insert(parameters_table).values(
            id=uuid4(),
            poll_id=poll_id,
            key=key,
            value=value,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_parameter_poll_key",
            set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
        ).returning(parameters_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_parameter(row._asdict())

    async def delete(self, poll_id: PollId, key: str) -> bool:
        """Delete one parameter."""
        stmt = delete(parameters_table).where(
            and_(
                parameters_table.c.poll_id == poll_id,
                parameters_table.c.key == key,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_all(self, poll_id: PollId) -> int:
        """Delete every parameter of a poll."""
        stmt = delete(parameters_table).where(parameters_table.c.poll_id == poll_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
