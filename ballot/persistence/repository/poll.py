"""PostgreSQL implementation of Poll repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, exists, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Poll
from ballot.domain.repository import PollRepository
from ballot.domain.value import PollId
from ballot.persistence.mappers import answer_to_dict, poll_to_dict, row_to_poll
from ballot.persistence.tables import answers_table, parameters_table, polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name(self, name: str) -> Optional[Poll]:
        """Find a poll by name, answers ordered by position."""
        stmt = select(polls_table).where(polls_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        poll_row = row._asdict()
        answers_stmt = (
            select(answers_table)
            .where(answers_table.c.poll_id == poll_row["id"])
            .order_by(answers_table.c.position)
        )
        answers_result = await self.session.execute(answers_stmt)
        answer_rows = [r._asdict() for r in answers_result.fetchall()]
        return row_to_poll(poll_row, answer_rows)

    async def find_all(
        self,
        parameter_key: Optional[str] = None,
        parameter_value: Optional[str] = None,
    ) -> List[Poll]:
        """List polls, optionally by attached parameter.

        The value only narrows a key match; a bare value selects every poll
        carrying at least one parameter.
        """
        stmt = select(polls_table).order_by(polls_table.c.created_at)

        if parameter_key is not None or parameter_value is not None:
            conditions = [parameters_table.c.poll_id == polls_table.c.id]
            if parameter_key is not None:
                conditions.append(parameters_table.c.key == parameter_key)
                if parameter_value is not None:
                    conditions.append(parameters_table.c.value == parameter_value)
            stmt = stmt.where(exists().where(and_(*conditions)))

        result = await self.session.execute(stmt)
        return [row_to_poll(row._asdict()) for row in result.fetchall()]

    async def save(self, poll: Poll) -> Poll:
        """Insert the poll and its answers."""
        await self.session.execute(insert(polls_table).values(**poll_to_dict(poll)))
        if poll.answers:
            await self.session.execute(
                insert(answers_table),
                [answer_to_dict(answer) for answer in poll.answers],
            )
        await self.session.flush()
        return poll

    async def delete(self, poll_id: PollId) -> None:
        """Delete a poll; foreign keys cascade to answers, votes, parameters."""
        stmt = delete(polls_table).where(polls_table.c.id == poll_id)
        await self.session.execute(stmt)
        await self.session.flush()
