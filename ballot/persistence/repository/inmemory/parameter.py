"""In-memory parameter repository for testing."""

from typing import List, Optional
from uuid import uuid4

from ballot.domain.model import Parameter
from ballot.domain.model.common import utc_now
from ballot.domain.repository.parameter import ParameterRepository
from ballot.domain.value import ParameterFilter, ParameterId, PollId, SortDirection

from .store import InMemoryStore


class InMemoryParameterRepository(ParameterRepository):
    """In-memory implementation of ParameterRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    def _of_poll(self, poll_id: PollId) -> List[Parameter]:
        return [p for p in self._store.parameters.values() if p.poll_id == poll_id]

    async def find_by_key(self, poll_id: PollId, key: str) -> Optional[Parameter]:
        """Find a poll's parameter by key."""
        for parameter in self._of_poll(poll_id):
            if parameter.key == key:
                return parameter
        return None

    async def find(
        self, poll_id: PollId, parameter_filter: ParameterFilter
    ) -> List[Parameter]:
        """List a poll's parameters matching the filter."""
        parameters = [p for p in self._of_poll(poll_id) if parameter_filter.matches(p.key)]

        if parameter_filter.order is not None:
            parameters.sort(
                key=lambda p: p.key,
                reverse=parameter_filter.order == SortDirection.DESC,
            )
        else:
            parameters.sort(key=lambda p: p.created_at)

        if parameter_filter.limit is not None:
            parameters = parameters[: parameter_filter.limit]
        return parameters

    async def upsert(self, poll_id: PollId, key: str, value: str) -> Parameter:
        """Insert the parameter or replace its value."""
        existing = await self.find_by_key(poll_id, key)
        if existing:
            parameter = existing.model_copy(update={"value": value, "updated_at": utc_now()})
        else:
            parameter = Parameter(
                id=ParameterId(uuid4()), poll_id=poll_id, key=key, value=value
            )
        self._store.parameters[parameter.id] = parameter
        return parameter

    async def delete(self, poll_id: PollId, key: str) -> bool:
        """Delete one parameter."""
        existing = await self.find_by_key(poll_id, key)
        if existing is None:
            return False
        del self._store.parameters[existing.id]
        return True

    async def delete_all(self, poll_id: PollId) -> int:
        """Delete every parameter of a poll."""
        doomed = self._of_poll(poll_id)
        for parameter in doomed:
            del self._store.parameters[parameter.id]
        return len(doomed)
