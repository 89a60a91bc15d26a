"""Parameter repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ballot.domain.model.parameter import Parameter
from ballot.domain.value import ParameterFilter, PollId


class ParameterRepository(ABC):
    """Repository for poll parameters."""

    @abstractmethod
    async def find_by_key(self, poll_id: PollId, key: str) -> Optional[Parameter]:
        """Find a poll's parameter by key."""
        pass

    @abstractmethod
    async def find(
        self, poll_id: PollId, parameter_filter: ParameterFilter
    ) -> List[Parameter]:
        """List a poll's parameters matching the filter.

        Without an explicit order, parameters come back in creation order.
        """
        pass

    @abstractmethod
    async def upsert(self, poll_id: PollId, key: str, value: str) -> Parameter:
        """Create the parameter or replace the value of an existing one."""
        pass

    @abstractmethod
    async def delete(self, poll_id: PollId, key: str) -> bool:
        """Delete one parameter.

        Returns:
            True if deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def delete_all(self, poll_id: PollId) -> int:
        """Delete every parameter of a poll.

        Returns:
            Number of parameters deleted
        """
        pass
