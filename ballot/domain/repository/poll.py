"""Poll repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ballot.domain.model.poll import Poll
from ballot.domain.value import PollId


class PollRepository(ABC):
    """Repository for the Poll aggregate (poll plus its answers).

    Defines the contract for poll persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Poll]:
        """Find a poll by its unique name, answers included.

        Args:
            name: The poll's external name

        Returns:
            The poll with answers in creation order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        parameter_key: Optional[str] = None,
        parameter_value: Optional[str] = None,
    ) -> List[Poll]:
        """List polls, optionally restricted by an attached parameter.

        Answers are not loaded.

        Args:
            parameter_key: Only polls having a parameter with this key
            parameter_value: Narrows ``parameter_key`` to parameters with this
                value. Without a key, any poll carrying a parameter matches

        Returns:
            Polls ordered by creation time
        """
        pass

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Create a poll together with its answers.

        Raises:
            IntegrityError: If the poll name is already taken
        """
        pass

    @abstractmethod
    async def delete(self, poll_id: PollId) -> None:
        """Delete a poll, cascading to answers, votes and parameters."""
        pass
