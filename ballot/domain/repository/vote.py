"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from ballot.domain.model.vote import Vote
from ballot.domain.value import AnswerId, VoteFilter, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(
        self, vote_filter: VoteFilter, limit: Optional[int] = None
    ) -> List[Vote]:
        """Find votes matching a filter, newest first.

        Args:
            vote_filter: Answers to search plus optional voter/time filters
            limit: Maximum number of votes to return

        Returns:
            Matching votes ordered by creation time descending
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote."""
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Hard-delete a vote.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def invalidate_expired(self, now: datetime) -> int:
        """Flag every valid vote whose ``valid_until`` is before ``now``.

        Matches only ``is_invalid = false`` rows, so repeated or overlapping
        calls never touch a vote twice.

        Returns:
            Number of votes invalidated
        """
        pass

    @abstractmethod
    async def invalidate_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Flag every vote of the given answers, regardless of expiry.

        Returns:
            Number of votes invalidated
        """
        pass

    @abstractmethod
    async def count_by_sign(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, Tuple[int, int]]:
        """Count valid positive and negative votes per answer.

        Args:
            answer_ids: Answers to count

        Returns:
            ``{answer_id: (positive, negative)}`` with an entry for every
            requested answer
        """
        pass
