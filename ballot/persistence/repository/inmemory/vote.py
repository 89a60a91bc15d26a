"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from ballot.domain.model import Vote
from ballot.domain.repository.vote import VoteRepository
from ballot.domain.value import AnswerId, VoteFilter, VoteId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._store.votes.get(vote_id)

    async def find(
        self, vote_filter: VoteFilter, limit: Optional[int] = None
    ) -> List[Vote]:
        """Find votes matching a filter, newest first."""
        answer_ids = set(vote_filter.answer_ids)
        votes = [v for v in self._store.votes.values() if v.answer_id in answer_ids]

        if vote_filter.voter_id is not None:
            votes = [v for v in votes if v.voter_id == vote_filter.voter_id]
        if vote_filter.has_voter:
            votes = [v for v in votes if v.voter_id is not None]
        if vote_filter.created_after is not None:
            votes = [v for v in votes if v.created_at > vote_filter.created_after]
        if vote_filter.valid_on is not None:
            votes = [v for v in votes if v.is_valid_on(vote_filter.valid_on)]

        votes.sort(key=lambda v: v.created_at, reverse=True)
        return votes if limit is None else votes[:limit]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote."""
        self._store.votes[vote.id] = vote
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        return self._store.votes.pop(vote_id, None) is not None

    async def invalidate_expired(self, now: datetime) -> int:
        """Flag expired votes."""
        expired = [
            v for v in self._store.votes.values() if not v.is_invalid and v.is_expired(now)
        ]
        for vote in expired:
            self._store.votes[vote.id] = vote.model_copy(update={"is_invalid": True})
        return len(expired)

    async def invalidate_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Flag every vote of the given answers."""
        targets = set(answer_ids)
        matched = [
            v
            for v in self._store.votes.values()
            if v.answer_id in targets and not v.is_invalid
        ]
        for vote in matched:
            self._store.votes[vote.id] = vote.model_copy(update={"is_invalid": True})
        return len(matched)

    async def count_by_sign(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, Tuple[int, int]]:
        """Count valid positive and negative votes per answer."""
        counts = {answer_id: [0, 0] for answer_id in answer_ids}
        for vote in self._store.votes.values():
            if vote.is_invalid or vote.answer_id not in counts:
                continue
            counts[vote.answer_id][0 if vote.value > 0 else 1] += 1
        return {answer_id: (pos, neg) for answer_id, (pos, neg) in counts.items()}
