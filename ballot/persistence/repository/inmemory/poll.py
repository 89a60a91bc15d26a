"""In-memory poll repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from ballot.domain.model import Poll
from ballot.domain.repository.poll import PollRepository
from ballot.domain.value import PollId

from .store import InMemoryStore


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_name(self, name: str) -> Optional[Poll]:
        """Find a poll by name."""
        for poll in self._store.polls.values():
            if poll.name == name:
                return poll
        return None

    async def find_all(
        self,
        parameter_key: Optional[str] = None,
        parameter_value: Optional[str] = None,
    ) -> List[Poll]:
        """List polls, optionally by attached parameter.

        The value only narrows a key match.
        """
        polls = list(self._store.polls.values())

        if parameter_key is not None or parameter_value is not None:
            tagged = {
                p.poll_id
                for p in self._store.parameters.values()
                if parameter_key is None
                or (
                    p.key == parameter_key
                    and (parameter_value is None or p.value == parameter_value)
                )
            }
            polls = [poll for poll in polls if poll.id in tagged]

        polls.sort(key=lambda poll: poll.created_at)
        return [poll.model_copy(update={"answers": []}) for poll in polls]

    async def save(self, poll: Poll) -> Poll:
        """Save a poll.

        Raises:
            IntegrityError: If the name is already taken
        """
        if await self.find_by_name(poll.name):
            raise IntegrityError("Duplicate poll", None, Exception())

        self._store.polls[poll.id] = poll
        return poll

    async def delete(self, poll_id: PollId) -> None:
        """Delete a poll with its votes and parameters."""
        poll = self._store.polls.pop(poll_id, None)
        if poll is None:
            return

        answer_ids = set(poll.answer_ids)
        self._store.votes = {
            vid: v for vid, v in self._store.votes.items() if v.answer_id not in answer_ids
        }
        self._store.parameters = {
            pid: p for pid, p in self._store.parameters.items() if p.poll_id != poll_id
        }
