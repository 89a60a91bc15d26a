"""Domain value objects for ballots.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by services and repositories.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from ballot.domain.value.common import ValueObject
from ballot.domain.value.identifiers import AnswerId, VoterId

# A vote is a single signed ballot: exactly one up or one down
VOTE_VALUES = frozenset({1, -1})

# Poll, answer and parameter names and voter identifiers are VARCHAR(255)
MAX_NAME_LENGTH = 255


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Interpret naive timestamps as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SortDirection(str, Enum):
    """Sort direction for listings."""

    ASC = "asc"
    DESC = "desc"


class Ballot(ValueObject):
    """One vote a client asks to cast for a named answer."""

    answer_name: str
    value: int
    valid_until: Optional[datetime] = None
    voter_id: Optional[VoterId] = None

    @field_validator("valid_until")
    @classmethod
    def normalize_valid_until(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Interpret naive expiry as UTC."""
        return as_utc(v)


class VoteFilter(ValueObject):
    """Filter for vote queries.

    An empty ``answer_ids`` list matches nothing.
    """

    answer_ids: list[AnswerId]
    voter_id: Optional[VoterId] = None
    created_after: Optional[datetime] = None
    # Votes still valid at this instant (or never expiring)
    valid_on: Optional[datetime] = None
    # Only votes carrying a voter identifier
    has_voter: bool = False

    @field_validator("created_after", "valid_on")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class ParameterFilter(ValueObject):
    """Filter for parameter listings."""

    key: Optional[str] = None
    key_contains: Optional[str] = None
    key_starts_with: Optional[str] = None
    key_ends_with: Optional[str] = None
    order: Optional[SortDirection] = None
    limit: Optional[int] = Field(default=None, ge=0)

    def matches(self, key: str) -> bool:
        """Check a parameter key against the filter."""
        if self.key is not None and key != self.key:
            return False
        if self.key_contains is not None and self.key_contains not in key:
            return False
        if self.key_starts_with is not None and not key.startswith(
            self.key_starts_with
        ):
            return False
        if self.key_ends_with is not None and not key.endswith(self.key_ends_with):
            return False
        return True
