"""Vote entity.

A vote is a single signed ballot (+1 or -1) for one answer. It may expire and
may carry an opaque voter identifier.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ballot.domain.model.common import DomainModel, utc_now
from ballot.domain.value import (
    MAX_NAME_LENGTH,
    VOTE_VALUES,
    AnswerId,
    VoteId,
    VoterId,
    as_utc,
)


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - ``value`` is exactly +1 or -1
    - no ``valid_until`` means the vote never expires
    - invalidation is a flag flip; votes are only removed by explicit delete
    """

    id: VoteId
    answer_id: AnswerId
    value: int
    valid_until: Optional[datetime] = None
    is_invalid: bool = False
    voter_id: Optional[VoterId] = Field(default=None, max_length=MAX_NAME_LENGTH)
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        """Validate the vote is a single up or down vote."""
        if v not in VOTE_VALUES:
            raise ValueError("Vote value must be 1 or -1")
        return v

    @field_validator("valid_until", "created_at")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store timestamps as aware UTC."""
        return as_utc(v)

    def is_expired(self, now: datetime) -> bool:
        """Whether the vote should be swept at ``now``."""
        return self.valid_until is not None and self.valid_until < now

    def is_valid_on(self, moment: datetime) -> bool:
        """Whether the vote is still valid at ``moment`` (or never expires)."""
        return self.valid_until is None or self.valid_until >= moment
