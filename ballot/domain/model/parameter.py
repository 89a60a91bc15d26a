"""Parameter entity: arbitrary key/value metadata attached to a poll."""

from datetime import datetime

from pydantic import Field

from ballot.domain.model.common import DomainModel, utc_now
from ballot.domain.value import MAX_NAME_LENGTH, ParameterId, PollId


class Parameter(DomainModel):
    """Key/value pair owned by a poll. Keys are unique within the poll."""

    id: ParameterId
    poll_id: PollId
    key: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    value: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
