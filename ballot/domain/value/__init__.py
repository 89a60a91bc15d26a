"""Domain value objects for ballots."""

from ballot.domain.value.identifiers import (
    AnswerId,
    ParameterId,
    PollId,
    VoteId,
    VoterId,
)
from ballot.domain.value.types import (
    MAX_NAME_LENGTH,
    VOTE_VALUES,
    Ballot,
    ParameterFilter,
    SortDirection,
    VoteFilter,
    as_utc,
)

__all__ = [
    # Identifiers
    "PollId",
    "AnswerId",
    "VoteId",
    "ParameterId",
    "VoterId",
    # Types
    "MAX_NAME_LENGTH",
    "VOTE_VALUES",
    "Ballot",
    "ParameterFilter",
    "SortDirection",
    "VoteFilter",
    "as_utc",
]
