"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from ballot.domain.model import Parameter, Poll, Vote
from ballot.domain.value import ParameterId, PollId, VoteId


@dataclass
class InMemoryStore:
    """Tables shared by the in-memory repositories.

    Repositories built on the same store see each other's writes, so poll
    deletion can cascade to votes and parameters like the database does.
    """

    polls: dict[PollId, Poll] = field(default_factory=dict)
    votes: dict[VoteId, Vote] = field(default_factory=dict)
    parameters: dict[ParameterId, Parameter] = field(default_factory=dict)

