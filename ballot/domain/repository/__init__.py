"""Repository interfaces for the ballot domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from ballot.domain.repository.parameter import ParameterRepository
from ballot.domain.repository.poll import PollRepository
from ballot.domain.repository.vote import VoteRepository

__all__ = [
    "PollRepository",
    "VoteRepository",
    "ParameterRepository",
]
