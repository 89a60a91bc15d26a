"""PostgreSQL repository implementations."""

from ballot.persistence.repository.parameter import PostgresParameterRepository
from ballot.persistence.repository.poll import PostgresPollRepository
from ballot.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPollRepository",
    "PostgresVoteRepository",
    "PostgresParameterRepository",
]
