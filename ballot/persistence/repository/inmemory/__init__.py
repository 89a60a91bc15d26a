"""In-memory repository implementations for testing."""

from .parameter import InMemoryParameterRepository
from .poll import InMemoryPollRepository
from .store import InMemoryStore
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryParameterRepository",
    "InMemoryPollRepository",
    "InMemoryStore",
    "InMemoryVoteRepository",
]
