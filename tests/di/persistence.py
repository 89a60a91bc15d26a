"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ballot.domain.repository import (
    ParameterRepository,
    PollRepository,
    VoteRepository,
)
from ballot.persistence.repository.inmemory import (
    InMemoryParameterRepository,
    InMemoryPollRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from ballot.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped: every container gets a fresh one, and all
    requests against that container share it, like a database would.
    Repositories are REQUEST-scoped views over the store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_poll_repository(self, store: InMemoryStore) -> PollRepository:
        """Provide in-memory poll repository."""
        return InMemoryPollRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_parameter_repository(self, store: InMemoryStore) -> ParameterRepository:
        """Provide in-memory parameter repository."""
        return InMemoryParameterRepository(store)
