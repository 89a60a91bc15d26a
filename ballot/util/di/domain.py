"""Domain layer DI providers."""

from dishka import Scope, provide

from ballot.domain.repository import (
    ParameterRepository,
    PollRepository,
    VoteRepository,
)
from ballot.domain.service import (
    ParameterService,
    PollService,
    TallyService,
    VoteService,
)
from ballot.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_poll_service(self, poll_repository: PollRepository) -> PollService:
        """Provide poll domain service."""
        return PollService(poll_repository=poll_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, poll_service: PollService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, poll_service=poll_service)

    @provide
    def get_tally_service(
        self, vote_repository: VoteRepository, poll_service: PollService
    ) -> TallyService:
        """Provide tally domain service."""
        return TallyService(vote_repository=vote_repository, poll_service=poll_service)

    @provide
    def get_parameter_service(
        self, parameter_repository: ParameterRepository, poll_service: PollService
    ) -> ParameterService:
        """Provide parameter domain service."""
        return ParameterService(
            parameter_repository=parameter_repository, poll_service=poll_service
        )
