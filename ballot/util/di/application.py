"""Application layer DI providers."""

from dishka import Scope, provide

from ballot.application.usecase.parameter import (
    DeleteParametersUseCase,
    DeleteParameterUseCase,
    GetParameterUseCase,
    ListParametersUseCase,
    UpsertParametersUseCase,
)
from ballot.application.usecase.poll import (
    CreatePollUseCase,
    DeletePollUseCase,
    GetPollStatUseCase,
    GetPollUseCase,
    ListPollsUseCase,
    ResetPollUseCase,
)
from ballot.application.usecase.vote import (
    CastVotesUseCase,
    DeleteVoteUseCase,
    ListVotesUseCase,
)
from ballot.domain.service import (
    ParameterService,
    PollService,
    TallyService,
    VoteService,
)
from ballot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Poll use cases
    @provide(scope=Scope.REQUEST)
    def get_get_poll_use_case(
        self,
        poll_service: PollService,
        vote_service: VoteService,
        tally_service: TallyService,
    ) -> GetPollUseCase:
        """Provide get poll use case."""
        return GetPollUseCase(
            poll_service=poll_service,
            vote_service=vote_service,
            tally_service=tally_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_poll_stat_use_case(
        self,
        poll_service: PollService,
        vote_service: VoteService,
        tally_service: TallyService,
    ) -> GetPollStatUseCase:
        """Provide get poll stat use case."""
        return GetPollStatUseCase(
            poll_service=poll_service,
            vote_service=vote_service,
            tally_service=tally_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_poll_use_case(
        self, poll_service: PollService, get_poll_use_case: GetPollUseCase
    ) -> CreatePollUseCase:
        """Provide create poll use case."""
        return CreatePollUseCase(
            poll_service=poll_service, get_poll_use_case=get_poll_use_case
        )

    @provide(scope=Scope.REQUEST)
    def get_list_polls_use_case(self, poll_service: PollService) -> ListPollsUseCase:
        """Provide list polls use case."""
        return ListPollsUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_poll_use_case(self, poll_service: PollService) -> DeletePollUseCase:
        """Provide delete poll use case."""
        return DeletePollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_poll_use_case(
        self, vote_service: VoteService, get_poll_use_case: GetPollUseCase
    ) -> ResetPollUseCase:
        """Provide reset poll use case."""
        return ResetPollUseCase(
            vote_service=vote_service, get_poll_use_case=get_poll_use_case
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_votes_use_case(
        self, vote_service: VoteService, get_poll_use_case: GetPollUseCase
    ) -> CastVotesUseCase:
        """Provide cast votes use case."""
        return CastVotesUseCase(
            vote_service=vote_service, get_poll_use_case=get_poll_use_case
        )

    @provide(scope=Scope.REQUEST)
    def get_list_votes_use_case(
        self, vote_service: VoteService, poll_service: PollService
    ) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(vote_service=vote_service, poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_vote_use_case(self, vote_service: VoteService) -> DeleteVoteUseCase:
        """Provide delete vote use case."""
        return DeleteVoteUseCase(vote_service=vote_service)

    # Parameter use cases
    @provide(scope=Scope.REQUEST)
    def get_get_parameter_use_case(
        self, parameter_service: ParameterService
    ) -> GetParameterUseCase:
        """Provide get parameter use case."""
        return GetParameterUseCase(parameter_service=parameter_service)

    @provide(scope=Scope.REQUEST)
    def get_list_parameters_use_case(
        self, parameter_service: ParameterService
    ) -> ListParametersUseCase:
        """Provide list parameters use case."""
        return ListParametersUseCase(parameter_service=parameter_service)

    @provide(scope=Scope.REQUEST)
    def get_upsert_parameters_use_case(
        self, parameter_service: ParameterService
    ) -> UpsertParametersUseCase:
        """Provide upsert parameters use case."""
        return UpsertParametersUseCase(parameter_service=parameter_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_parameter_use_case(
        self, parameter_service: ParameterService
    ) -> DeleteParameterUseCase:
        """Provide delete parameter use case."""
        return DeleteParameterUseCase(parameter_service=parameter_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_parameters_use_case(
        self, parameter_service: ParameterService
    ) -> DeleteParametersUseCase:
        """Provide delete all parameters use case."""
        return DeleteParametersUseCase(parameter_service=parameter_service)
