"""Reset poll answers use case."""

import logfire
from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.application.usecase.poll.get_poll import (
    GetPollRequest,
    GetPollUseCase,
    PollView,
)
from ballot.domain.service import VoteService


class ResetPollRequest(BaseModel):
    """Reset poll request."""

    poll_name: str
    answer_names: list[str]


class ResetPollUseCase(BaseUseCase[ResetPollRequest, PollView]):
    """Use case for invalidating every vote of selected answers."""

    def __init__(
        self, vote_service: VoteService, get_poll_use_case: GetPollUseCase
    ) -> None:
        """Initialize reset poll use case.

        Args:
            vote_service: Vote domain service
            get_poll_use_case: Renders the poll after the reset
        """
        self.vote_service = vote_service
        self.get_poll_use_case = get_poll_use_case

    async def execute(self, request: ResetPollRequest) -> PollView:
        """Execute reset flow.

        Args:
            request: Poll name and the answers to reset

        Returns:
            Poll view after the reset

        Raises:
            NotFoundError: If the poll does not exist
        """
        with logfire.span("reset_poll.execute", poll_name=request.poll_name):
            await self.vote_service.reset_answers(
                request.poll_name, request.answer_names
            )
            return await self.get_poll_use_case.execute(
                GetPollRequest(poll_name=request.poll_name)
            )
