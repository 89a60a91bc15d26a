"""Create poll use case."""

import logfire
from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.application.usecase.poll.get_poll import (
    GetPollRequest,
    GetPollUseCase,
    PollView,
)
from ballot.domain.service import PollService


class CreatePollRequest(BaseModel):
    """Create poll request."""

    name: str
    question: str
    answers: list[str]


class CreatePollUseCase(BaseUseCase[CreatePollRequest, PollView]):
    """Use case for creating a poll."""

    def __init__(
        self, poll_service: PollService, get_poll_use_case: GetPollUseCase
    ) -> None:
        """Initialize create poll use case.

        Args:
            poll_service: Poll domain service
            get_poll_use_case: Renders the created poll
        """
        self.poll_service = poll_service
        self.get_poll_use_case = get_poll_use_case

    async def execute(self, request: CreatePollRequest) -> PollView:
        """Execute create poll flow.

        Args:
            request: Poll name, question and answer names

        Returns:
            View of the new poll with zeroed tallies

        Raises:
            ValidationError: If the poll definition is malformed
            ConflictError: If the name is taken
        """
        with logfire.span("create_poll.execute", poll_name=request.name):
            poll = await self.poll_service.create_poll(
                name=request.name,
                question=request.question,
                answer_names=request.answers,
            )
            return await self.get_poll_use_case.execute(
                GetPollRequest(poll_name=poll.name)
            )
