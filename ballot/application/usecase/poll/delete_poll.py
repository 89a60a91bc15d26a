"""Delete poll use case."""

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import PollService


class DeletePollRequest(BaseModel):
    """Delete poll request."""

    poll_name: str


class DeletePollUseCase(BaseUseCase[DeletePollRequest, None]):
    """Use case for deleting a poll with its answers, votes and parameters."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: DeletePollRequest) -> None:
        """Execute delete poll flow.

        Raises:
            NotFoundError: If the poll does not exist
        """
        await self.poll_service.delete_poll(request.poll_name)
