"""Delete vote use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.error import NotFoundError
from ballot.domain.service import VoteService
from ballot.domain.value import VoteId


class DeleteVoteRequest(BaseModel):
    """Delete vote request."""

    poll_name: str
    vote_id: str  # UUID string


class DeleteVoteUseCase(BaseUseCase[DeleteVoteRequest, None]):
    """Use case for hard-deleting one vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: DeleteVoteRequest) -> None:
        """Execute delete vote flow.

        Raises:
            NotFoundError: If the poll or vote does not exist; a malformed
                vote ID cannot name an existing vote
        """
        try:
            vote_id = VoteId(UUID(request.vote_id))
        except ValueError:
            raise NotFoundError("Vote", request.vote_id)

        await self.vote_service.delete_vote(request.poll_name, vote_id)
