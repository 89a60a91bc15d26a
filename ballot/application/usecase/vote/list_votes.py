"""List votes use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import PollService, VoteService
from ballot.domain.value import VoterId


class ListVotesRequest(BaseModel):
    """List votes request."""

    poll_name: str
    voter_id: Optional[str] = None
    last: Optional[int] = None
    created_after: Optional[datetime] = None
    valid_on: Optional[datetime] = None


class VoteItem(BaseModel):
    """Vote list item in response."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    answer: str
    counter: int
    valid_till: Optional[datetime] = Field(default=None, alias="validTill")
    voter_id: Optional[str] = Field(default=None, alias="UUID")


class ListVotesResponse(BaseModel):
    """List votes response."""

    answers: list[VoteItem]


class ListVotesUseCase(BaseUseCase[ListVotesRequest, ListVotesResponse]):
    """Use case for querying a poll's vote history."""

    def __init__(self, vote_service: VoteService, poll_service: PollService) -> None:
        """Initialize list votes use case.

        Args:
            vote_service: Vote domain service
            poll_service: Poll domain service (answer names)
        """
        self.vote_service = vote_service
        self.poll_service = poll_service

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        """Execute list votes flow.

        Returns:
            Matching votes, newest first

        Raises:
            NotFoundError: If the poll does not exist
            ValidationError: If ``last`` is negative
        """
        with logfire.span(
            "list_votes.execute",
            poll_name=request.poll_name,
            last=request.last,
        ):
            poll = await self.poll_service.get_poll(request.poll_name)
            votes = await self.vote_service.list_poll_votes(
                poll,
                voter_id=VoterId(request.voter_id) if request.voter_id else None,
                created_after=request.created_after,
                valid_on=request.valid_on,
                limit=request.last,
            )
            answer_names = {answer.id: answer.name for answer in poll.answers}

            return ListVotesResponse(
                answers=[
                    VoteItem(
                        id=str(vote.id),
                        answer=answer_names[vote.answer_id],
                        counter=vote.value,
                        valid_till=vote.valid_until,
                        voter_id=vote.voter_id,
                    )
                    for vote in votes
                ]
            )
