"""Cast votes use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.application.usecase.poll.get_poll import (
    GetPollRequest,
    GetPollUseCase,
    PollView,
)
from ballot.domain.service import VoteService
from ballot.domain.value import Ballot, VoterId


class BallotItem(BaseModel):
    """One requested vote."""

    answer: str
    counter: int
    valid_till: Optional[datetime] = None
    voter_id: Optional[str] = None


class CastVotesRequest(BaseModel):
    """Cast votes request."""

    poll_name: str
    ballots: list[BallotItem]


class CastVotesUseCase(BaseUseCase[CastVotesRequest, PollView]):
    """Use case for casting a batch of votes on a poll."""

    def __init__(
        self, vote_service: VoteService, get_poll_use_case: GetPollUseCase
    ) -> None:
        """Initialize cast votes use case.

        Args:
            vote_service: Vote domain service
            get_poll_use_case: Renders the poll after voting
        """
        self.vote_service = vote_service
        self.get_poll_use_case = get_poll_use_case

    async def execute(self, request: CastVotesRequest) -> PollView:
        """Execute cast votes flow.

        Args:
            request: Poll name and ballots

        Returns:
            Poll view including the new votes

        Raises:
            NotFoundError: If the poll does not exist
            AnswerNotFoundError: If a ballot names an unknown answer
            ValidationError: If a counter is not 1 or -1
        """
        with logfire.span(
            "cast_votes.execute",
            poll_name=request.poll_name,
            ballots=len(request.ballots),
        ):
            ballots = [
                Ballot(
                    answer_name=item.answer,
                    value=item.counter,
                    valid_until=item.valid_till,
                    voter_id=VoterId(item.voter_id) if item.voter_id else None,
                )
                for item in request.ballots
            ]
            await self.vote_service.cast_votes(request.poll_name, ballots)
            return await self.get_poll_use_case.execute(
                GetPollRequest(poll_name=request.poll_name)
            )
