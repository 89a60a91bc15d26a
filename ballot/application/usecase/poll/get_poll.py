"""Get poll use case.

Renders the poll view returned by every endpoint that reads or mutates a
poll's tally.
"""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import PollService, TallyService, VoteService


class GetPollRequest(BaseModel):
    """Get poll request."""

    poll_name: str
    with_stat: bool = False


class AnswerCounter(BaseModel):
    """Net tally of one answer."""

    answer: str
    counter: int


class PollDetails(BaseModel):
    """Per-answer tallies in answer creation order."""

    answers: list[AnswerCounter]


class VoterStatsView(BaseModel):
    """Distinct voter counts."""

    voters: int
    active_voters: int


class PollView(BaseModel):
    """Poll view: question, tallies and optional voter stats."""

    question: str
    published_at: datetime
    details: PollDetails
    stats: Optional[VoterStatsView] = None


class GetPollUseCase(BaseUseCase[GetPollRequest, PollView]):
    """Use case for reading a poll with its live tally."""

    def __init__(
        self,
        poll_service: PollService,
        vote_service: VoteService,
        tally_service: TallyService,
    ) -> None:
        """Initialize get poll use case.

        Args:
            poll_service: Poll domain service
            vote_service: Vote domain service (expiry sweep)
            tally_service: Tally domain service
        """
        self.poll_service = poll_service
        self.vote_service = vote_service
        self.tally_service = tally_service

    async def execute(self, request: GetPollRequest) -> PollView:
        """Execute get poll flow.

        Expired votes are swept before tallying.

        Raises:
            NotFoundError: If the poll does not exist
        """
        with logfire.span(
            "get_poll.execute",
            poll_name=request.poll_name,
            with_stat=request.with_stat,
        ):
            poll = await self.poll_service.get_poll(request.poll_name)
            await self.vote_service.sweep_before_read()

            tallies = await self.tally_service.compute_poll_tally(poll.name)
            stats = None
            if request.with_stat:
                voter_stats = await self.tally_service.compute_voter_stats(poll.name)
                stats = VoterStatsView(
                    voters=voter_stats.total_voters,
                    active_voters=voter_stats.active_voters,
                )

            return PollView(
                question=poll.question,
                published_at=poll.created_at,
                details=PollDetails(
                    answers=[
                        AnswerCounter(answer=t.answer, counter=t.tally)
                        for t in tallies
                    ]
                ),
                stats=stats,
            )
