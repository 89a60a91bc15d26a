"""Get poll voter statistics use case."""

from datetime import datetime

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.application.usecase.poll.get_poll import VoterStatsView
from ballot.domain.service import PollService, TallyService, VoteService


class GetPollStatRequest(BaseModel):
    """Get poll stat request."""

    poll_name: str


class PollStatView(BaseModel):
    """Poll question with voter statistics."""

    question: str
    published_at: datetime
    details: VoterStatsView


class GetPollStatUseCase(BaseUseCase[GetPollStatRequest, PollStatView]):
    """Use case for reading a poll's voter statistics."""

    def __init__(
        self,
        poll_service: PollService,
        vote_service: VoteService,
        tally_service: TallyService,
    ) -> None:
        self.poll_service = poll_service
        self.vote_service = vote_service
        self.tally_service = tally_service

    async def execute(self, request: GetPollStatRequest) -> PollStatView:
        """Execute get stat flow.

        Raises:
            NotFoundError: If the poll does not exist
        """
        poll = await self.poll_service.get_poll(request.poll_name)
        await self.vote_service.sweep_before_read()
        stats = await self.tally_service.compute_voter_stats(poll.name)

        return PollStatView(
            question=poll.question,
            published_at=poll.created_at,
            details=VoterStatsView(
                voters=stats.total_voters, active_voters=stats.active_voters
            ),
        )
