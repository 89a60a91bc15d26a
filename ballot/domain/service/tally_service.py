"""Tally and voter statistics domain service."""

import logfire

from ballot.domain.model.tally import AnswerTally, VoterStats
from ballot.domain.repository import VoteRepository
from ballot.domain.value import AnswerId, VoteFilter

from .base import Service
from .poll_service import PollService


class TallyService(Service):
    """Domain service computing tallies and voter statistics.

    All computations are read-only. Callers sweep expired votes first so
    that stale votes never count toward a live tally.
    """

    def __init__(
        self, vote_repository: VoteRepository, poll_service: PollService
    ) -> None:
        """Initialize tally service.

        Args:
            vote_repository: Vote repository
            poll_service: Poll domain service
        """
        self.vote_repository = vote_repository
        self.poll_service = poll_service

    async def compute_tally(self, answer_id: AnswerId) -> int:
        """Net signed count of valid votes for one answer.

        Args:
            answer_id: Answer ID

        Returns:
            Positive votes minus negative votes, possibly negative
        """
        counts = await self.vote_repository.count_by_sign([answer_id])
        positive, negative = counts.get(answer_id, (0, 0))
        return positive - negative

    async def compute_poll_tally(self, poll_name: str) -> list[AnswerTally]:
        """Tally every answer of a poll.

        Args:
            poll_name: Poll name

        Returns:
            One tally per answer, in answer creation order

        Raises:
            NotFoundError: If the poll does not exist
        """
        with logfire.span("compute_poll_tally", poll_name=poll_name):
            poll = await self.poll_service.get_poll(poll_name)
            counts = await self.vote_repository.count_by_sign(poll.answer_ids)

            tallies = []
            for answer in poll.answers:
                positive, negative = counts.get(answer.id, (0, 0))
                tallies.append(
                    AnswerTally(answer=answer.name, tally=positive - negative)
                )
            return tallies

    async def compute_voter_stats(self, poll_name: str) -> VoterStats:
        """Count distinct voters of a poll.

        ``total_voters`` counts every voter identifier ever seen on the poll,
        invalidated votes included; ``active_voters`` only those with at least
        one valid vote. Votes without a voter identifier are not counted.

        Raises:
            NotFoundError: If the poll does not exist
        """
        with logfire.span("compute_voter_stats", poll_name=poll_name):
            poll = await self.poll_service.get_poll(poll_name)

            # TODO: switch to COUNT(DISTINCT voter_id) in VoteRepository once
            # vote volume makes grouping every voter-tagged row in memory too slow
            votes = await self.vote_repository.find(
                VoteFilter(answer_ids=poll.answer_ids, has_voter=True)
            )
            all_voters = {vote.voter_id for vote in votes}
            active_voters = {vote.voter_id for vote in votes if not vote.is_invalid}

            stats = VoterStats(
                total_voters=len(all_voters), active_voters=len(active_voters)
            )
            logfire.info(
                "Voter stats computed",
                poll_name=poll_name,
                voters=stats.total_voters,
                active_voters=stats.active_voters,
            )
            return stats
