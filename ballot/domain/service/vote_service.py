"""Vote domain service.

Owns the vote lifecycle: casting, expiry sweeps, resets, deletes and
history queries.
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from ballot.domain.error import AnswerNotFoundError, NotFoundError, ValidationError
from ballot.domain.model.common import utc_now
from ballot.domain.model.poll import Poll
from ballot.domain.model.vote import Vote
from ballot.domain.repository import VoteRepository
from ballot.domain.value import (
    MAX_NAME_LENGTH,
    VOTE_VALUES,
    Ballot,
    VoteFilter,
    VoteId,
    VoterId,
)

from .base import Service
from .poll_service import PollService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self, vote_repository: VoteRepository, poll_service: PollService
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            poll_service: Poll domain service
        """
        self.vote_repository = vote_repository
        self.poll_service = poll_service

    async def cast_vote(
        self,
        poll_name: str,
        answer_name: str,
        value: int,
        valid_until: Optional[datetime] = None,
        voter_id: Optional[VoterId] = None,
    ) -> Vote:
        """Cast one vote for a named answer of a poll.

        Args:
            poll_name: Poll name
            answer_name: Answer name within the poll
            value: +1 or -1
            valid_until: Expiry; None means the vote never expires
            voter_id: Optional opaque voter identifier

        Returns:
            Created vote

        Raises:
            NotFoundError: If the poll does not exist
            AnswerNotFoundError: If the answer is not part of the poll
            ValidationError: If value is not +1 or -1
        """
        ballot = Ballot(
            answer_name=answer_name,
            value=value,
            valid_until=valid_until,
            voter_id=voter_id,
        )
        votes = await self.cast_votes(poll_name, [ballot])
        return votes[0]

    async def cast_votes(self, poll_name: str, ballots: Sequence[Ballot]) -> list[Vote]:
        """Cast a batch of votes on one poll.

        Every ballot is validated before anything is written, so one bad
        ballot rejects the whole batch.

        Raises:
            NotFoundError: If the poll does not exist
            AnswerNotFoundError: If a ballot names an unknown answer
            ValidationError: If a ballot value is not +1 or -1, or its voter
                identifier is longer than 255 characters
        """
        with logfire.span("cast_votes", poll_name=poll_name, ballots=len(ballots)):
            poll = await self.poll_service.get_poll(poll_name)

            answers = []
            for ballot in ballots:
                answer = poll.find_answer(ballot.answer_name)
                if answer is None:
                    logfire.warn(
                        "Vote for unknown answer",
                        poll_name=poll_name,
                        answer=ballot.answer_name,
                    )
                    raise AnswerNotFoundError(poll_name, ballot.answer_name)
                if ballot.value not in VOTE_VALUES:
                    logfire.warn(
                        "Vote with invalid value",
                        poll_name=poll_name,
                        answer=ballot.answer_name,
                        value=ballot.value,
                    )
                    raise ValidationError(
                        f"counter {ballot.value} for answer {ballot.answer_name} "
                        "can be either 1 or -1",
                        field="counter",
                    )
                voter_id = ballot.voter_id
                if voter_id is not None and len(voter_id) > MAX_NAME_LENGTH:
                    raise ValidationError(
                        f"UUID must be at most {MAX_NAME_LENGTH} characters",
                        field="UUID",
                    )
                answers.append(answer)

            now = utc_now()
            saved = []
            for ballot, answer in zip(ballots, answers):
                vote = Vote(
                    id=VoteId(uuid4()),
                    answer_id=answer.id,
                    value=ballot.value,
                    valid_until=ballot.valid_until,
                    voter_id=ballot.voter_id,
                    created_at=now,
                )
                saved.append(await self.vote_repository.save(vote))

            logfire.info("Votes cast", poll_name=poll_name, count=len(saved))
            return saved

    async def sweep_expired_votes(self, now: datetime) -> int:
        """Invalidate every valid vote whose expiry has passed.

        Idempotent for a given ``now``: a second call affects no rows.

        Args:
            now: Reference time

        Returns:
            Number of votes invalidated
        """
        with logfire.span("sweep_expired_votes"):
            count = await self.vote_repository.invalidate_expired(now)
            logfire.info("Cleaned up passed votes", count=count)
            return count

    async def sweep_before_read(self, now: Optional[datetime] = None) -> int:
        """Run the expiry sweep ahead of a tally read.

        A failing sweep must not fail the read: the error is logged and the
        read continues on possibly stale data until the next sweep.

        Returns:
            Number of votes invalidated, 0 on failure
        """
        try:
            return await self.sweep_expired_votes(now or utc_now())
        except Exception as e:
            logfire.error(
                "Expired vote sweep failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return 0

    async def reset_answers(self, poll_name: str, answer_names: Sequence[str]) -> int:
        """Invalidate all votes of the named answers, expired or not.

        Unknown answer names are ignored.

        Returns:
            Number of votes invalidated

        Raises:
            NotFoundError: If the poll does not exist
        """
        with logfire.span("reset_answers", poll_name=poll_name):
            poll = await self.poll_service.get_poll(poll_name)
            wanted = set(answer_names)
            answer_ids = [a.id for a in poll.answers if a.name in wanted]
            if not answer_ids:
                return 0

            count = await self.vote_repository.invalidate_by_answers(answer_ids)
            logfire.info(
                "Poll answers reset",
                poll_name=poll_name,
                answers=sorted(wanted),
                count=count,
            )
            return count

    async def delete_vote(self, poll_name: str, vote_id: VoteId) -> None:
        """Hard-delete one vote of a poll.

        Raises:
            NotFoundError: If the poll or vote does not exist, or the vote
                belongs to another poll
        """
        with logfire.span("delete_vote", poll_name=poll_name, vote_id=str(vote_id)):
            poll = await self.poll_service.get_poll(poll_name)
            vote = await self.vote_repository.find_by_id(vote_id)
            if vote is None or vote.answer_id not in poll.answer_ids:
                logfire.warn("Vote not found", poll_name=poll_name, vote_id=str(vote_id))
                raise NotFoundError("Vote", str(vote_id))

            await self.vote_repository.delete(vote_id)
            logfire.info("Vote deleted", poll_name=poll_name, vote_id=str(vote_id))

    async def list_votes(
        self,
        poll_name: str,
        voter_id: Optional[VoterId] = None,
        created_after: Optional[datetime] = None,
        valid_on: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list[Vote]:
        """List a poll's votes across all answers, newest first.

        Args:
            poll_name: Poll name
            voter_id: Only this voter's votes
            created_after: Only votes created after this time
            valid_on: Only votes still valid at this time (or never expiring)
            limit: Maximum number of votes

        Returns:
            Matching votes

        Raises:
            NotFoundError: If the poll does not exist
            ValidationError: If limit is negative
        """
        poll = await self.poll_service.get_poll(poll_name)
        return await self.list_poll_votes(
            poll,
            voter_id=voter_id,
            created_after=created_after,
            valid_on=valid_on,
            limit=limit,
        )

    async def list_poll_votes(
        self,
        poll: Poll,
        voter_id: Optional[VoterId] = None,
        created_after: Optional[datetime] = None,
        valid_on: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list[Vote]:
        """List votes of an already loaded poll, newest first.

        Raises:
            ValidationError: If limit is negative
        """
        if limit is not None and limit < 0:
            raise ValidationError("Parameter last must not be negative", field="last")

        vote_filter = VoteFilter(
            answer_ids=poll.answer_ids,
            voter_id=voter_id,
            created_after=created_after,
            valid_on=valid_on,
        )
        votes = await self.vote_repository.find(vote_filter, limit=limit)
        logfire.info("Votes listed", poll_name=poll.name, count=len(votes))
        return votes
