"""Integration tests for PostgresVoteRepository.

These tests need a migrated PostgreSQL at ``DATABASE__URL`` and are skipped
otherwise.
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from ballot.domain.model import Answer, Poll, Vote
from ballot.domain.model.common import utc_now
from ballot.domain.repository import PollRepository, VoteRepository
from ballot.domain.value import AnswerId, PollId, VoteFilter, VoteId, VoterId
from tests.harness import create_integration_env_fixture

# Integration test fixture - real persistence, rolled back after each test
integration_env = create_integration_env_fixture()


async def _color_poll(env) -> Poll:
    poll_repo = await env.get(PollRepository)
    poll_id = PollId(uuid4())
    return await poll_repo.save(
        Poll(
            id=poll_id,
            name=f"color-{uuid4().hex[:8]}",
            question="What is your favourite color?",
            answers=[
                Answer(id=AnswerId(uuid4()), poll_id=poll_id, name=name, position=i)
                for i, name in enumerate(["red", "blue"])
            ],
        )
    )


async def _vote(vote_repo, answer, value, **fields) -> Vote:
    return await vote_repo.save(
        Vote(id=VoteId(uuid4()), answer_id=answer.id, value=value, **fields)
    )


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_count_by_sign_groups_valid_votes(self, integration_env):
        """Positive and negative votes are counted per answer in one query."""
        # Arrange
        poll = await _color_poll(integration_env)
        red, blue = poll.answers
        vote_repo = await integration_env.get(VoteRepository)
        await _vote(vote_repo, red, 1)
        await _vote(vote_repo, red, 1)
        await _vote(vote_repo, red, -1)
        await _vote(vote_repo, red, 1, is_invalid=True)

        # Act
        counts = await vote_repo.count_by_sign(poll.answer_ids)

        # Assert
        assert counts == {red.id: (2, 1), blue.id: (0, 0)}

    @pytest.mark.asyncio
    async def test_invalidate_expired_flags_only_lapsed_votes(self, integration_env):
        """The sweep runs in a savepoint and leaves the session usable."""
        # Arrange
        poll = await _color_poll(integration_env)
        red = poll.answers[0]
        vote_repo = await integration_env.get(VoteRepository)
        now = utc_now()
        lapsed = await _vote(vote_repo, red, 1, valid_until=now - timedelta(minutes=1))
        pending = await _vote(vote_repo, red, 1, valid_until=now + timedelta(hours=1))
        forever = await _vote(vote_repo, red, -1)

        # Act
        swept = await vote_repo.invalidate_expired(now)
        swept_again = await vote_repo.invalidate_expired(now)

        # Assert
        assert swept >= 1
        assert (await vote_repo.find_by_id(lapsed.id)).is_invalid
        assert not (await vote_repo.find_by_id(pending.id)).is_invalid
        assert not (await vote_repo.find_by_id(forever.id)).is_invalid
        assert swept_again == 0
        assert await vote_repo.count_by_sign([red.id]) == {red.id: (1, 1)}

    @pytest.mark.asyncio
    async def test_find_filters_orders_and_limits(self, integration_env):
        # Arrange
        poll = await _color_poll(integration_env)
        red, blue = poll.answers
        vote_repo = await integration_env.get(VoteRepository)
        now = utc_now()
        oldest = await _vote(
            vote_repo,
            red,
            1,
            voter_id=VoterId("a"),
            created_at=now - timedelta(hours=2),
        )
        expiring = await _vote(
            vote_repo,
            blue,
            -1,
            voter_id=VoterId("b"),
            valid_until=now + timedelta(minutes=30),
            created_at=now - timedelta(hours=1),
        )
        newest = await _vote(vote_repo, red, 1, created_at=now)
        answers = poll.answer_ids

        # Act
        everything = await vote_repo.find(VoteFilter(answer_ids=answers))
        latest_two = await vote_repo.find(VoteFilter(answer_ids=answers), limit=2)
        by_voter = await vote_repo.find(
            VoteFilter(answer_ids=answers, voter_id=VoterId("a"))
        )
        with_voter = await vote_repo.find(
            VoteFilter(answer_ids=answers, has_voter=True)
        )
        valid_later = await vote_repo.find(
            VoteFilter(answer_ids=answers, valid_on=now + timedelta(hours=1))
        )
        recent = await vote_repo.find(
            VoteFilter(answer_ids=answers, created_after=now - timedelta(minutes=90))
        )

        # Assert
        assert [v.id for v in everything] == [newest.id, expiring.id, oldest.id]
        assert [v.id for v in latest_two] == [newest.id, expiring.id]
        assert [v.id for v in by_voter] == [oldest.id]
        assert {v.id for v in with_voter} == {oldest.id, expiring.id}
        assert {v.id for v in valid_later} == {oldest.id, newest.id}
        assert [v.id for v in recent] == [newest.id, expiring.id]
        assert await vote_repo.find(VoteFilter(answer_ids=[])) == []

    @pytest.mark.asyncio
    async def test_invalidate_by_answers_and_delete(self, integration_env):
        # Arrange
        poll = await _color_poll(integration_env)
        red, blue = poll.answers
        vote_repo = await integration_env.get(VoteRepository)
        red_vote = await _vote(vote_repo, red, 1)
        blue_vote = await _vote(vote_repo, blue, 1)

        # Act
        reset = await vote_repo.invalidate_by_answers([red.id])
        deleted = await vote_repo.delete(blue_vote.id)
        deleted_again = await vote_repo.delete(blue_vote.id)

        # Assert
        assert reset == 1
        assert (await vote_repo.find_by_id(red_vote.id)).is_invalid
        assert deleted is True
        assert deleted_again is False
        assert await vote_repo.count_by_sign(poll.answer_ids) == {
            red.id: (0, 0),
            blue.id: (0, 0),
        }
