"""Unit tests for the vote use cases."""

from datetime import timedelta
from uuid import uuid4

import pytest

from ballot.application.usecase.poll import CreatePollRequest, CreatePollUseCase
from ballot.application.usecase.vote import (
    BallotItem,
    CastVotesRequest,
    CastVotesUseCase,
    DeleteVoteRequest,
    DeleteVoteUseCase,
    ListVotesRequest,
    ListVotesUseCase,
)
from ballot.domain.error import AnswerNotFoundError, NotFoundError, ValidationError
from ballot.domain.model.common import utc_now
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


@pytest.fixture
def color_request():
    return CreatePollRequest(
        name="color", question="Favourite color?", answers=["red", "blue"]
    )


async def _cast(env, *ballots):
    cast_votes = await env.get(CastVotesUseCase)
    return await cast_votes.execute(
        CastVotesRequest(poll_name="color", ballots=list(ballots))
    )


class TestCastVotesUseCase:
    """Tests for CastVotesUseCase."""

    @pytest.mark.asyncio
    async def test_cast_returns_updated_view(self, unit_env, color_request):
        """Should store the batch and render the poll with it counted."""
        # Arrange
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)

        # Act
        view = await _cast(
            unit_env,
            BallotItem(answer="red", counter=1),
            BallotItem(answer="red", counter=1, voter_id="voter-1"),
            BallotItem(answer="blue", counter=-1),
        )

        # Assert
        assert [(a.answer, a.counter) for a in view.details.answers] == [
            ("red", 2),
            ("blue", -1),
        ]

    @pytest.mark.asyncio
    async def test_vote_expired_on_arrival_does_not_count(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)

        view = await _cast(
            unit_env,
            BallotItem(
                answer="red", counter=1, valid_till=utc_now() - timedelta(seconds=5)
            ),
        )

        assert view.details.answers[0].counter == 0

    @pytest.mark.asyncio
    async def test_unknown_answer_rejects_batch(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)

        with pytest.raises(AnswerNotFoundError):
            await _cast(
                unit_env,
                BallotItem(answer="red", counter=1),
                BallotItem(answer="green", counter=1),
            )

        list_votes = await unit_env.get(ListVotesUseCase)
        response = await list_votes.execute(ListVotesRequest(poll_name="color"))
        assert response.answers == []

    @pytest.mark.asyncio
    async def test_bad_counter_rejected(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)

        with pytest.raises(ValidationError):
            await _cast(unit_env, BallotItem(answer="red", counter=2))

    @pytest.mark.asyncio
    async def test_missing_poll_raises_not_found(self, unit_env):
        with pytest.raises(NotFoundError):
            await _cast(unit_env, BallotItem(answer="red", counter=1))


class TestListVotesUseCase:
    """Tests for ListVotesUseCase."""

    @pytest.mark.asyncio
    async def test_items_carry_answer_names_and_aliases(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)
        expiry = utc_now() + timedelta(days=1)
        await _cast(
            unit_env,
            BallotItem(answer="blue", counter=-1, valid_till=expiry, voter_id="v-9"),
        )
        list_votes = await unit_env.get(ListVotesUseCase)

        response = await list_votes.execute(ListVotesRequest(poll_name="color"))

        [item] = response.answers
        assert item.answer == "blue"
        assert item.counter == -1
        dumped = item.model_dump(by_alias=True)
        assert dumped["UUID"] == "v-9"
        assert dumped["validTill"] == expiry
        assert dumped["id"] == item.id

    @pytest.mark.asyncio
    async def test_filters_by_voter_and_validity(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)
        await _cast(
            unit_env,
            BallotItem(answer="red", counter=1, voter_id="a"),
            BallotItem(
                answer="red",
                counter=1,
                voter_id="a",
                valid_till=utc_now() + timedelta(minutes=30),
            ),
            BallotItem(answer="blue", counter=1, voter_id="b"),
        )
        list_votes = await unit_env.get(ListVotesUseCase)

        by_voter = await list_votes.execute(
            ListVotesRequest(poll_name="color", voter_id="a")
        )
        valid_later = await list_votes.execute(
            ListVotesRequest(poll_name="color", valid_on=utc_now() + timedelta(hours=2))
        )

        assert len(by_voter.answers) == 2
        assert {item.voter_id for item in by_voter.answers} == {"a"}
        # The 30-minute vote has lapsed by then; the two open-ended ones remain
        assert len(valid_later.answers) == 2
        assert all(item.valid_till is None for item in valid_later.answers)

    @pytest.mark.asyncio
    async def test_last_limits_results(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)
        await _cast(
            unit_env,
            BallotItem(answer="red", counter=1),
            BallotItem(answer="blue", counter=1),
            BallotItem(answer="blue", counter=-1),
        )
        list_votes = await unit_env.get(ListVotesUseCase)

        response = await list_votes.execute(ListVotesRequest(poll_name="color", last=2))
        none = await list_votes.execute(ListVotesRequest(poll_name="color", last=0))

        assert len(response.answers) == 2
        assert none.answers == []

    @pytest.mark.asyncio
    async def test_negative_last_rejected(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)
        list_votes = await unit_env.get(ListVotesUseCase)

        with pytest.raises(ValidationError):
            await list_votes.execute(ListVotesRequest(poll_name="color", last=-3))

    @pytest.mark.asyncio
    async def test_loads_poll_once(self, unit_env, color_request, monkeypatch):
        """Answer names come from the same poll the votes were queried by."""
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)
        await _cast(unit_env, BallotItem(answer="red", counter=1))
        list_votes = await unit_env.get(ListVotesUseCase)
        poll_service = list_votes.poll_service
        get_poll = poll_service.get_poll
        loaded = []

        async def counting_get_poll(name):
            loaded.append(name)
            return await get_poll(name)

        monkeypatch.setattr(poll_service, "get_poll", counting_get_poll)

        response = await list_votes.execute(ListVotesRequest(poll_name="color"))

        assert loaded == ["color"]
        assert [item.answer for item in response.answers] == ["red"]

    @pytest.mark.asyncio
    async def test_missing_poll_raises_not_found(self, unit_env):
        list_votes = await unit_env.get(ListVotesUseCase)

        with pytest.raises(NotFoundError):
            await list_votes.execute(ListVotesRequest(poll_name="missing"))


class TestDeleteVoteUseCase:
    """Tests for DeleteVoteUseCase."""

    @pytest.mark.asyncio
    async def test_delete_vote_updates_tally(self, unit_env, color_request):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)
        await _cast(unit_env, BallotItem(answer="red", counter=1))
        list_votes = await unit_env.get(ListVotesUseCase)
        [item] = (await list_votes.execute(ListVotesRequest(poll_name="color"))).answers
        delete_vote = await unit_env.get(DeleteVoteUseCase)

        await delete_vote.execute(DeleteVoteRequest(poll_name="color", vote_id=item.id))

        response = await list_votes.execute(ListVotesRequest(poll_name="color"))
        assert response.answers == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("vote_id", ["not-a-uuid", str(uuid4())])
    async def test_unknown_vote_raises_not_found(self, unit_env, color_request, vote_id):
        create_poll = await unit_env.get(CreatePollUseCase)
        await create_poll.execute(color_request)
        delete_vote = await unit_env.get(DeleteVoteUseCase)

        with pytest.raises(NotFoundError):
            await delete_vote.execute(
                DeleteVoteRequest(poll_name="color", vote_id=vote_id)
            )
