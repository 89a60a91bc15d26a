"""Unit tests for listing, resetting and deleting polls."""

import pytest

from ballot.application.usecase.parameter import (
    ParameterItem,
    UpsertParametersRequest,
    UpsertParametersUseCase,
)
from ballot.application.usecase.poll import (
    CreatePollRequest,
    CreatePollUseCase,
    DeletePollRequest,
    DeletePollUseCase,
    ListPollsRequest,
    ListPollsUseCase,
    ResetPollRequest,
    ResetPollUseCase,
)
from ballot.domain.error import NotFoundError
from ballot.domain.service import PollService, VoteService
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _create(env, name, answers):
    create_poll = await env.get(CreatePollUseCase)
    await create_poll.execute(
        CreatePollRequest(name=name, question=f"{name}?", answers=answers)
    )


class TestListPollsUseCase:
    """Tests for ListPollsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_name_and_question(self, unit_env):
        await _create(unit_env, "color", ["red"])
        list_polls = await unit_env.get(ListPollsUseCase)

        response = await list_polls.execute(ListPollsRequest())

        assert [(p.name, p.question) for p in response.polls] == [("color", "color?")]

    @pytest.mark.asyncio
    async def test_filters_by_parameter(self, unit_env):
        await _create(unit_env, "color", ["red"])
        await _create(unit_env, "size", ["S"])
        upsert = await unit_env.get(UpsertParametersUseCase)
        await upsert.execute(
            UpsertParametersRequest(
                poll_name="size", params=[ParameterItem(key="shop", value="eu")]
            )
        )
        list_polls = await unit_env.get(ListPollsUseCase)

        response = await list_polls.execute(
            ListPollsRequest(parameter_key="shop", parameter_value="eu")
        )

        assert [p.name for p in response.polls] == ["size"]


class TestResetPollUseCase:
    """Tests for ResetPollUseCase."""

    @pytest.mark.asyncio
    async def test_reset_zeroes_selected_answers(self, unit_env):
        """Should invalidate the named answers and render the new tally."""
        # Arrange
        await _create(unit_env, "color", ["red", "blue"])
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_vote("color", "red", 1)
        await vote_service.cast_vote("color", "blue", -1)
        reset_poll = await unit_env.get(ResetPollUseCase)

        # Act
        view = await reset_poll.execute(
            ResetPollRequest(poll_name="color", answer_names=["red", "nope"])
        )

        # Assert
        assert [(a.answer, a.counter) for a in view.details.answers] == [
            ("red", 0),
            ("blue", -1),
        ]

    @pytest.mark.asyncio
    async def test_new_votes_count_after_reset(self, unit_env):
        await _create(unit_env, "color", ["red"])
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_vote("color", "red", 1)
        reset_poll = await unit_env.get(ResetPollUseCase)
        await reset_poll.execute(ResetPollRequest(poll_name="color", answer_names=["red"]))

        await vote_service.cast_vote("color", "red", 1)
        view = await reset_poll.execute(ResetPollRequest(poll_name="color", answer_names=[]))

        assert view.details.answers[0].counter == 1

    @pytest.mark.asyncio
    async def test_missing_poll_raises_not_found(self, unit_env):
        reset_poll = await unit_env.get(ResetPollUseCase)

        with pytest.raises(NotFoundError):
            await reset_poll.execute(
                ResetPollRequest(poll_name="missing", answer_names=["red"])
            )


class TestDeletePollUseCase:
    """Tests for DeletePollUseCase."""

    @pytest.mark.asyncio
    async def test_delete_poll(self, unit_env):
        await _create(unit_env, "color", ["red"])
        delete_poll = await unit_env.get(DeletePollUseCase)

        await delete_poll.execute(DeletePollRequest(poll_name="color"))

        poll_service = await unit_env.get(PollService)
        assert await poll_service.find_poll("color") is None

    @pytest.mark.asyncio
    async def test_delete_missing_poll_raises_not_found(self, unit_env):
        delete_poll = await unit_env.get(DeletePollUseCase)

        with pytest.raises(NotFoundError):
            await delete_poll.execute(DeletePollRequest(poll_name="missing"))
