"""Unit tests for ParameterService."""

import pytest

from ballot.domain.error import NotFoundError, ValidationError
from ballot.domain.service import ParameterService, PollService
from ballot.domain.value import ParameterFilter, SortDirection
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _tagged_poll(env, *items):
    poll_service = await env.get(PollService)
    await poll_service.create_poll("color", "Favourite?", ["red", "blue"])
    parameter_service = await env.get(ParameterService)
    if items:
        await parameter_service.upsert_parameters("color", list(items))
    return parameter_service


class TestUpsertParameters:
    """Tests for creating and replacing parameters."""

    @pytest.mark.asyncio
    async def test_overlong_key_is_rejected(self, unit_env):
        parameter_service = await _tagged_poll(unit_env)

        with pytest.raises(ValidationError) as exc_info:
            await parameter_service.upsert_parameters(
                "color", [("owner", "team-a"), ("k" * 256, "v")]
            )

        assert exc_info.value.field == "params"
        assert await parameter_service.list_parameters("color", ParameterFilter()) == []

    @pytest.mark.asyncio
    async def test_upsert_creates_then_replaces(self, unit_env):
        """Should keep one parameter per key, holding the latest value."""
        # Arrange
        parameter_service = await _tagged_poll(unit_env, ("owner", "alice"))

        # Act
        await parameter_service.upsert_parameters("color", [("owner", "bob")])

        # Assert
        parameters = await parameter_service.list_parameters(
            "color", ParameterFilter()
        )
        assert [(p.key, p.value) for p in parameters] == [("owner", "bob")]

    @pytest.mark.asyncio
    async def test_replace_keeps_identity_and_bumps_updated_at(self, unit_env):
        parameter_service = await _tagged_poll(unit_env, ("owner", "alice"))
        before = await parameter_service.get_parameter("color", "owner")

        await parameter_service.upsert_parameters("color", [("owner", "bob")])
        after = await parameter_service.get_parameter("color", "owner")

        assert after.id == before.id
        assert after.created_at == before.created_at
        assert after.updated_at >= before.updated_at

    @pytest.mark.asyncio
    async def test_later_pair_wins_within_one_batch(self, unit_env):
        parameter_service = await _tagged_poll(unit_env)

        await parameter_service.upsert_parameters(
            "color", [("owner", "alice"), ("owner", "carol")]
        )

        parameter = await parameter_service.get_parameter("color", "owner")
        assert parameter.value == "carol"

    @pytest.mark.asyncio
    async def test_empty_key_rejected(self, unit_env):
        parameter_service = await _tagged_poll(unit_env)

        with pytest.raises(ValidationError):
            await parameter_service.upsert_parameters(
                "color", [("ok", "1"), ("", "2")]
            )

        assert await parameter_service.list_parameters("color", ParameterFilter()) == []

    @pytest.mark.asyncio
    async def test_unknown_poll_raises_not_found(self, unit_env):
        parameter_service = await unit_env.get(ParameterService)

        with pytest.raises(NotFoundError):
            await parameter_service.upsert_parameters("missing", [("k", "v")])


class TestListParameters:
    """Tests for parameter listing and filtering."""

    KEYS = [
        ("app.theme", "dark"),
        ("app.lang", "en"),
        ("owner", "alice"),
        ("legacy.theme", "light"),
    ]

    @pytest.mark.asyncio
    async def test_key_filters(self, unit_env):
        parameter_service = await _tagged_poll(unit_env, *self.KEYS)

        async def keys(**kwargs):
            found = await parameter_service.list_parameters(
                "color", ParameterFilter(order=SortDirection.ASC, **kwargs)
            )
            return [p.key for p in found]

        assert await keys(key="owner") == ["owner"]
        assert await keys(key_contains="theme") == ["app.theme", "legacy.theme"]
        assert await keys(key_starts_with="app.") == ["app.lang", "app.theme"]
        assert await keys(key_ends_with=".theme") == ["app.theme", "legacy.theme"]
        assert await keys(key_starts_with="app.", key_ends_with="theme") == [
            "app.theme"
        ]

    @pytest.mark.asyncio
    async def test_order_and_limit(self, unit_env):
        parameter_service = await _tagged_poll(unit_env, *self.KEYS)

        descending = await parameter_service.list_parameters(
            "color", ParameterFilter(order=SortDirection.DESC, limit=2)
        )

        assert [p.key for p in descending] == ["owner", "legacy.theme"]

    @pytest.mark.asyncio
    async def test_zero_limit_returns_nothing(self, unit_env):
        parameter_service = await _tagged_poll(unit_env, *self.KEYS)

        found = await parameter_service.list_parameters(
            "color", ParameterFilter(limit=0)
        )

        assert found == []

    @pytest.mark.asyncio
    async def test_parameters_are_scoped_to_their_poll(self, unit_env):
        parameter_service = await _tagged_poll(unit_env, ("owner", "alice"))
        poll_service = await unit_env.get(PollService)
        await poll_service.create_poll("size", "Which size?", ["S"])

        assert await parameter_service.list_parameters("size", ParameterFilter()) == []
        with pytest.raises(NotFoundError):
            await parameter_service.get_parameter("size", "owner")


class TestDeleteParameters:
    """Tests for parameter deletion."""

    @pytest.mark.asyncio
    async def test_delete_one(self, unit_env):
        parameter_service = await _tagged_poll(
            unit_env, ("owner", "alice"), ("team", "design")
        )

        await parameter_service.delete_parameter("color", "owner")

        remaining = await parameter_service.list_parameters("color", ParameterFilter())
        assert [p.key for p in remaining] == ["team"]

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, unit_env):
        parameter_service = await _tagged_poll(unit_env)

        with pytest.raises(NotFoundError):
            await parameter_service.delete_parameter("color", "owner")

    @pytest.mark.asyncio
    async def test_delete_all(self, unit_env):
        parameter_service = await _tagged_poll(
            unit_env, ("owner", "alice"), ("team", "design")
        )

        count = await parameter_service.delete_parameters("color")

        assert count == 2
        assert await parameter_service.list_parameters("color", ParameterFilter()) == []
