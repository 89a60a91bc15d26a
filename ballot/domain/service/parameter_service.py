"""Parameter domain service."""

from typing import Sequence, Tuple

import logfire

from ballot.domain.error import NotFoundError, ValidationError
from ballot.domain.model.parameter import Parameter
from ballot.domain.repository import ParameterRepository
from ballot.domain.value import MAX_NAME_LENGTH, ParameterFilter

from .base import Service
from .poll_service import PollService


class ParameterService(Service):
    """Domain service for poll parameters."""

    def __init__(
        self, parameter_repository: ParameterRepository, poll_service: PollService
    ) -> None:
        """Initialize parameter service.

        Args:
            parameter_repository: Parameter repository
            poll_service: Poll domain service
        """
        self.parameter_repository = parameter_repository
        self.poll_service = poll_service

    async def get_parameter(self, poll_name: str, key: str) -> Parameter:
        """Get one parameter of a poll.

        Raises:
            NotFoundError: If the poll or the parameter does not exist
        """
        poll = await self.poll_service.get_poll(poll_name)
        parameter = await self.parameter_repository.find_by_key(poll.id, key)
        if parameter is None:
            logfire.warn("Parameter not found", poll_name=poll_name, key=key)
            raise NotFoundError("Parameter", key)
        return parameter

    async def list_parameters(
        self, poll_name: str, parameter_filter: ParameterFilter
    ) -> list[Parameter]:
        """List a poll's parameters.

        Raises:
            NotFoundError: If the poll does not exist
        """
        with logfire.span("list_parameters", poll_name=poll_name):
            poll = await self.poll_service.get_poll(poll_name)
            parameters = await self.parameter_repository.find(
                poll.id, parameter_filter
            )
            logfire.info("Parameters listed", poll_name=poll_name, count=len(parameters))
            return parameters

    async def upsert_parameters(
        self, poll_name: str, items: Sequence[Tuple[str, str]]
    ) -> list[Parameter]:
        """Create or replace parameters of a poll.

        Args:
            poll_name: Poll name
            items: ``(key, value)`` pairs; a later pair wins over an earlier
                one with the same key

        Returns:
            Stored parameters

        Raises:
            ValidationError: If a key is empty or longer than 255 characters
            NotFoundError: If the poll does not exist
        """
        with logfire.span("upsert_parameters", poll_name=poll_name, count=len(items)):
            for key, _ in items:
                if not key or len(key) > MAX_NAME_LENGTH:
                    raise ValidationError("params is malformed", field="params")

            poll = await self.poll_service.get_poll(poll_name)
            stored = [
                await self.parameter_repository.upsert(poll.id, key, value)
                for key, value in items
            ]
            logfire.info("Parameters upserted", poll_name=poll_name, count=len(stored))
            return stored

    async def delete_parameter(self, poll_name: str, key: str) -> None:
        """Delete one parameter.

        Raises:
            NotFoundError: If the poll or the parameter does not exist
        """
        poll = await self.poll_service.get_poll(poll_name)
        if not await self.parameter_repository.delete(poll.id, key):
            logfire.warn("Parameter not found", poll_name=poll_name, key=key)
            raise NotFoundError("Parameter", key)
        logfire.info("Parameter deleted", poll_name=poll_name, key=key)

    async def delete_parameters(self, poll_name: str) -> int:
        """Delete every parameter of a poll.

        Returns:
            Number of parameters deleted

        Raises:
            NotFoundError: If the poll does not exist
        """
        poll = await self.poll_service.get_poll(poll_name)
        count = await self.parameter_repository.delete_all(poll.id)
        logfire.info("Parameters deleted", poll_name=poll_name, count=count)
        return count
