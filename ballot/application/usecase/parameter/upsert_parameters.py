"""Upsert parameters use case."""

import logfire
from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.application.usecase.parameter.get_parameter import ParameterItem
from ballot.domain.service import ParameterService


class UpsertParametersRequest(BaseModel):
    """Upsert parameters request."""

    poll_name: str
    params: list[ParameterItem]


class UpsertParametersUseCase(BaseUseCase[UpsertParametersRequest, None]):
    """Use case for creating or replacing poll parameters."""

    def __init__(self, parameter_service: ParameterService) -> None:
        self.parameter_service = parameter_service

    async def execute(self, request: UpsertParametersRequest) -> None:
        """Execute upsert flow.

        Raises:
            NotFoundError: If the poll does not exist
            ValidationError: If a parameter name is empty
        """
        with logfire.span(
            "upsert_parameters.execute",
            poll_name=request.poll_name,
            count=len(request.params),
        ):
            await self.parameter_service.upsert_parameters(
                request.poll_name, [(p.key, p.value) for p in request.params]
            )
