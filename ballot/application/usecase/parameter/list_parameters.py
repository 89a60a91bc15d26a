"""List parameters use case."""

from typing import Optional

from pydantic import BaseModel, Field

from ballot.application.usecase.base import BaseUseCase
from ballot.application.usecase.parameter.get_parameter import ParameterItem
from ballot.domain.service import ParameterService
from ballot.domain.value import ParameterFilter, SortDirection


class ListParametersRequest(BaseModel):
    """List parameters request."""

    poll_name: str
    key: Optional[str] = None
    key_contains: Optional[str] = None
    key_starts_with: Optional[str] = None
    key_ends_with: Optional[str] = None
    order: Optional[SortDirection] = None
    first: Optional[int] = Field(default=None, ge=0)


class ListParametersResponse(BaseModel):
    """List parameters response."""

    params: list[ParameterItem]


class ListParametersUseCase(
    BaseUseCase[ListParametersRequest, ListParametersResponse]
):
    """Use case for listing a poll's parameters."""

    def __init__(self, parameter_service: ParameterService) -> None:
        self.parameter_service = parameter_service

    async def execute(self, request: ListParametersRequest) -> ListParametersResponse:
        """Execute list parameters flow.

        Raises:
            NotFoundError: If the poll does not exist
        """
        parameter_filter = ParameterFilter(
            key=request.key,
            key_contains=request.key_contains,
            key_starts_with=request.key_starts_with,
            key_ends_with=request.key_ends_with,
            order=request.order,
            limit=request.first,
        )
        parameters = await self.parameter_service.list_parameters(
            request.poll_name, parameter_filter
        )
        return ListParametersResponse(
            params=[ParameterItem(key=p.key, value=p.value) for p in parameters]
        )
