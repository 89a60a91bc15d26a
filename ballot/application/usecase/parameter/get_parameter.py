"""Get parameter use case."""

from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import ParameterService
from ballot.domain.value import MAX_NAME_LENGTH


class GetParameterRequest(BaseModel):
    """Get parameter request."""

    poll_name: str
    key: str


class ParameterItem(BaseModel):
    """Key/value pair in responses."""

    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(alias="paramName", max_length=MAX_NAME_LENGTH)
    value: str = Field(alias="paramValue")


class GetParameterUseCase(BaseUseCase[GetParameterRequest, ParameterItem]):
    """Use case for reading one poll parameter."""

    def __init__(self, parameter_service: ParameterService) -> None:
        self.parameter_service = parameter_service

    async def execute(self, request: GetParameterRequest) -> ParameterItem:
        """Execute get parameter flow.

        Raises:
            NotFoundError: If the poll or parameter does not exist
        """
        parameter = await self.parameter_service.get_parameter(
            request.poll_name, request.key
        )
        return ParameterItem(key=parameter.key, value=parameter.value)
