"""Delete parameter use cases."""

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import ParameterService


class DeleteParameterRequest(BaseModel):
    """Delete one parameter request."""

    poll_name: str
    key: str


class DeleteParametersRequest(BaseModel):
    """Delete all parameters request."""

    poll_name: str


class DeleteParameterUseCase(BaseUseCase[DeleteParameterRequest, None]):
    """Use case for deleting one poll parameter."""

    def __init__(self, parameter_service: ParameterService) -> None:
        self.parameter_service = parameter_service

    async def execute(self, request: DeleteParameterRequest) -> None:
        """Execute delete flow.

        Raises:
            NotFoundError: If the poll or parameter does not exist
        """
        await self.parameter_service.delete_parameter(request.poll_name, request.key)


class DeleteParametersUseCase(BaseUseCase[DeleteParametersRequest, int]):
    """Use case for clearing every parameter of a poll."""

    def __init__(self, parameter_service: ParameterService) -> None:
        self.parameter_service = parameter_service

    async def execute(self, request: DeleteParametersRequest) -> int:
        """Execute delete-all flow.

        Returns:
            Number of parameters deleted

        Raises:
            NotFoundError: If the poll does not exist
        """
        return await self.parameter_service.delete_parameters(request.poll_name)
