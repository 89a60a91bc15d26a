"""Parameter use cases."""

from .delete_parameters import (
    DeleteParameterRequest,
    DeleteParametersRequest,
    DeleteParametersUseCase,
    DeleteParameterUseCase,
)
from .get_parameter import GetParameterRequest, GetParameterUseCase, ParameterItem
from .list_parameters import (
    ListParametersRequest,
    ListParametersResponse,
    ListParametersUseCase,
)
from .upsert_parameters import UpsertParametersRequest, UpsertParametersUseCase

__all__ = [
    "DeleteParameterRequest",
    "DeleteParametersRequest",
    "DeleteParametersUseCase",
    "DeleteParameterUseCase",
    "GetParameterRequest",
    "GetParameterUseCase",
    "ListParametersRequest",
    "ListParametersResponse",
    "ListParametersUseCase",
    "ParameterItem",
    "UpsertParametersRequest",
    "UpsertParametersUseCase",
]
