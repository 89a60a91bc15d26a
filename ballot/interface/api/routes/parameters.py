"""Poll parameter routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel

from ballot.application.usecase.parameter import (
    DeleteParameterRequest,
    DeleteParametersRequest,
    DeleteParametersUseCase,
    DeleteParameterUseCase,
    GetParameterRequest,
    GetParameterUseCase,
    ListParametersRequest,
    ListParametersResponse,
    ListParametersUseCase,
    ParameterItem,
    UpsertParametersRequest,
    UpsertParametersUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.value import SortDirection
from ballot.interface.error import to_http_exception

router = APIRouter(prefix="/v2/polls", tags=["parameters"], route_class=DishkaRoute)


class UpsertParametersAPIRequest(BaseModel):
    """API request for creating or replacing parameters."""

    params: list[ParameterItem]


@router.get("/{poll_name}/params", response_model=ListParametersResponse)
async def list_parameters(
    poll_name: str,
    list_parameters_use_case: FromDishka[ListParametersUseCase],
    param_name: str | None = Query(default=None, alias="paramName"),
    param_name_contains: str | None = Query(default=None, alias="paramNameContains"),
    param_name_starts_with: str | None = Query(
        default=None, alias="paramNameStartsWith"
    ),
    param_name_ends_with: str | None = Query(default=None, alias="paramNameEndsWith"),
    order_by: SortDirection | None = Query(default=None, alias="orderBy"),
    first: int | None = Query(default=None, ge=0),
) -> ListParametersResponse:
    """List a poll's parameters with optional name filters, order and limit."""
    try:
        return await list_parameters_use_case.execute(
            ListParametersRequest(
                poll_name=poll_name,
                key=param_name,
                key_contains=param_name_contains,
                key_starts_with=param_name_starts_with,
                key_ends_with=param_name_ends_with,
                order=order_by,
                first=first,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{poll_name}/params/{param_name}", response_model=ParameterItem)
async def get_parameter(
    poll_name: str,
    param_name: str,
    get_parameter_use_case: FromDishka[GetParameterUseCase],
) -> ParameterItem:
    """Get one parameter.

    Raises:
        HTTPException: 404 if the poll or parameter does not exist
    """
    try:
        return await get_parameter_use_case.execute(
            GetParameterRequest(poll_name=poll_name, key=param_name)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{poll_name}/params", status_code=status.HTTP_204_NO_CONTENT)
async def upsert_parameters(
    poll_name: str,
    request: UpsertParametersAPIRequest,
    upsert_parameters_use_case: FromDishka[UpsertParametersUseCase],
) -> Response:
    """Create or replace parameters.

    Raises:
        HTTPException: 404 if the poll does not exist, 400 if malformed
    """
    try:
        await upsert_parameters_use_case.execute(
            UpsertParametersRequest(poll_name=poll_name, params=request.params)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{poll_name}/params", status_code=status.HTTP_204_NO_CONTENT)
async def delete_parameters(
    poll_name: str,
    delete_parameters_use_case: FromDishka[DeleteParametersUseCase],
) -> Response:
    """Delete every parameter of a poll."""
    try:
        await delete_parameters_use_case.execute(
            DeleteParametersRequest(poll_name=poll_name)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{poll_name}/params/{param_name}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_parameter(
    poll_name: str,
    param_name: str,
    delete_parameter_use_case: FromDishka[DeleteParameterUseCase],
) -> Response:
    """Delete one parameter."""
    try:
        await delete_parameter_use_case.execute(
            DeleteParameterRequest(poll_name=poll_name, key=param_name)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
