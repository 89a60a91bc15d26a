"""Poll routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, Field

from ballot.application.usecase.poll import (
    CreatePollRequest,
    CreatePollUseCase,
    DeletePollRequest,
    DeletePollUseCase,
    GetPollRequest,
    GetPollStatRequest,
    GetPollStatUseCase,
    GetPollUseCase,
    ListPollsRequest,
    ListPollsResponse,
    ListPollsUseCase,
    PollStatView,
    PollView,
    ResetPollRequest,
    ResetPollUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.value import MAX_NAME_LENGTH
from ballot.interface.error import to_http_exception

router = APIRouter(prefix="/v2/polls", tags=["polls"], route_class=DishkaRoute)


class CreatePollAPIRequest(BaseModel):
    """API request for creating a poll."""

    name: str = Field(max_length=MAX_NAME_LENGTH)
    question: str
    answers: list[Annotated[str, Field(max_length=MAX_NAME_LENGTH)]]


class ResetAnswer(BaseModel):
    """Answer to reset."""

    answer: str


class ResetPollAPIRequest(BaseModel):
    """API request for resetting answers."""

    answers: list[ResetAnswer]


@router.get("", response_model=ListPollsResponse)
async def list_polls(
    list_polls_use_case: FromDishka[ListPollsUseCase],
    param_name: str | None = Query(default=None, alias="paramName"),
    param_value: str | None = Query(default=None, alias="paramValue"),
) -> ListPollsResponse:
    """List polls, optionally those carrying a matching parameter."""
    return await list_polls_use_case.execute(
        ListPollsRequest(parameter_key=param_name, parameter_value=param_value)
    )


@router.post(
    "",
    response_model=PollView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_poll(
    request: CreatePollAPIRequest,
    create_poll_use_case: FromDishka[CreatePollUseCase],
) -> PollView:
    """Create a poll.

    Args:
        request: Poll name, question and answers
        create_poll_use_case: Create poll use case from DI

    Returns:
        View of the created poll

    Raises:
        HTTPException: 400 if malformed, 409 if the name is taken
    """
    try:
        return await create_poll_use_case.execute(
            CreatePollRequest(
                name=request.name,
                question=request.question,
                answers=request.answers,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{poll_name}", response_model=PollView, response_model_exclude_none=True)
async def get_poll(
    poll_name: str,
    get_poll_use_case: FromDishka[GetPollUseCase],
    with_stat: bool = Query(default=False, alias="withStat"),
) -> PollView:
    """Get a poll with its live tally.

    Args:
        poll_name: Poll name
        get_poll_use_case: Get poll use case from DI
        with_stat: Include voter statistics

    Raises:
        HTTPException: 404 if the poll does not exist
    """
    try:
        return await get_poll_use_case.execute(
            GetPollRequest(poll_name=poll_name, with_stat=with_stat)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{poll_name}/stat", response_model=PollStatView)
async def get_poll_stat(
    poll_name: str,
    get_poll_stat_use_case: FromDishka[GetPollStatUseCase],
) -> PollStatView:
    """Get a poll's voter statistics."""
    try:
        return await get_poll_stat_use_case.execute(
            GetPollStatRequest(poll_name=poll_name)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{poll_name}/reset",
    response_model=PollView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def reset_poll(
    poll_name: str,
    request: ResetPollAPIRequest,
    reset_poll_use_case: FromDishka[ResetPollUseCase],
) -> PollView:
    """Invalidate all votes of the listed answers.

    Raises:
        HTTPException: 404 if the poll does not exist
    """
    try:
        return await reset_poll_use_case.execute(
            ResetPollRequest(
                poll_name=poll_name,
                answer_names=[item.answer for item in request.answers],
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{poll_name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_poll(
    poll_name: str,
    delete_poll_use_case: FromDishka[DeletePollUseCase],
) -> Response:
    """Delete a poll with its answers, votes and parameters."""
    try:
        await delete_poll_use_case.execute(DeletePollRequest(poll_name=poll_name))
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
