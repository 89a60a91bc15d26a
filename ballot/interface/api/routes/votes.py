"""Vote routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.poll import PollView
from ballot.application.usecase.vote import (
    BallotItem,
    CastVotesRequest,
    CastVotesUseCase,
    DeleteVoteRequest,
    DeleteVoteUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.value import MAX_NAME_LENGTH
from ballot.interface.error import to_http_exception

router = APIRouter(prefix="/v2/polls", tags=["votes"], route_class=DishkaRoute)


class BallotAPIItem(BaseModel):
    """One vote in a cast request."""

    model_config = ConfigDict(populate_by_name=True)

    answer: str
    counter: int
    valid_till: datetime | None = Field(default=None, alias="validTill")
    voter_id: str | None = Field(
        default=None, alias="UUID", max_length=MAX_NAME_LENGTH
    )


class CastVotesAPIRequest(BaseModel):
    """API request for casting votes."""

    answers: list[BallotAPIItem]


@router.get("/{poll_name}/vote", response_model=ListVotesResponse)
async def list_votes(
    poll_name: str,
    list_votes_use_case: FromDishka[ListVotesUseCase],
    voter_id: str | None = Query(default=None, alias="UUID"),
    last: int | None = Query(default=None),
    created_after: datetime | None = Query(default=None, alias="createdAfter"),
    valid_on: datetime | None = Query(default=None, alias="validOn"),
) -> ListVotesResponse:
    """List a poll's votes, newest first.

    Args:
        poll_name: Poll name
        list_votes_use_case: List votes use case from DI
        voter_id: Only votes of this voter
        last: Maximum number of votes
        created_after: Only votes created after this time
        valid_on: Only votes still valid at this time

    Raises:
        HTTPException: 404 if the poll does not exist, 400 if ``last`` is invalid
    """
    try:
        return await list_votes_use_case.execute(
            ListVotesRequest(
                poll_name=poll_name,
                voter_id=voter_id,
                last=last,
                created_after=created_after,
                valid_on=valid_on,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{poll_name}/vote",
    response_model=PollView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def cast_votes(
    poll_name: str,
    request: CastVotesAPIRequest,
    cast_votes_use_case: FromDishka[CastVotesUseCase],
) -> PollView:
    """Cast one or more votes.

    The whole batch is rejected if any vote is invalid.

    Args:
        poll_name: Poll name
        request: Votes to cast
        cast_votes_use_case: Cast votes use case from DI

    Returns:
        Poll view including the new votes

    Raises:
        HTTPException: 404 if the poll does not exist, 400 for an unknown
            answer or a counter other than 1 or -1
    """
    try:
        return await cast_votes_use_case.execute(
            CastVotesRequest(
                poll_name=poll_name,
                ballots=[
                    BallotItem(
                        answer=item.answer,
                        counter=item.counter,
                        valid_till=item.valid_till,
                        voter_id=item.voter_id,
                    )
                    for item in request.answers
                ],
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{poll_name}/vote/{vote_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vote(
    poll_name: str,
    vote_id: str,
    delete_vote_use_case: FromDishka[DeleteVoteUseCase],
) -> Response:
    """Hard-delete one vote."""
    try:
        await delete_vote_use_case.execute(
            DeleteVoteRequest(poll_name=poll_name, vote_id=vote_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
