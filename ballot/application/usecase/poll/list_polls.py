"""List polls use case."""

from typing import Optional

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import PollService


class ListPollsRequest(BaseModel):
    """List polls request."""

    parameter_key: Optional[str] = None
    parameter_value: Optional[str] = None


class PollSummary(BaseModel):
    """Poll list item in response."""

    name: str
    question: str


class ListPollsResponse(BaseModel):
    """List polls response."""

    polls: list[PollSummary]


class ListPollsUseCase(BaseUseCase[ListPollsRequest, ListPollsResponse]):
    """Use case for listing polls, optionally by parameter."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: ListPollsRequest) -> ListPollsResponse:
        polls = await self.poll_service.list_polls(
            parameter_key=request.parameter_key,
            parameter_value=request.parameter_value,
        )
        return ListPollsResponse(
            polls=[PollSummary(name=p.name, question=p.question) for p in polls]
        )
