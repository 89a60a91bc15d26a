"""Poll use cases."""

from .create_poll import CreatePollRequest, CreatePollUseCase
from .delete_poll import DeletePollRequest, DeletePollUseCase
from .get_poll import (
    AnswerCounter,
    GetPollRequest,
    GetPollUseCase,
    PollDetails,
    PollView,
    VoterStatsView,
)
from .get_poll_stat import GetPollStatRequest, GetPollStatUseCase, PollStatView
from .list_polls import (
    ListPollsRequest,
    ListPollsResponse,
    ListPollsUseCase,
    PollSummary,
)
from .reset_poll import ResetPollRequest, ResetPollUseCase

__all__ = [
    "AnswerCounter",
    "CreatePollRequest",
    "CreatePollUseCase",
    "DeletePollRequest",
    "DeletePollUseCase",
    "GetPollRequest",
    "GetPollStatRequest",
    "GetPollStatUseCase",
    "GetPollUseCase",
    "ListPollsRequest",
    "ListPollsResponse",
    "ListPollsUseCase",
    "PollDetails",
    "PollStatView",
    "PollSummary",
    "PollView",
    "ResetPollRequest",
    "ResetPollUseCase",
    "VoterStatsView",
]
