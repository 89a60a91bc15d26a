"""Vote use cases."""

from .cast_votes import BallotItem, CastVotesRequest, CastVotesUseCase
from .delete_vote import DeleteVoteRequest, DeleteVoteUseCase
from .list_votes import ListVotesRequest, ListVotesResponse, ListVotesUseCase, VoteItem

__all__ = [
    "BallotItem",
    "CastVotesRequest",
    "CastVotesUseCase",
    "DeleteVoteRequest",
    "DeleteVoteUseCase",
    "ListVotesRequest",
    "ListVotesResponse",
    "ListVotesUseCase",
    "VoteItem",
]
