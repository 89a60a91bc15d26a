"""Domain services."""

from .base import Service
from .parameter_service import ParameterService
from .poll_service import PollService
from .tally_service import TallyService
from .vote_service import VoteService

__all__ = [
    "ParameterService",
    "PollService",
    "Service",
    "TallyService",
    "VoteService",
]
