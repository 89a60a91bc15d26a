"""Domain model entities for ballots."""

from ballot.domain.model.parameter import Parameter
from ballot.domain.model.poll import Answer, Poll
from ballot.domain.model.tally import AnswerTally, VoterStats
from ballot.domain.model.vote import Vote

__all__ = [
    "Poll",
    "Answer",
    "Vote",
    "Parameter",
    "AnswerTally",
    "VoterStats",
]
