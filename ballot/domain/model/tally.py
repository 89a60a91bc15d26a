"""Read models produced by the tally and voter statistics computations."""

from pydantic import model_validator

from ballot.domain.model.common import DomainModel


class AnswerTally(DomainModel):
    """Net signed count of valid votes for one answer."""

    answer: str
    tally: int


class VoterStats(DomainModel):
    """Distinct voter counts for a poll."""

    total_voters: int
    active_voters: int

    @model_validator(mode="after")
    def validate_counts(self) -> "VoterStats":
        """Active voters are a subset of all voters."""
        if self.active_voters > self.total_voters:
            raise ValueError("active_voters cannot exceed total_voters")
        return self
