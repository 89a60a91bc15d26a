"""Poll aggregate root.

A poll is a named question with a fixed, ordered set of answers. Both are
created together and never change afterwards.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from ballot.domain.model.common import DomainModel, utc_now
from ballot.domain.value import MAX_NAME_LENGTH, AnswerId, PollId


class Answer(DomainModel):
    """One selectable option within a poll."""

    id: AnswerId
    poll_id: PollId
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    # Creation order inside the poll, drives rendering order
    position: int = Field(default=0, ge=0)
    # Legacy stored counter, superseded by the computed tally
    count: int = 0


class Poll(DomainModel):
    """Poll aggregate root.

    Business rules:
    - ``name`` is globally unique and immutable
    - answer names are unique within the poll
    - answers keep their creation order
    """

    id: PollId
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    question: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now)
    answers: list[Answer] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_answers(self) -> "Poll":
        """Validate answer ownership and uniqueness."""
        names = [answer.name for answer in self.answers]
        if len(names) != len(set(names)):
            raise ValueError("Answer names must be unique within a poll")
        for answer in self.answers:
            if answer.poll_id != self.id:
                raise ValueError(f"Answer {answer.name} belongs to another poll")
        return self

    def find_answer(self, name: str) -> Optional[Answer]:
        """Find an answer by name."""
        for answer in self.answers:
            if answer.name == name:
                return answer
        return None

    @property
    def answer_ids(self) -> list[AnswerId]:
        """Answer IDs in creation order."""
        return [answer.id for answer in self.answers]
