"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from ballot.domain.model import Answer, Parameter, Poll, Vote
from ballot.domain.value import AnswerId, ParameterId, PollId, VoteId, VoterId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        name=row["name"],
        position=row["position"],
        count=row.get("count", 0),
    )


def row_to_poll(
    row: Dict[str, Any], answer_rows: Sequence[Dict[str, Any]] = ()
) -> Poll:
    """Convert database rows to Poll domain model.

    Args:
        row: Poll row as dict
        answer_rows: Answer rows of the poll, already ordered by position

    Returns:
        Poll domain model
    """
    return Poll(
        id=PollId(_uuid(row["id"])),
        name=row["name"],
        question=row["question"],
        created_at=row["created_at"],
        answers=[row_to_answer(answer_row) for answer_row in answer_rows],
    )


def poll_to_dict(poll: Poll) -> Dict[str, Any]:
    """Convert Poll domain model to a polls table dict (answers excluded)."""
    return poll.model_dump(exclude={"answers"})


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    voter_id = row.get("voter_id")
    return Vote(
        id=VoteId(_uuid(row["id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        value=row["value"],
        valid_until=row.get("valid_until"),
        is_invalid=row["is_invalid"],
        voter_id=VoterId(voter_id) if voter_id is not None else None,
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_parameter(row: Dict[str, Any]) -> Parameter:
    """Convert database row to Parameter domain model."""
    return Parameter(
        id=ParameterId(_uuid(row["id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        key=row["key"],
        value=row["value"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
