"""Poll domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from ballot.domain.error import ConflictError, NotFoundError, ValidationError
from ballot.domain.model.common import utc_now
from ballot.domain.model.poll import Answer, Poll
from ballot.domain.repository import PollRepository
from ballot.domain.value import MAX_NAME_LENGTH, AnswerId, PollId

from .base import Service


class PollService(Service):
    """Domain service for poll operations."""

    def __init__(self, poll_repository: PollRepository) -> None:
        """Initialize poll service.

        Args:
            poll_repository: Poll repository
        """
        self.poll_repository = poll_repository

    async def find_poll(self, name: str) -> Optional[Poll]:
        """Find a poll by name.

        Args:
            name: Poll name

        Returns:
            Poll with answers if found, None otherwise
        """
        return await self.poll_repository.find_by_name(name)

    async def get_poll(self, name: str) -> Poll:
        """Get a poll by name.

        Raises:
            NotFoundError: If the poll does not exist
        """
        poll = await self.poll_repository.find_by_name(name)
        if poll is None:
            logfire.warn("Poll not found", poll_name=name)
            raise NotFoundError("Poll", name)
        return poll

    async def create_poll(
        self, name: str, question: str, answer_names: list[str]
    ) -> Poll:
        """Create a poll with its answers.

        Answers keep the order in which they are given.

        Args:
            name: Unique poll name
            question: Poll question
            answer_names: Answer option names

        Returns:
            Created poll

        Raises:
            ValidationError: If name, question or answers are malformed
            ConflictError: If a poll with this name already exists
        """
        with logfire.span("create_poll", poll_name=name, answers=len(answer_names)):
            if not name:
                raise ValidationError("Poll name must not be empty", field="name")
            if len(name) > MAX_NAME_LENGTH:
                raise ValidationError(
                    f"Poll name must be at most {MAX_NAME_LENGTH} characters",
                    field="name",
                )
            if not question:
                raise ValidationError("Question must not be empty", field="question")
            if not answer_names:
                raise ValidationError(
                    "A poll needs at least one answer", field="answers"
                )
            if any(not answer for answer in answer_names):
                raise ValidationError("Answer names must not be empty", field="answers")
            if any(len(answer) > MAX_NAME_LENGTH for answer in answer_names):
                raise ValidationError(
                    f"Answer names must be at most {MAX_NAME_LENGTH} characters",
                    field="answers",
                )
            if len(set(answer_names)) != len(answer_names):
                raise ValidationError(
                    "Answer names must be unique within a poll", field="answers"
                )

            if await self.poll_repository.find_by_name(name):
                logfire.warn("Duplicate poll name", poll_name=name)
                raise ConflictError("Poll", name)

            poll_id = PollId(uuid4())
            poll = Poll(
                id=poll_id,
                name=name,
                question=question,
                created_at=utc_now(),
                answers=[
                    Answer(
                        id=AnswerId(uuid4()),
                        poll_id=poll_id,
                        name=answer_name,
                        position=position,
                    )
                    for position, answer_name in enumerate(answer_names)
                ],
            )

            try:
                saved = await self.poll_repository.save(poll)
            except IntegrityError:
                # Lost a race against a concurrent create with the same name
                logfire.warn("Duplicate poll name on insert", poll_name=name)
                raise ConflictError("Poll", name)

            logfire.info("Poll created", poll_name=name, poll_id=str(poll_id))
            return saved

    async def delete_poll(self, name: str) -> None:
        """Delete a poll and everything it owns.

        Raises:
            NotFoundError: If the poll does not exist
        """
        with logfire.span("delete_poll", poll_name=name):
            poll = await self.get_poll(name)
            await self.poll_repository.delete(poll.id)
            logfire.info("Poll deleted", poll_name=name)

    async def list_polls(
        self,
        parameter_key: Optional[str] = None,
        parameter_value: Optional[str] = None,
    ) -> list[Poll]:
        """List polls, optionally by attached parameter.

        Args:
            parameter_key: Only polls with a parameter of this key
            parameter_value: Value the ``parameter_key`` parameter must hold

        Returns:
            Matching polls (answers not loaded)
        """
        polls = await self.poll_repository.find_all(
            parameter_key=parameter_key, parameter_value=parameter_value
        )
        logfire.info(
            "Polls listed",
            count=len(polls),
            parameter_key=parameter_key,
            parameter_value=parameter_value,
        )
        return polls
