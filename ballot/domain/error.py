"""Domain layer errors."""

from typing import Optional


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    ``field`` names the offending request field when there is one.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AnswerNotFoundError(NotFoundError, ValidationError):
    """Raised when a vote names an answer the poll does not have.

    Both a missing resource and a malformed vote; the HTTP layer reports it
    as a bad request.
    """

    def __init__(self, poll_name: str, answer_name: str):
        self.poll_name = poll_name
        self.field = "answer"
        self.resource = "Answer"
        self.identifier = answer_name
        DomainError.__init__(
            self, f"answer {answer_name} does not exist in poll {poll_name}"
        )


class ConflictError(DomainError):
    """Raised when creating a resource whose unique key is taken."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")
