"""Base service class for domain services."""


class Service:
    """Base class for ballot domain services.

    Services own the rules that span a poll and its answers, votes and
    parameters. They work on repositories only and never see HTTP or
    sessions.
    """

    pass
