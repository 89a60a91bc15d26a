"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable test double; persistence covers the engine,
# the request session and the three repositories
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for ballot DI providers.

    A mockable component declares ``__mock_component__`` on an abstract base
    and ships two subclasses, one with ``__is_mock__ = True``. Concrete
    providers (config, domain services, use cases) leave both unset.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
