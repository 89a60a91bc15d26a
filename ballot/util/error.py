"""Utility layer errors.

Raised while wiring the service (settings, engine, DI container), never
from request handling.
"""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting holds a value the service cannot run with."""

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"{setting}: {message}")


class DependencyInjectionError(UtilError):
    """No provider implementation exists for a component."""

    def __init__(self, component: str, kind: str):
        self.component = component
        self.kind = kind
        super().__init__(f"No {kind} implementation for {component}")
