"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ballot.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: Postgres persistence, real services.

    Nothing connects until the first request scope asks for a session; the
    engine is disposed when the container closes.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Install the container on the app.

    The app lifespan reads it back from ``app.state.dishka_container`` to
    drive the vote sweeper, so a container installed after ``create_app``
    (as the tests do) replaces the production one everywhere.
    """
    setup_dishka(container, app)
