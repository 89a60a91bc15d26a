"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from ballot.application.sweeper import ExpiredVoteSweeper
from ballot.config import Settings, SweepSettings
from ballot.interface.api.routes import health, parameters, polls, votes
from ballot.interface.error import request_validation_handler
from ballot.util.di.container import create_container, setup_di
from ballot.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the expired vote sweeper for the lifetime of the app.

    Uses whichever container is installed on the app at startup, so tests
    that swap in their own container get a sweeper bound to it.
    """
    container: AsyncContainer = app.state.dishka_container
    sweep_settings = await container.get(SweepSettings)

    sweeper = None
    if sweep_settings.enabled:
        sweeper = ExpiredVoteSweeper(container, sweep_settings)
        sweeper.start()
    else:
        logfire.info("Vote sweeper disabled")

    try:
        yield
    finally:
        if sweeper is not None:
            await sweeper.stop()
        await container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it without sending.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Ballot API",
        description="Polls with signed, expiring votes, live tallies and voter statistics",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Malformed bodies and query parameters are client errors, not 422
    app_instance.add_exception_handler(
        RequestValidationError, request_validation_handler
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(polls.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(parameters.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
