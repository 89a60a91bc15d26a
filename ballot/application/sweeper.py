"""Periodic expired vote sweep.

Runs in-process with the FastAPI application on an APScheduler
``AsyncIOScheduler``. Each run opens its own DI request scope, so it gets a
fresh session and commits independently of HTTP requests.
"""

import asyncio
from datetime import timezone

import logfire
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from dishka import AsyncContainer

from ballot.config import SweepSettings
from ballot.domain.model.common import utc_now
from ballot.domain.service import VoteService

SWEEP_JOB_ID = "sweep_expired_votes"


class ExpiredVoteSweeper:
    """Owns the scheduler that invalidates expired votes."""

    def __init__(self, container: AsyncContainer, settings: SweepSettings) -> None:
        """Initialize sweeper.

        Args:
            container: Root DI container, a request scope is opened per run
            settings: Sweep interval configuration
        """
        self.container = container
        self.settings = settings
        self.scheduler = AsyncIOScheduler(timezone=timezone.utc)
        self._in_flight: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self.scheduler.running

    async def run_once(self) -> int:
        """Sweep expired votes once.

        Failures are logged and swallowed so the schedule keeps going.

        Returns:
            Number of votes invalidated, 0 on failure
        """
        try:
            async with self.container() as request_container:
                vote_service = await request_container.get(VoteService)
                return await vote_service.sweep_expired_votes(utc_now())
        except Exception as e:
            logfire.error(
                "Scheduled vote sweep failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return 0

    async def _run_scheduled(self) -> int:
        """Scheduled entry point.

        The sweep runs in its own task so that cancelling the job on
        scheduler shutdown leaves it to finish, and ``stop`` can await it.
        """
        task = asyncio.ensure_future(self.run_once())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return await asyncio.shield(task)

    def start(self) -> None:
        """Schedule the sweep and start the scheduler."""
        if self.scheduler.running:
            logfire.info("Vote sweeper already running")
            return

        self.scheduler.add_job(
            self._run_scheduled,
            trigger=IntervalTrigger(seconds=self.settings.interval_seconds),
            id=SWEEP_JOB_ID,
            name="Expired vote sweep",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self.scheduler.start()
        logfire.info(
            "Vote sweeper started", interval_seconds=self.settings.interval_seconds
        )

    async def stop(self) -> None:
        """Stop the scheduler and wait for an in-flight sweep to finish.

        ``AsyncIOScheduler.shutdown`` is applied on the next loop iteration,
        so the loop is yielded to once before waiting.
        """
        if not self.scheduler.running:
            return

        self.scheduler.shutdown(wait=False)
        await asyncio.sleep(0)
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)
        logfire.info("Vote sweeper stopped")
