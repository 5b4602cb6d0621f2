"""Fixed-interval scheduler for collection runs."""

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[object]]


class Scheduler:
    """Fires a job immediately and then every interval until stopped.

    Each fire launches the job as a separate task, so the cadence does not
    depend on how long a run takes or whether it fails. Ticks are measured
    from the previous fire; missed ticks are not replayed.

    When ``allow_overlap`` is False a tick that arrives while the previous
    run is still in flight is skipped.
    """

    def __init__(
        self,
        job: Job,
        interval_seconds: float,
        allow_overlap: bool = False,
        shutdown_grace_seconds: float = 30.0,
        name: str = "collector",
    ) -> None:
        """Initialize scheduler.

        Args:
            job: Coroutine function to invoke on every tick.
            interval_seconds: Seconds between fires.
            allow_overlap: Launch a new run even if the previous one is still running.
            shutdown_grace_seconds: How long stop() waits for in-flight runs before cancelling.
            name: Name used for task names and log messages.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self.job = job
        self.interval_seconds = interval_seconds
        self.allow_overlap = allow_overlap
        self.shutdown_grace_seconds = shutdown_grace_seconds
        self.name = name
        self.ticks = 0

        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task[None] | None = None
        self._runs: set[asyncio.Task[None]] = set()

    @property
    def is_running(self) -> bool:
        """Whether the scheduler is still firing ticks."""
        return self._task is not None and not self._task.done()

    @property
    def in_flight(self) -> int:
        """Number of runs currently executing."""
        return len(self._runs)

    def start(self) -> None:
        """Start firing. Must be called from within a running event loop."""
        if self.is_running:
            raise RuntimeError(f"Scheduler {self.name} is already running")

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._loop(), name=f"{self.name}-scheduler")
        logger.info(
            "Scheduler %s started with %s second interval", self.name, self.interval_seconds
        )

    async def _loop(self) -> None:
        assert self._stop_event is not None
        loop = asyncio.get_running_loop()
        next_fire = loop.time()

        while not self._stop_event.is_set():
            self._fire()

            next_fire += self.interval_seconds
            now = loop.time()
            if next_fire < now:
                next_fire = now

            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=next_fire - now)
                # If we get here, stop was requested
                break
            except asyncio.TimeoutError:
                continue

    def _fire(self) -> None:
        self.ticks += 1
        if self._runs and not self.allow_overlap:
            logger.warning(
                "Previous %s run still in progress, skipping tick %d", self.name, self.ticks
            )
            return

        task = asyncio.create_task(self._run_job(), name=f"{self.name}-run-{self.ticks}")
        self._runs.add(task)
        task.add_done_callback(self._runs.discard)

    async def _run_job(self) -> None:
        try:
            await self.job()
        except Exception as e:
            logger.error("Error in %s run: %s", self.name, e, exc_info=True)

    async def wait_closed(self) -> None:
        """Wait until the scheduler has stopped firing."""
        if self._task is not None:
            await self._task

    async def stop(self) -> None:
        """Stop firing and let in-flight runs finish within the grace period."""
        if self._task is None:
            return

        logger.info("Stopping scheduler %s", self.name)
        assert self._stop_event is not None
        self._stop_event.set()
        await self._task
        self._task = None

        if not self._runs:
            return

        logger.info(
            "Waiting up to %s seconds for %d in-flight %s run(s)",
            self.shutdown_grace_seconds,
            len(self._runs),
            self.name,
        )
        _, pending = await asyncio.wait(set(self._runs), timeout=self.shutdown_grace_seconds)
        if pending:
            logger.warning("Cancelling %d unfinished %s run(s)", len(pending), self.name)
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
