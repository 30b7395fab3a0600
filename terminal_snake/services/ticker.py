"""
Tick scheduler for the game loop.

Wraps a dedicated schedule.Scheduler that holds at most one periodic job.
Changing the speed means cancelling the job and scheduling a new one.
"""

import datetime
import logging
import time
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)

MAX_IDLE_SECONDS = 0.05


class Ticker:
    """
    Runs a callback every period_ms milliseconds on the calling thread.

    Only one job exists at a time, so ticks never overlap.
    """

    def __init__(self, callback: Callable[[], None], scheduler: Optional[schedule.Scheduler] = None):
        self.callback = callback
        self.scheduler = scheduler or schedule.Scheduler()
        self.period_ms: Optional[int] = None
        self._job: Optional[schedule.Job] = None
        self._running = False

    @property
    def active(self) -> bool:
        return self._job is not None

    def start(self, period_ms: int) -> None:
        """
        Install the periodic job, replacing any existing one.

        The first tick is due on the next loop pass, then every period_ms
        milliseconds after that.
        """
        if period_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {period_ms}.")

        self.cancel()
        self.period_ms = period_ms
        self._job = self.scheduler.every(period_ms / 1000).seconds.do(self.callback)
        # start() may be called from inside a tick, so the callback is not run
        # here directly; marking the job due hands the first run to run_pending()
        self._job.next_run = datetime.datetime.now()
        logger.debug("Ticking every %s ms", period_ms)

    def cancel(self) -> None:
        if self._job is not None:
            self.scheduler.cancel_job(self._job)
            self._job = None

    def run_pending(self) -> None:
        self.scheduler.run_pending()

    def run_forever(self) -> None:
        """Drive the scheduler, sleeping until the next deadline between passes."""
        self._running = True
        while self._running:
            self.scheduler.run_pending()
            idle = self.scheduler.idle_seconds
            if idle is None or idle > MAX_IDLE_SECONDS:
                idle = MAX_IDLE_SECONDS
            if idle > 0:
                time.sleep(idle)

    def stop(self) -> None:
        """Cancel the job and let run_forever() return after the current pass."""
        self.cancel()
        self._running = False
