"""
Scheduler: runs one round per tick inside the daily active window.

A round starts every provider's batch concurrently and waits for all of them.
There is no stop condition; the process runs until it is killed or a
FatalError escapes a round.
"""

import asyncio
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Sequence

from emulog.config import settings
from emulog.services.batch_runner import BatchRunner, BatchSummary
from emulog.utils.logger import get_logger

logger = get_logger(__name__)


def next_run(
    now: datetime,
    window_start: timedelta,
    window_end: timedelta,
    interval: timedelta,
) -> datetime:
    """
    Next tick for a given wall-clock time.

    before window start → today's window start
    at/after window end → tomorrow's window start
    otherwise           → now floored to the interval (from midnight) + one interval
    """
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    since_midnight = now - today
    if since_midnight < window_start:
        return today + window_start
    if since_midnight >= window_end:
        return today + timedelta(days=1) + window_start
    return today + (since_midnight // interval) * interval + interval


class Scheduler:
    def __init__(
        self,
        runners: Sequence[BatchRunner],
        window_start: timedelta = timedelta(hours=settings.WINDOW_START_HOUR),
        window_end: timedelta = timedelta(hours=settings.WINDOW_END_HOUR),
        interval: timedelta = timedelta(minutes=settings.REPEAT_INTERVAL_MINUTES),
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.runners = list(runners)
        self.window_start = window_start
        self.window_end = window_end
        self.interval = interval
        self._clock = clock
        self._sleep = sleep

    async def run_round(self) -> list[BatchSummary]:
        """Run every provider's batch concurrently; returns when all are done."""
        tasks = [
            asyncio.create_task(runner.run(), name=f"batch-{runner.provider.code}")
            for runner in self.runners
        ]
        try:
            return list(await asyncio.gather(*tasks))
        finally:
            # Stop sibling batches once one has failed
            for task in tasks:
                task.cancel()

    async def run_forever(self):
        while True:
            target = next_run(self._clock(), self.window_start, self.window_end, self.interval)
            await self.run_round()
            logger.info(f"⏰ next scheduled run: {target:%Y-%m-%d %H:%M:%S}")
            delay = (target - self._clock()).total_seconds()
            await self._sleep(max(delay, 0.0))
