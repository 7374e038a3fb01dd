"""
Batch runner: one provider, one pass over its units.

For each unit (earliest scan code, unit number ascending): sleep the request
delay, resolve, insert the (date, unit, train) triple if new.
ResolutionError skips the unit. StorageError is not caught here.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from emulog.config import settings
from emulog.exceptions import ResolutionError
from emulog.services.resolver import Resolver
from emulog.services.storage import Storage
from emulog.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class BatchSummary:
    bureau: str
    seen: int = 0
    resolved: int = 0
    inserted: int = 0
    failed: int = 0


class BatchRunner:
    def __init__(
        self,
        resolver: Resolver,
        storage: Storage,
        request_delay: float = settings.REQUEST_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.resolver = resolver
        self.storage = storage
        self.request_delay = request_delay
        self._sleep = sleep

    @property
    def provider(self):
        return self.resolver.provider

    async def run(self) -> BatchSummary:
        provider = self.provider
        logger.info(f"▶️  job started: {provider.name}")
        summary = BatchSummary(bureau=provider.code)

        for pending in self.storage.pending_scan_codes(provider.code):
            summary.seen += 1
            await self._sleep(self.request_delay)
            try:
                resolution = await self.resolver.resolve(pending.qrcode)
            except ResolutionError as e:
                summary.failed += 1
                logger.warning(f"⚠️  {pending.emu_no}: {provider.code} lookup skipped: {e}")
                continue

            summary.resolved += 1
            logger.debug(f"{pending.emu_no}: {provider.code}/{resolution.train_no}")
            if self.storage.record_assignment(resolution.date, pending.emu_no, resolution.train_no):
                summary.inserted += 1

        logger.info(
            f"✅ job done: {provider.name} | units={summary.seen} resolved={summary.resolved} "
            f"new={summary.inserted} failed={summary.failed}"
        )
        return summary
