"""
Process entry point.

Builds the engine, HTTP client, providers and scheduler, runs the startup
checks, then loops forever. Any FatalError is logged and exits with status 1.
"""

import asyncio
import sys

import httpx

from emulog.config import settings
from emulog.database import build_engine
from emulog.exceptions import FatalError
from emulog.providers import build_providers
from emulog.services.batch_runner import BatchRunner
from emulog.services.resolver import Resolver
from emulog.services.scheduler import Scheduler
from emulog.services.startup_checks import (
    check_connectivity,
    check_database,
    check_local_timezone,
)
from emulog.services.storage import Storage
from emulog.utils.logger import get_logger

logger = get_logger(__name__)


async def run():
    logger.info("🚀 EMU Log starting up...")
    check_local_timezone()

    storage = Storage(build_engine(settings.DATABASE_URL))
    check_database(storage)

    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
        providers = build_providers(client)
        await check_connectivity(providers[0])

        runners = [BatchRunner(Resolver(p), storage) for p in providers]
        logger.info(f"📡 Bureaus configured: {[p.code for p in providers]}")
        await Scheduler(runners).run_forever()


def main():
    try:
        asyncio.run(run())
    except FatalError as e:
        logger.critical(f"💥 {type(e).__name__}: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("🛑 EMU Log shutting down...")


if __name__ == "__main__":
    main()
