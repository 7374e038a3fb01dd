"""
Startup self-checks, run once before the first round.

- timezone: warns when the host is not on the expected UTC offset
- database: creates tables and reports row counts
- connectivity: one live probe against a provider, fatal on failure
"""

import time
from datetime import datetime, timedelta
from typing import Optional

import httpx

from emulog.config import settings
from emulog.exceptions import ConnectivityError, ResolutionError
from emulog.providers.base import Provider
from emulog.services.storage import Storage
from emulog.utils.logger import get_logger

logger = get_logger(__name__)


def check_local_timezone(
    now: Optional[datetime] = None,
    expected_offset_hours: int = settings.EXPECTED_UTC_OFFSET_HOURS,
) -> bool:
    """Returns True if the local offset matches. A mismatch is only a warning."""
    if now is None or now.tzinfo is None:
        now = (now or datetime.now()).astimezone()
    offset = now.utcoffset() or timedelta(0)
    if offset == timedelta(hours=expected_offset_hours):
        return True
    found = f"{now:%z}"[:3]              # +0800 → +08
    logger.warning(
        f"⚠️  expected UTC{expected_offset_hours:+03d} timezone, "
        f"but found {now.tzname()} (UTC{found})"
    )
    return False


def check_database(storage: Storage):
    storage.create_tables()
    logger.info(f"🗄️  found {storage.count_log_entries()} log records in database")
    logger.info(f"🗄️  found {storage.count_scan_codes()} qr code records in database")


async def check_connectivity(
    provider: Provider,
    probe_code: str = settings.PROBE_SCAN_CODE,
) -> float:
    """
    Fetch a known scan code once. Only transport failures count; the probe
    code need not resolve to a train. Returns the round-trip time in seconds.
    """
    start = time.monotonic()
    try:
        await provider.fetch(probe_code)
    except ResolutionError as e:
        logger.debug(f"probe code answered without train info: {e}")
    except (httpx.HTTPError, ValueError) as e:
        raise ConnectivityError(f"cannot reach {provider.name} ({provider.code}): {e!r}") from e
    elapsed = time.monotonic() - start
    logger.info(f"🌐 internet connection ok, round-trip delay {elapsed * 1000:.0f}ms")
    return elapsed
