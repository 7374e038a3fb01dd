"""Turns a scan code into a Resolution; every per-record failure becomes ResolutionError."""

import httpx

from emulog.exceptions import ResolutionError
from emulog.providers.base import Provider, Resolution


class Resolver:
    def __init__(self, provider: Provider):
        self.provider = provider

    async def resolve(self, qrcode: str) -> Resolution:
        try:
            info = await self.provider.fetch(qrcode)
        except ResolutionError:
            raise
        except (httpx.HTTPError, ValueError) as e:
            raise ResolutionError(f"{self.provider.code}: request for {qrcode} failed: {e!r}") from e
        return self.provider.extract(info)
