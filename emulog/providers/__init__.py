"""Registry of bureaus polled each round. The first one is used for the startup probe."""

import httpx

from emulog.providers.base import Provider, Resolution          # noqa
from emulog.providers.beijing import BeijingProvider
from emulog.providers.shanghai import ShanghaiProvider


def build_providers(client: httpx.AsyncClient) -> list[Provider]:
    return [
        ShanghaiProvider(client),
        BeijingProvider(client),
    ]
