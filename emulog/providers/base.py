"""
Provider interface: one subclass per railway bureau.

fetch() is the network half: one request, returns the raw info dict.
extract() is the pure half: maps the bureau's field names to a Resolution.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from emulog.exceptions import ResolutionError
from emulog.utils.json_parser import get_nested


@dataclass(frozen=True)
class Resolution:
    train_no: str
    date: str        # YYYY-MM-DD


class Provider(ABC):
    code: str = ""
    name: str = ""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @abstractmethod
    async def fetch(self, qrcode: str) -> dict:
        """Query the bureau for a scan code. Network and decode errors propagate."""

    @abstractmethod
    def extract(self, info: dict) -> Resolution:
        """Pull (train number, date) out of a fetched info dict or raise ResolutionError."""

    def _payload(self, response: httpx.Response, *path: str) -> dict:
        response.raise_for_status()
        body: Any = response.json()
        payload = get_nested(body, *path)
        if not isinstance(payload, dict):
            raise ResolutionError(
                f"{self.code}: response has no {'.'.join(path)} object (HTTP {response.status_code})"
            )
        return payload

    def __repr__(self):
        return f"<{type(self).__name__} {self.code}>"
