"""
Bureau H: 中国铁路上海局集团有限公司

Endpoint: GET {SHANGHAI_API_URL}?pqCode={code}
Response: {"code": 0, "msg": "...", "data": {"trainName": "G101", ...}}

The response carries no date, so the train is logged against today.
"""

from datetime import date
from typing import Callable

import httpx

from emulog.config import settings
from emulog.exceptions import ResolutionError
from emulog.providers.base import Provider, Resolution
from emulog.utils.json_parser import get_string


class ShanghaiProvider(Provider):
    code = "H"
    name = "中国铁路上海局集团有限公司"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str = settings.SHANGHAI_API_URL,
        today: Callable[[], date] = date.today,
    ):
        super().__init__(client)
        self.api_url = api_url
        self.today = today

    async def fetch(self, qrcode: str) -> dict:
        response = await self.client.get(self.api_url, params={"pqCode": qrcode})
        return self._payload(response, "data")

    def extract(self, info: dict) -> Resolution:
        train_no = get_string(info, "trainName")
        if train_no is None:
            raise ResolutionError(f"H: no trainName in {info!r}")
        return Resolution(train_no=train_no, date=self.today().isoformat())
