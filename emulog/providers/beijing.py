"""
Bureau P: 中国铁路北京局集团有限公司

Endpoint: POST {BEIJING_API_URL}, form-encoded qrCode + sign
          sign = md5("qrcode={code}&key={BEIJING_SIGN_KEY}") as lowercase hex
Response: {"state": 1, "msg": "...",
           "data": {"trainInfo": {"TrainnoId": "G101", "TrainnoDate": "2026-10-18"},
                    "urlStr": "..."}}
"""

import hashlib

import httpx

from emulog.config import settings
from emulog.exceptions import ResolutionError
from emulog.providers.base import Provider, Resolution
from emulog.utils.json_parser import get_string


def sign_qrcode(qrcode: str, key: str) -> str:
    return hashlib.md5(f"qrcode={qrcode}&key={key}".encode("utf-8")).hexdigest()


class BeijingProvider(Provider):
    code = "P"
    name = "中国铁路北京局集团有限公司"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str = settings.BEIJING_API_URL,
        sign_key: str = settings.BEIJING_SIGN_KEY,
    ):
        super().__init__(client)
        self.api_url = api_url
        self.sign_key = sign_key

    async def fetch(self, qrcode: str) -> dict:
        form = {"qrCode": qrcode, "sign": sign_qrcode(qrcode, self.sign_key)}
        response = await self.client.post(self.api_url, data=form)
        return self._payload(response, "data", "trainInfo")

    def extract(self, info: dict) -> Resolution:
        train_no = get_string(info, "TrainnoId")
        train_date = get_string(info, "TrainnoDate")
        if train_no is None or train_date is None:
            raise ResolutionError(f"P: no TrainnoId/TrainnoDate in {info!r}")
        # The bureau's own date is trusted as-is
        return Resolution(train_no=train_no, date=train_date)
