"""Unit tests for bureau adapters, field extraction and the resolver."""

import hashlib
from datetime import date
from unittest.mock import MagicMock
from urllib.parse import parse_qs

import httpx
import pytest

from emulog.exceptions import ResolutionError
from emulog.providers import build_providers
from emulog.providers.base import Resolution
from emulog.providers.beijing import BeijingProvider, sign_qrcode
from emulog.providers.shanghai import ShanghaiProvider
from emulog.services.resolver import Resolver

FIXED_DAY = date(2026, 10, 18)


def client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def shanghai(handler=None) -> ShanghaiProvider:
    handler = handler or (lambda request: httpx.Response(500))
    return ShanghaiProvider(client_for(handler), api_url="https://h.test/train", today=lambda: FIXED_DAY)


def beijing(handler=None) -> BeijingProvider:
    handler = handler or (lambda request: httpx.Response(500))
    return BeijingProvider(client_for(handler), api_url="https://p.test/info", sign_key="secret")


class TestShanghaiExtract:
    def test_train_name_with_today(self):
        assert shanghai().extract({"trainName": "G101"}) == Resolution("G101", "2026-10-18")

    def test_extra_fields_ignored(self):
        result = shanghai().extract({"trainName": "D3125", "startStation": "上海虹桥"})
        assert result.train_no == "D3125"

    @pytest.mark.parametrize("info", [{}, {"trainName": None}, {"trainName": 101}, {"trainName": ""}])
    def test_malformed_raises(self, info):
        with pytest.raises(ResolutionError):
            shanghai().extract(info)


class TestBeijingExtract:
    def test_fields_verbatim(self):
        info = {"TrainnoId": "G6733", "TrainnoDate": "2026-10-17"}
        assert beijing().extract(info) == Resolution("G6733", "2026-10-17")

    @pytest.mark.parametrize("info", [
        {"TrainnoId": "G6733"},
        {"TrainnoDate": "2026-10-17"},
        {"TrainnoId": ["G6733"], "TrainnoDate": "2026-10-17"},
    ])
    def test_malformed_raises(self, info):
        with pytest.raises(ResolutionError):
            beijing().extract(info)

    def test_sign(self):
        expected = hashlib.md5(b"qrcode=QR42&key=secret").hexdigest()
        assert sign_qrcode("QR42", "secret") == expected
        assert len(expected) == 32


class TestFetch:
    @pytest.mark.asyncio
    async def test_shanghai_get_with_pq_code(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["pqCode"] = request.url.params.get("pqCode")
            return httpx.Response(200, json={"code": 0, "msg": "ok", "data": {"trainName": "G101"}})

        info = await shanghai(handler).fetch("PQ0001")
        assert info == {"trainName": "G101"}
        assert seen == {"method": "GET", "pqCode": "PQ0001"}

    @pytest.mark.asyncio
    async def test_beijing_signed_form_post(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={
                "State": 1,
                "Msg": "",
                "Data": {"TrainInfo": {"TrainnoId": "G1", "TrainnoDate": "2026-10-18"}, "UrlStr": ""},
            })

        info = await beijing(handler).fetch("QR42")
        assert info == {"TrainnoId": "G1", "TrainnoDate": "2026-10-18"}
        assert seen["method"] == "POST"
        assert seen["form"] == {"qrCode": ["QR42"], "sign": [sign_qrcode("QR42", "secret")]}

    @pytest.mark.asyncio
    async def test_missing_data_object(self):
        provider = shanghai(lambda request: httpx.Response(200, json={"code": 1, "msg": "no", "data": None}))
        with pytest.raises(ResolutionError):
            await provider.fetch("PQ0001")

    def test_registry_order(self):
        codes = [p.code for p in build_providers(MagicMock())]
        assert codes == ["H", "P"]


class TestResolver:
    @pytest.mark.asyncio
    async def test_resolves(self):
        provider = shanghai(lambda request: httpx.Response(200, json={"data": {"trainName": "G101"}}))
        assert await Resolver(provider).resolve("PQ0001") == Resolution("G101", "2026-10-18")

    @pytest.mark.asyncio
    async def test_network_error_becomes_resolution_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ResolutionError):
            await Resolver(shanghai(handler)).resolve("PQ0001")

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        with pytest.raises(ResolutionError):
            await Resolver(shanghai(lambda request: httpx.Response(502))).resolve("PQ0001")

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        provider = shanghai(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
        with pytest.raises(ResolutionError):
            await Resolver(provider).resolve("PQ0001")

    @pytest.mark.asyncio
    async def test_missing_field(self):
        provider = beijing(lambda request: httpx.Response(200, json={"data": {"trainInfo": {}}}))
        with pytest.raises(ResolutionError):
            await Resolver(provider).resolve("QR42")
