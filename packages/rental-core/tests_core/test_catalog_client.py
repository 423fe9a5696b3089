"""Tests for the HTTP catalog client."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from rental_core.exceptions import CatalogFetchError
from rental_core.models import Product
from rental_core.services import POPULAR_PRODUCTS_PATH, HttpCatalogClient

BASE_URL = "http://catalog.test/api"


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> HttpCatalogClient:
    return HttpCatalogClient(BASE_URL, transport=httpx.MockTransport(handler))


def json_response(status: int, body: Any) -> httpx.Response:
    return httpx.Response(status, content=json.dumps(body).encode(), headers={
        "content-type": "application/json"
    })


SAMPLE_PRODUCTS = [
    {"id": 1, "title": "Canon EOS R6", "rental_price_per_day": 900, "category": "Cameras"},
    {"id": "tent-4", "title": "4-person tent", "rental_price_per_day": 150.5, "brand": "Coleman"},
]


class TestFetchPopular:
    """Tests for HttpCatalogClient.fetch_popular."""

    @pytest.mark.asyncio
    async def test_requests_popular_page_with_limit(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return json_response(200, {"data": SAMPLE_PRODUCTS})

        async with make_client(handler) as client:
            products = await client.fetch_popular(8)

        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert requests[0].url.path == f"/api{POPULAR_PRODUCTS_PATH}"
        assert requests[0].url.params["limit"] == "8"
        assert [p.id for p in products] == [1, "tent-4"]
        assert all(isinstance(p, Product) for p in products)

    @pytest.mark.asyncio
    async def test_extra_fields_are_kept(self) -> None:
        async with make_client(lambda _r: json_response(200, {"data": SAMPLE_PRODUCTS})) as client:
            products = await client.fetch_popular(8)

        assert products[1].model_extra == {"brand": "Coleman"}
        assert products[1].key == "tent-4"

    @pytest.mark.asyncio
    async def test_bare_list_body_is_accepted(self) -> None:
        async with make_client(lambda _r: json_response(200, SAMPLE_PRODUCTS)) as client:
            products = await client.fetch_popular(8)

        assert [p.title for p in products] == ["Canon EOS R6", "4-person tent"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"data": None}, {"data": {"items": []}}, {"ok": True}])
    async def test_non_list_payload_is_returned_untouched(self, body: Any) -> None:
        async with make_client(lambda _r: json_response(200, body)) as client:
            payload = await client.fetch_popular(8)

        assert payload == body.get("data")

    @pytest.mark.asyncio
    async def test_http_error_carries_api_message(self) -> None:
        handler = lambda _r: json_response(503, {"message": "Catalog is under maintenance"})  # noqa: E731

        async with make_client(handler) as client:
            with pytest.raises(CatalogFetchError) as exc_info:
                await client.fetch_popular(8)

        assert exc_info.value.message == "Catalog is under maintenance"
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_http_error_without_message(self) -> None:
        async with make_client(lambda _r: httpx.Response(500, text="oops")) as client:
            with pytest.raises(CatalogFetchError) as exc_info:
                await client.fetch_popular(8)

        assert exc_info.value.message == ""
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_timeout_becomes_fetch_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(CatalogFetchError) as exc_info:
                await client.fetch_popular(8)

        assert exc_info.value.message == "timeout"
        assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)

    @pytest.mark.asyncio
    async def test_connection_error_becomes_fetch_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(CatalogFetchError) as exc_info:
                await client.fetch_popular(8)

        assert exc_info.value.message == "connection refused"

    @pytest.mark.asyncio
    async def test_invalid_json_becomes_fetch_error(self) -> None:
        async with make_client(lambda _r: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(CatalogFetchError):
                await client.fetch_popular(8)

    @pytest.mark.asyncio
    async def test_invalid_entries_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        body = {"data": [{"id": 1}, {"title": "No id"}, "junk", {"id": "tent-4"}]}

        async with make_client(lambda _r: json_response(200, body)) as client:
            with caplog.at_level(logging.WARNING, logger="rental_core.services.catalog"):
                products = await client.fetch_popular(8)

        assert [p.key for p in products] == ["1", "tent-4"]
        assert len(caplog.records) == 2

    @pytest.mark.asyncio
    async def test_page_of_only_invalid_entries_is_empty(self) -> None:
        body = {"data": [{"title": "No id"}]}

        async with make_client(lambda _r: json_response(200, body)) as client:
            products = await client.fetch_popular(8)

        assert products == []
