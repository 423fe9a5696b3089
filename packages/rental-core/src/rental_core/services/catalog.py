"""Catalog service client.

The storefront only needs one query from the catalog: the popular-products
page. ``CatalogService`` is the contract the storefront depends on and
``HttpCatalogClient`` is the httpx implementation talking to the REST API.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import httpx
from pydantic import ValidationError

from ..config import get_settings
from ..exceptions import CatalogFetchError
from ..models import Product

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

POPULAR_PRODUCTS_PATH = "/products/popular"


class CatalogService(Protocol):
    """Anything that can fetch the popular-products page."""

    async def fetch_popular(self, limit: int) -> Any:
        """Return up to ``limit`` popular products in ranking order.

        Implementations raise on failure. The return value is normally a
        list of ``Product`` but callers must tolerate anything else.
        """
        ...


def _error_message_from(response: httpx.Response) -> str | None:
    """Pull the API's ``message`` field out of an error response, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class HttpCatalogClient:
    """Catalog REST client backed by a pooled ``httpx.AsyncClient``.

    Supports the async context manager protocol:
        async with HttpCatalogClient() as catalog:
            products = await catalog.fetch_popular(8)
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.catalog_base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(timeout or settings.catalog_timeout_seconds),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> HttpCatalogClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def fetch_popular(self, limit: int) -> Any:
        """GET the popular-products page.

        A ``{"data": [...]}`` envelope is unwrapped. List payloads are
        validated into ``Product`` models one entry at a time and invalid
        entries are dropped; any other payload is returned as-is so the
        caller can decide how to treat it.
        """
        try:
            response = await self._client.get(POPULAR_PRODUCTS_PATH, params={"limit": limit})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug("Catalog returned HTTP %s for popular products", status)
            raise CatalogFetchError(_error_message_from(e.response), status_code=status) from e
        except httpx.TimeoutException as e:
            raise CatalogFetchError("timeout") from e
        except httpx.RequestError as e:
            raise CatalogFetchError(str(e) or None) from e

        try:
            body = response.json()
        except ValueError as e:
            raise CatalogFetchError("Invalid response from catalog service") from e

        payload = body.get("data") if isinstance(body, dict) else body
        if not isinstance(payload, list):
            return payload

        products: list[Product] = []
        for index, item in enumerate(payload):
            try:
                products.append(Product.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid popular product at index %d: %s", index, e)
        return products
