"""Service context for the storefront app."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rental_core.services import HttpCatalogClient, SessionProvider

if TYPE_CHECKING:
    from types import TracebackType

    from rental_core.services import CatalogService


class ServiceContext:
    """Lazy owner of the storefront's external collaborators.

    Supports async context manager protocol for guaranteed cleanup:
        async with ServiceContext() as ctx:
            products = await ctx.catalog.fetch_popular(8)
    """

    def __init__(
        self,
        *,
        catalog: CatalogService | None = None,
        sessions: SessionProvider | None = None,
        catalog_url: str | None = None,
    ) -> None:
        self._catalog = catalog
        self._http_client: HttpCatalogClient | None = None
        self._catalog_url = catalog_url
        self._sessions = sessions or SessionProvider()

    async def __aenter__(self) -> ServiceContext:
        """Enter async context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context manager, ensuring cleanup."""
        await self.close()

    @property
    def catalog(self) -> CatalogService:
        """Catalog service, creating the HTTP client on first use."""
        if self._catalog is None:
            self._http_client = HttpCatalogClient(self._catalog_url)
            self._catalog = self._http_client
        return self._catalog

    @property
    def sessions(self) -> SessionProvider:
        return self._sessions

    async def close(self) -> None:
        """Close the HTTP client if this context created it."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._catalog = None
