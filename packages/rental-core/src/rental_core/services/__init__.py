"""External collaborators: catalog client and session provider."""

from .catalog import POPULAR_PRODUCTS_PATH, CatalogService, HttpCatalogClient
from .session import SessionListener, SessionProvider

__all__ = [
    "POPULAR_PRODUCTS_PATH",
    "CatalogService",
    "HttpCatalogClient",
    "SessionListener",
    "SessionProvider",
]
