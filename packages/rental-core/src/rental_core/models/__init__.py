"""Data models shared by the storefront and the service clients."""

from .navigation import NavigateCommand, RedirectCommand, RouteId
from .product import Product
from .session import ANONYMOUS, Role, SessionView

__all__ = [
    "ANONYMOUS",
    "NavigateCommand",
    "Product",
    "RedirectCommand",
    "Role",
    "RouteId",
    "SessionView",
]
