"""Route identifiers and navigation commands."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlencode


class RouteId(str, Enum):
    """Routes the storefront can send the user to."""

    HOME = "/"
    SEARCH_PRODUCTS = "/products/search"
    MY_LISTINGS = "/my-listings"
    REGISTER = "/register"
    ADMIN_DASHBOARD = "/admin/dashboard"


@dataclass(frozen=True)
class NavigateCommand:
    """Push ``route`` with optional query parameters."""

    route: RouteId
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy of the caller's mapping
        object.__setattr__(self, "params", dict(self.params))

    @property
    def location(self) -> str:
        """Path plus URL-encoded query string."""
        if not self.params:
            return self.route.value
        return f"{self.route.value}?{urlencode(self.params)}"


@dataclass(frozen=True)
class RedirectCommand:
    """Replace the current route with ``route`` (no back-navigation)."""

    route: RouteId

    @property
    def location(self) -> str:
        return self.route.value
