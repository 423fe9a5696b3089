"""Storefront screens."""

from .home import HomeScreen
from .route import ROUTE_TITLES, RouteScreen

__all__ = ["ROUTE_TITLES", "HomeScreen", "RouteScreen"]
