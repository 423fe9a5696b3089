"""Shared test fixtures and utilities for storefront tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from rental_core.models import Product, SessionView
from rental_storefront.home import HomeController


class ControlledCatalog:
    """Catalog fake whose requests stay pending until the test settles them."""

    def __init__(self) -> None:
        self.calls: list[int] = []
        self._pending: list[asyncio.Future[Any]] = []

    async def fetch_popular(self, limit: int) -> Any:
        self.calls.append(limit)
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._pending.append(future)
        return await future

    async def wait_for_calls(self, count: int) -> None:
        """Yield to the loop until ``count`` requests have been issued."""
        for _ in range(100):
            if len(self._pending) >= count:
                return
            await asyncio.sleep(0)
        raise AssertionError(f"expected {count} catalog calls, saw {len(self._pending)}")

    def resolve(self, index: int, payload: Any) -> None:
        self._pending[index].set_result(payload)

    def reject(self, index: int, error: BaseException) -> None:
        self._pending[index].set_exception(error)


def make_product(index: int, **overrides: Any) -> Product:
    """Build a sample rentable product."""
    data: dict[str, Any] = {
        "id": f"p{index}",
        "title": f"Camera kit {index}",
        "rental_price_per_day": 250.0 + index,
        "category": "Cameras",
        "province": "Bangkok",
    }
    data.update(overrides)
    return Product(**data)


def make_products(count: int) -> list[Product]:
    return [make_product(i) for i in range(1, count + 1)]


@pytest.fixture
def popular_products() -> list[Product]:
    """A full page of popular products."""
    return make_products(8)


@pytest.fixture
def product_factory() -> Callable[[int], list[Product]]:
    return make_products


@pytest.fixture
def navigator() -> MagicMock:
    """Records navigate/redirect commands."""
    return MagicMock(spec=["navigate", "redirect"])


@pytest.fixture
def guest() -> SessionView:
    return SessionView()


@pytest.fixture
def member() -> SessionView:
    return SessionView(is_authenticated=True, display_name="Somchai")


@pytest.fixture
def admin() -> SessionView:
    return SessionView(is_privileged_role=True, is_authenticated=True, display_name="Admin")


@pytest.fixture
def controlled_catalog() -> ControlledCatalog:
    return ControlledCatalog()


@pytest.fixture
def controller(
    controlled_catalog: ControlledCatalog, guest: SessionView, navigator: MagicMock
) -> HomeController:
    """Controller for an anonymous visitor backed by the controlled catalog."""
    return HomeController(controlled_catalog, guest, navigator)
