"""Product card, skeleton placeholder and grid for popular products."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from textual.containers import Grid
from textual.widgets import Static

from ..ui import format_daily_price, ui_colors

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rental_core.models import Product

SKELETON_CARD_COUNT = 4


class ProductCard(Static, can_focus=True):
    """Compact product summary.

    Format:
        Title
        ฿350/day
        Category · Province
    """

    DEFAULT_CSS = """
    ProductCard {
        height: 7;
        padding: 1 2;
        background: #1e293b;
        border: round #3d3d3d;
    }

    ProductCard:focus {
        border: heavy #3B82F6;
    }
    """

    def __init__(self, product: Product) -> None:
        super().__init__(self._format(product), name=product.key)
        self.product = product

    @staticmethod
    def _format(product: Product) -> str:
        title = escape(product.title or f"Item {product.key}")
        lines = [
            f"[bold {ui_colors.WHITE}]{title}[/]",
            f"[{ui_colors.PRICE}]{format_daily_price(product.rental_price_per_day)}[/]",
        ]
        meta = " · ".join(escape(part) for part in (product.category, product.province) if part)
        if meta:
            lines.append(f"[{ui_colors.TEXT_DIM}]{meta}[/]")
        return "\n".join(lines)


class SkeletonCard(Static):
    """Empty placeholder shown while products load."""

    DEFAULT_CSS = """
    SkeletonCard {
        height: 7;
        background: #273449;
        border: round #273449;
    }
    """


class ProductGrid(Grid):
    """Four-column grid of product cards keyed by product id."""

    DEFAULT_CSS = """
    ProductGrid {
        grid-size: 4;
        grid-gutter: 1 2;
        height: auto;
    }
    """

    @property
    def product_keys(self) -> list[str]:
        return [card.product.key for card in self.query(ProductCard)]

    async def show_products(self, products: Iterable[Product]) -> None:
        """Replace the grid contents with ``products`` in order."""
        await self.remove_children()
        cards = [ProductCard(product) for product in products]
        if cards:
            await self.mount_all(cards)
