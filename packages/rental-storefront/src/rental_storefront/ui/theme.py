"""Storefront color theme constants.

Centralized color definitions for consistent theming across the UI.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UIColors:
    """General UI theme colors."""

    # Brand colors
    BRAND: str = "#3B82F6"
    BRAND_ACCENT: str = "#8B5CF6"
    HIGHLIGHT: str = "#FACC15"  # Search button / call-to-action yellow

    # Base colors
    WHITE: str = "#ffffff"
    GRAY_LIGHT: str = "#9CA3AF"
    GRAY_MEDIUM: str = "#3d3d3d"

    # Background layers
    BACKGROUND_DARK: str = "#0f172a"
    BACKGROUND_PANEL: str = "#1e293b"
    BACKGROUND_SKELETON: str = "#273449"

    # Text colors
    TEXT_DIM: str = "#9CA3AF"
    TEXT_ERROR: str = "#F87171"

    # Price colors
    PRICE: str = "#34D399"


ui_colors = UIColors()


def format_daily_price(price: float | None) -> str:
    """Rental price as shown on product cards."""
    if price is None:
        return "Price on request"
    if price == int(price):
        return f"฿{int(price):,}/day"
    return f"฿{price:,.2f}/day"
