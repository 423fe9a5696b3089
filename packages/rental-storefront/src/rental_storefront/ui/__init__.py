"""UI helpers shared by storefront widgets."""

from .theme import format_daily_price, ui_colors

__all__ = ["format_daily_price", "ui_colors"]
