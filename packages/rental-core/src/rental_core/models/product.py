"""Catalog product models."""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A rentable catalog listing.

    Only ``id`` matters to the storefront logic; everything else is for display.
    """

    model_config = ConfigDict(extra="allow")

    id: int | str
    title: str = ""
    rental_price_per_day: float | None = None
    category: str | None = None
    province: str | None = None  # Pickup location
    images: list[str] = Field(default_factory=list)
    average_rating: float | None = None

    @property
    def key(self) -> str:
        """Stable string key for rendering and change detection."""
        return str(self.id)
