"""Placeholder screen for routes owned by other parts of the marketplace."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from rental_core.models import RouteId

from ..ui import ui_colors

if TYPE_CHECKING:
    from ..router import RouteCommand

ROUTE_TITLES: dict[RouteId, str] = {
    RouteId.HOME: "Home",
    RouteId.SEARCH_PRODUCTS: "Search results",
    RouteId.MY_LISTINGS: "My listings",
    RouteId.REGISTER: "Create an account",
    RouteId.ADMIN_DASHBOARD: "Admin dashboard",
}


class RouteScreen(Screen[None]):
    """Shows where a navigation command landed."""

    BINDINGS: ClassVar[list[Binding]] = [  # type: ignore[assignment]
        Binding("escape", "back", "Back"),
    ]

    DEFAULT_CSS = """
    RouteScreen #route-body {
        padding: 1 2;
        background: #0f172a;
    }
    """

    def __init__(self, command: RouteCommand) -> None:
        super().__init__()
        self.route_command = command

    @property
    def title_text(self) -> str:
        return ROUTE_TITLES.get(self.route_command.route, self.route_command.route.value)

    def compose(self) -> ComposeResult:
        with Vertical(id="route-body"):
            yield Static(f"[bold {ui_colors.WHITE}]{self.title_text}[/]", id="route-title")
            yield Static(
                f"[{ui_colors.TEXT_DIM}]{escape(self.route_command.location)}[/]",
                id="route-location",
            )
        yield Footer()

    def action_back(self) -> None:
        """Return to the previous screen (not past the first route)."""
        if len(self.app.screen_stack) > 2:
            self.app.pop_screen()
