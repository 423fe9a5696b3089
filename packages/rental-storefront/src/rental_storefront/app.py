"""Main Textual TUI app for the Rental Hub storefront."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual.app import App
from textual.binding import Binding

from rental_core.models import NavigateCommand, RouteId

from .context import ServiceContext
from .home import HomeController
from .router import Router
from .screens import HomeScreen, RouteScreen

if TYPE_CHECKING:
    from .router import RouteCommand

logger = logging.getLogger(__name__)

# Routes whose content lives outside the landing page
PLACEHOLDER_ROUTES = (
    RouteId.SEARCH_PRODUCTS,
    RouteId.MY_LISTINGS,
    RouteId.REGISTER,
    RouteId.ADMIN_DASHBOARD,
)


class RentalStorefront(App[None]):
    """Rental Hub - marketplace storefront TUI."""

    TITLE = "Rental Hub"
    SUB_TITLE = "Rent anything, list anything"

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("ctrl+c", "quit", "Quit", show=True, priority=True),
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+h", "go_home", "Home", show=True),
    ]

    def __init__(self, ctx: ServiceContext | None = None) -> None:
        super().__init__()
        self._ctx = ctx or ServiceContext()
        self.router = Router(self)
        self.router.register(RouteId.HOME, self._build_home_screen)
        for route in PLACEHOLDER_ROUTES:
            self.router.register(route, RouteScreen)

    @property
    def services(self) -> ServiceContext:
        return self._ctx

    def _build_home_screen(self, _command: RouteCommand) -> HomeScreen:
        """Fresh controller per visit - popular products are never cached."""
        controller = HomeController(
            self._ctx.catalog,
            self._ctx.sessions.current,
            self.router,
        )
        return HomeScreen(controller, self._ctx.sessions)

    def on_mount(self) -> None:
        self.router.navigate(NavigateCommand(RouteId.HOME))

    async def on_unmount(self) -> None:
        await self._ctx.close()

    def action_go_home(self) -> None:
        """Open the landing page on top of the current screen."""
        self.router.navigate(NavigateCommand(RouteId.HOME))
