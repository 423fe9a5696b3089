"""Landing page screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import work
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer

from ..home import HomePage, Redirect

if TYPE_CHECKING:
    from collections.abc import Callable

    from rental_core.services import SessionProvider

    from ..home import HomeController


class HomeScreen(Screen[None]):
    """Hosts ``HomePage`` and drives the controller's mount lifecycle.

    A privileged session composes nothing: the controller redirects on
    mount before any marketplace content exists.
    """

    def __init__(
        self,
        controller: HomeController,
        sessions: SessionProvider | None = None,
    ) -> None:
        super().__init__()
        self.controller = controller
        self._sessions = sessions
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        if isinstance(self.controller.entry_decision, Redirect):
            return
        yield HomePage(self.controller, id="home-page")
        yield Footer()

    def on_mount(self) -> None:
        if self._sessions is not None:
            self._unsubscribe = self._sessions.subscribe(self.controller.handle_session_change)
        self.load_home()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @work(group="popular-products")
    async def load_home(self) -> None:
        """Run the entry guard, then load popular products."""
        await self.controller.start()
