"""Landing page widget.

Layout:
- TOP: hero title and search bar
- Quick links (rent / list your items)
- Popular products: skeleton row, error panel, grid or empty notice
- BOTTOM: sign-up call-to-action for anonymous visitors

The widget only renders what ``HomeController`` exposes; which popular
products section is visible comes from ``classify_display``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Static

from rental_core.models import RouteId

from ..ui import ui_colors
from .controller import IDLE, DisplayMode, FetchState, Failed, Loaded, classify_display
from .messages import QuickLinkAction, QuickLinkActivated, SearchSubmitted
from .product_card import SKELETON_CARD_COUNT, ProductGrid, SkeletonCard
from .quick_links import QuickLinkButton, QuickLinksBar
from .search_bar import SearchBar

if TYPE_CHECKING:
    from collections.abc import Callable

    from rental_core.models import SessionView

    from .controller import HomeController

QUICK_LINK_ROUTES: dict[QuickLinkAction, RouteId] = {
    "rent": RouteId.SEARCH_PRODUCTS,
    "see_all": RouteId.SEARCH_PRODUCTS,
    "list": RouteId.MY_LISTINGS,
    "register": RouteId.REGISTER,
}

# Element id for each display mode's section
SECTION_IDS: dict[DisplayMode, str] = {
    DisplayMode.SKELETON: "popular-skeleton",
    DisplayMode.ERROR_PANEL: "popular-error",
    DisplayMode.GRID: "popular-grid",
    DisplayMode.EMPTY_NOTICE: "popular-empty",
}


class SignupPrompt(Vertical):
    """Registration call-to-action."""

    DEFAULT_CSS = """
    SignupPrompt {
        height: auto;
        padding: 1 2;
        margin: 2 0 1 0;
        background: #1e293b;
        border: round #8B5CF6;
        align: center middle;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(
            f"[bold {ui_colors.WHITE}]Sign up free today[/]\n"
            f"[{ui_colors.TEXT_DIM}]Start renting or listing items at no cost.[/]"
        )
        yield QuickLinkButton("Sign up", "register", "s", id="ql-register")


class HomePage(Vertical, can_focus=False):
    """Marketplace landing page."""

    DEFAULT_CSS = """
    HomePage {
        width: 100%;
        height: 100%;
        background: #0f172a;
        padding: 1 2;
        overflow-y: auto;
    }

    HomePage #hero-title {
        width: 100%;
        content-align: center middle;
        margin: 1 0;
    }

    HomePage #popular-header {
        height: auto;
        margin: 1 0;
    }

    HomePage #popular-title {
        width: 1fr;
    }

    HomePage #popular-skeleton {
        height: auto;
    }

    HomePage #popular-skeleton > SkeletonCard {
        width: 1fr;
        margin: 0 1;
    }

    HomePage #popular-error {
        height: auto;
        align: center middle;
        padding: 1 0;
    }

    HomePage #popular-empty {
        width: 100%;
        content-align: center middle;
        padding: 2 0;
    }
    """

    state: reactive[FetchState] = reactive(IDLE, init=False, always_update=True)

    def __init__(
        self,
        controller: HomeController,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._controller = controller
        self._unsubscribers: list[Callable[[], None]] = []

    def compose(self) -> ComposeResult:
        yield Static(
            f"[bold {ui_colors.WHITE}]Rent anything online. Easy, fast, safe.[/]",
            id="hero-title",
        )
        yield SearchBar(id="home-search-bar")
        yield QuickLinksBar(id="quick-links-bar")

        with Horizontal(id="popular-header"):
            yield Static(f"[bold {ui_colors.WHITE}]Popular items[/]", id="popular-title")
            yield QuickLinkButton("See all →", "see_all", id="ql-see-all")

        with Horizontal(id="popular-skeleton"):
            for _ in range(SKELETON_CARD_COUNT):
                yield SkeletonCard()
        with Vertical(id="popular-error"):
            yield Static("", id="popular-error-message")
            yield Button("Try again", id="retry-button", variant="primary")
        yield ProductGrid(id="popular-grid")
        yield Static(
            f"[{ui_colors.TEXT_DIM}]No recommended items right now[/]",
            id="popular-empty",
        )

        yield SignupPrompt(id="signup-prompt")

    def on_mount(self) -> None:
        self._show_section(classify_display(self._controller.state))
        self._sync_signup_prompt()
        self._unsubscribers = [
            self._controller.subscribe(self._on_state_changed),
            self._controller.subscribe_session(self._on_session_changed),
        ]
        if self._controller.state != IDLE:
            self.state = self._controller.state
        self.call_after_refresh(self.focus_search)

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_state_changed(self, state: FetchState) -> None:
        self.state = state

    def _on_session_changed(self, _session: SessionView) -> None:
        self._sync_signup_prompt()

    def _sync_signup_prompt(self) -> None:
        self.query_one("#signup-prompt", SignupPrompt).display = (
            self._controller.show_signup_prompt
        )

    async def watch_state(self, state: FetchState) -> None:
        """Render the popular products section for ``state``."""
        mode = classify_display(state)

        grid = self.query_one("#popular-grid", ProductGrid)
        if isinstance(state, Loaded):
            await grid.show_products(state.items)
        else:
            await grid.remove_children()

        if isinstance(state, Failed):
            self.query_one("#popular-error-message", Static).update(
                f"[bold {ui_colors.TEXT_ERROR}]Error[/]\n{escape(state.message)}"
            )

        self._show_section(mode)

    def _show_section(self, mode: DisplayMode) -> None:
        for section_mode, section_id in SECTION_IDS.items():
            self.query_one(f"#{section_id}").display = section_mode is mode

    @property
    def visible_section(self) -> DisplayMode:
        """The one popular products section currently displayed."""
        for mode, section_id in SECTION_IDS.items():
            if self.query_one(f"#{section_id}").display:
                return mode
        raise LookupError("No popular products section is visible")

    # -- user actions ----------------------------------------------------------

    @on(Button.Pressed, "#retry-button")
    def on_retry_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.retry()

    @work(group="popular-products")
    async def retry(self) -> None:
        """Re-run the popular products request after a failure."""
        await self._controller.retry()

    @on(SearchSubmitted)
    def on_search_submitted(self, event: SearchSubmitted) -> None:
        event.stop()
        self._controller.submit_search(event.query)

    @on(QuickLinkActivated)
    def on_quick_link_activated(self, event: QuickLinkActivated) -> None:
        event.stop()
        self._controller.follow_link(QUICK_LINK_ROUTES[event.action])

    def focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#home-search-bar", SearchBar).focus_search()
