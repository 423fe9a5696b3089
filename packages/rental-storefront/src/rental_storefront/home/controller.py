"""View-state controller for the landing page.

Owns the popular-products fetch lifecycle (Idle -> Loading -> Loaded/Failed),
the privileged-role redirect guard and search navigation. It knows nothing
about Textual; widgets subscribe to state changes and call the commands.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from rental_core.config import get_settings
from rental_core.models import NavigateCommand, Product, RedirectCommand, RouteId, SessionView

if TYPE_CHECKING:
    from rental_core.services import CatalogService

logger = logging.getLogger(__name__)

# Landing page always shows one fixed-size page
POPULAR_PAGE_SIZE = 8


# -----------------------------------------------------------------------------
# Fetch state
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    """Request in flight; previous items are not shown."""


@dataclass(frozen=True)
class Loaded:
    """Request succeeded. ``items`` keeps server order and may be empty."""

    items: tuple[Product, ...] = ()

    @property
    def item_ids(self) -> tuple[str, ...]:
        return tuple(item.key for item in self.items)


@dataclass(frozen=True)
class Failed:
    """Request failed; ``message`` is shown to the user verbatim."""

    message: str


FetchState: TypeAlias = Idle | Loading | Loaded | Failed

IDLE = Idle()
LOADING = Loading()


class DisplayMode(Enum):
    """Which popular-products section the view shows."""

    SKELETON = "skeleton"
    ERROR_PANEL = "error_panel"
    GRID = "grid"
    EMPTY_NOTICE = "empty_notice"


def classify_display(state: FetchState) -> DisplayMode:
    """Map a fetch state to exactly one display mode."""
    match state:
        case Idle() | Loading():
            return DisplayMode.SKELETON
        case Failed():
            return DisplayMode.ERROR_PANEL
        case Loaded(items=items) if items:
            return DisplayMode.GRID
        case Loaded():
            return DisplayMode.EMPTY_NOTICE
    raise TypeError(f"Unknown fetch state: {state!r}")


# -----------------------------------------------------------------------------
# Entry guard
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Proceed:
    """Render the landing page."""


@dataclass(frozen=True)
class Redirect:
    """Leave the landing page for ``target`` before anything renders."""

    target: RouteId


EntryDecision: TypeAlias = Proceed | Redirect


def evaluate_entry(session: SessionView) -> EntryDecision:
    """Privileged sessions never see the end-user landing page."""
    if session.is_privileged_role:
        return Redirect(RouteId.ADMIN_DASHBOARD)
    return Proceed()


# -----------------------------------------------------------------------------
# Search
# -----------------------------------------------------------------------------


def build_search_command(term: str) -> NavigateCommand:
    """Search-results route with the raw term as ``q``.

    The term is passed through untouched, so an empty string still
    navigates (to an unfiltered search).
    """
    return NavigateCommand(RouteId.SEARCH_PRODUCTS, {"q": term})


# -----------------------------------------------------------------------------
# Controller
# -----------------------------------------------------------------------------


class Navigator(Protocol):
    """Routing collaborator."""

    def navigate(self, command: NavigateCommand) -> None: ...

    def redirect(self, command: RedirectCommand) -> None: ...


StateListener = Callable[[FetchState], None]
SessionListener = Callable[[SessionView], None]


def _normalize_payload(payload: Any) -> tuple[Product, ...]:
    """Treat anything that is not a list-like sequence as no products."""
    if isinstance(payload, Sequence) and not isinstance(payload, str | bytes):
        return tuple(payload)
    logger.warning(
        "Popular products payload is not a sequence (%s); showing no products",
        type(payload).__name__,
    )
    return ()


def _error_message(err: BaseException, default: str) -> str:
    message = getattr(err, "message", None)
    if isinstance(message, str) and message:
        return message
    return default


class HomeController:
    """State machine behind the landing page.

    Observable surface: ``state``, ``entry_decision``, ``in_flight`` and
    ``show_signup_prompt``; commands: ``start``, ``refetch``, ``retry``,
    ``submit_search``, ``handle_session_change``. Views register with
    ``subscribe`` (fetch state) and ``subscribe_session`` (sign-in changes).

    Every ``refetch`` gets a sequence number and only the result of the
    most recent one is applied, so overlapping requests (mount + quick
    retry) can never leave stale products on screen.
    """

    def __init__(
        self,
        catalog: CatalogService,
        session: SessionView,
        navigator: Navigator,
        *,
        error_message: str | None = None,
    ) -> None:
        self._catalog = catalog
        self._session = session
        self._navigator = navigator
        self._error_message = error_message or get_settings().fetch_error_message
        self._state: FetchState = IDLE
        self._sequence = 0
        self._in_flight = 0
        self._started = False
        self._listeners: list[StateListener] = []
        self._session_listeners: list[SessionListener] = []

    # -- observable state ----------------------------------------------------

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def display_mode(self) -> DisplayMode:
        return classify_display(self._state)

    @property
    def entry_decision(self) -> EntryDecision:
        return evaluate_entry(self._session)

    @property
    def session(self) -> SessionView:
        return self._session

    @property
    def in_flight(self) -> bool:
        """True while at least one request has not settled."""
        return self._in_flight > 0

    @property
    def can_retry(self) -> bool:
        return isinstance(self._state, Failed)

    @property
    def show_signup_prompt(self) -> bool:
        """Anonymous visitors get the registration call-to-action."""
        return not self._session.is_authenticated

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` after every state transition."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def subscribe_session(self, listener: SessionListener) -> Callable[[], None]:
        """Call ``listener`` when a new session keeps the visitor on this page."""
        self._session_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._session_listeners:
                self._session_listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: FetchState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # -- commands ------------------------------------------------------------

    async def start(self) -> EntryDecision:
        """Mount entry point: redirect or load the first page (once)."""
        decision = self.entry_decision
        if isinstance(decision, Redirect):
            self._navigator.redirect(RedirectCommand(decision.target))
            return decision

        if not self._started:
            self._started = True
            await self.refetch()
        return decision

    async def refetch(self) -> None:
        """Request the popular-products page and apply the outcome."""
        if isinstance(self.entry_decision, Redirect):
            logger.debug("Skipping popular products fetch for privileged session")
            return

        self._sequence += 1
        tag = self._sequence
        self._in_flight += 1
        self._set_state(LOADING)

        try:
            payload = await self._catalog.fetch_popular(POPULAR_PAGE_SIZE)
        except Exception as err:
            logger.error("Error fetching popular products: %s", err)
            self._apply(tag, Failed(_error_message(err, self._error_message)))
        else:
            self._apply(tag, Loaded(_normalize_payload(payload)))
        finally:
            self._in_flight -= 1

    async def retry(self) -> bool:
        """User-initiated retry; only honoured while the last fetch failed."""
        if not self.can_retry:
            return False
        await self.refetch()
        return True

    def _apply(self, tag: int, state: FetchState) -> None:
        if tag != self._sequence:
            logger.debug(
                "Discarding stale popular products result #%d (latest #%d)", tag, self._sequence
            )
            return
        self._set_state(state)

    def submit_search(self, term: str) -> NavigateCommand:
        """Navigate to search results for ``term`` and return the command."""
        command = build_search_command(term)
        self._navigator.navigate(command)
        return command

    def follow_link(self, route: RouteId) -> NavigateCommand:
        """Plain link to ``route`` without query parameters."""
        command = NavigateCommand(route)
        self._navigator.navigate(command)
        return command

    def handle_session_change(self, session: SessionView) -> EntryDecision:
        """Re-run the entry guard for a new session.

        On the switch to a privileged session any pending request is
        invalidated, so nothing but the redirect is observable afterwards.
        """
        was_redirected = isinstance(self.entry_decision, Redirect)
        self._session = session
        decision = self.entry_decision
        if isinstance(decision, Redirect):
            if not was_redirected:
                self._sequence += 1
                self._navigator.redirect(RedirectCommand(decision.target))
            return decision

        for listener in list(self._session_listeners):
            listener(session)
        return decision
