"""Maps route ids to screens and carries out navigation commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

from rental_core.exceptions import RouteNotRegisteredError
from rental_core.models import NavigateCommand, RedirectCommand, RouteId

if TYPE_CHECKING:
    from textual.app import App
    from textual.screen import Screen

logger = logging.getLogger(__name__)

RouteCommand: TypeAlias = NavigateCommand | RedirectCommand
ScreenFactory = Callable[[RouteCommand], "Screen[Any]"]


class Router:
    """Screen-stack navigation for the storefront app.

    ``navigate`` pushes a new screen (back returns to the previous one);
    ``redirect`` replaces the current screen.
    """

    def __init__(self, app: App[Any]) -> None:
        self._app = app
        self._factories: dict[RouteId, ScreenFactory] = {}
        self.history: list[RouteCommand] = []

    def register(self, route: RouteId, factory: ScreenFactory) -> None:
        self._factories[route] = factory

    @property
    def location(self) -> str | None:
        """Location of the most recent command, if any."""
        return self.history[-1].location if self.history else None

    def _build(self, command: RouteCommand) -> Screen[Any]:
        factory = self._factories.get(command.route)
        if factory is None:
            raise RouteNotRegisteredError(command.route.value)
        return factory(command)

    def navigate(self, command: NavigateCommand) -> None:
        screen = self._build(command)
        logger.info("Navigate to %s", command.location)
        self.history.append(command)
        self._app.push_screen(screen)

    def redirect(self, command: RedirectCommand) -> None:
        screen = self._build(command)
        logger.info("Redirect to %s", command.location)
        self.history.append(command)
        self._app.switch_screen(screen)
