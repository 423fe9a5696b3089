"""Session provider - holds the current SessionView and notifies on change."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..models import ANONYMOUS, SessionView

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionView], None]


class SessionProvider:
    """Owner of the session state.

    Consumers read ``current`` and subscribe for updates; only the
    provider replaces the session.
    """

    def __init__(self, session: SessionView = ANONYMOUS) -> None:
        self._session = session
        self._listeners: list[SessionListener] = []

    @property
    def current(self) -> SessionView:
        return self._session

    def update(self, session: SessionView) -> None:
        """Replace the session and notify subscribers if it changed."""
        if session == self._session:
            return
        self._session = session
        logger.debug("Session changed: %s", session)
        for listener in list(self._listeners):
            listener(session)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
