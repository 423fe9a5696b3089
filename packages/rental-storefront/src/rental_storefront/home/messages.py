"""Messages for landing page interactions."""

from __future__ import annotations

from typing import Literal

from textual.message import Message

QuickLinkAction = Literal["rent", "list", "see_all", "register"]


class QuickLinkActivated(Message):
    """Posted when a quick link button is activated."""

    def __init__(self, action: QuickLinkAction) -> None:
        super().__init__()
        self.action = action


class SearchSubmitted(Message):
    """Posted when the search input is submitted.

    ``query`` is the raw input value, including an empty string.
    """

    def __init__(self, query: str) -> None:
        super().__init__()
        self.query = query
