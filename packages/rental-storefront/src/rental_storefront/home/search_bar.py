"""Hero search bar for the landing page."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Input, Static

from .messages import SearchSubmitted

SEARCH_INPUT_ID = "home-search"


class SearchBar(Horizontal, can_focus=False):
    """Free-text product search; Enter posts ``SearchSubmitted`` with the raw text."""

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        width: 100%;
        margin: 1 2;
    }

    SearchBar > Input {
        width: 1fr;
        background: #1e293b;
        border: tall #3d3d3d;
    }

    SearchBar > Input:focus {
        border: tall #FACC15;
    }

    SearchBar > .search-hint {
        width: auto;
        padding: 1 2;
        color: #0f172a;
        background: #FACC15;
        text-style: bold;
    }
    """

    def __init__(
        self,
        *,
        placeholder: str = "Search for something to rent...",
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        yield Input(placeholder=self._placeholder, id=SEARCH_INPUT_ID)
        yield Static("⏎ Search", classes="search-hint")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in input."""
        if event.input.id != SEARCH_INPUT_ID:
            return

        # Consume the submit here; the page decides where to navigate
        event.stop()
        event.prevent_default()
        self.post_message(SearchSubmitted(event.value))

    def focus_search(self) -> None:
        """Focus the search input."""
        self.query_one(f"#{SEARCH_INPUT_ID}", Input).focus()
