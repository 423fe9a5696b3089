"""Quick links for landing page navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Static

from .messages import QuickLinkAction, QuickLinkActivated

if TYPE_CHECKING:
    from textual.events import Click, Key


class QuickLinkButton(Static, can_focus=True):
    """Focusable link with underlined shortcut letter."""

    DEFAULT_CSS = """
    QuickLinkButton {
        width: auto;
        height: auto;
        padding: 0 2;
        margin: 0 1;
        color: #9CA3AF;
        background: transparent;
    }

    QuickLinkButton:hover {
        background: #1e293b;
        color: #3B82F6;
    }

    QuickLinkButton:focus {
        color: #FACC15;
        text-style: bold;
        background: #1e293b;
    }
    """

    def __init__(
        self,
        label: str,
        action: QuickLinkAction,
        shortcut: str = "",
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(self._format_label(label, shortcut), id=id)
        self.action = action
        self.shortcut = shortcut

    def _format_label(self, label: str, shortcut: str) -> str:
        """Underline the first occurrence of the shortcut letter."""
        if not shortcut:
            return label
        idx = label.lower().find(shortcut.lower())
        if idx >= 0:
            return f"{label[:idx]}[u]{label[idx]}[/u]{label[idx + 1 :]}"
        return label

    def on_click(self, _event: Click) -> None:
        self.post_message(QuickLinkActivated(self.action))

    def on_key(self, event: Key) -> None:
        if event.key in ("enter", "space"):
            self.post_message(QuickLinkActivated(self.action))
            event.stop()
            event.prevent_default()


class QuickLinksBar(Horizontal, can_focus=False):
    """Rent / list-your-items entry points under the search bar."""

    DEFAULT_CSS = """
    QuickLinksBar {
        height: auto;
        width: 100%;
        align: center middle;
        padding: 1 2;
        margin: 0 0 1 0;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("r", "activate('rent')", "Rent", show=False),
        Binding("l", "activate('list')", "List", show=False),
    ]

    def compose(self) -> ComposeResult:
        yield QuickLinkButton("Rent items", "rent", "r", id="ql-rent")
        yield QuickLinkButton("List your items", "list", "l", id="ql-list")

    def action_activate(self, action: str) -> None:
        """Activate a quick link by shortcut."""
        self.post_message(QuickLinkActivated(action))  # type: ignore[arg-type]
