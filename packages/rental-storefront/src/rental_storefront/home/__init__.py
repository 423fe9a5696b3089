"""Landing page for Rental Hub.

``HomeController`` holds the view state (popular products fetch, redirect
guard, search navigation); ``HomePage`` renders it with Textual.
"""

from .controller import (
    IDLE,
    LOADING,
    POPULAR_PAGE_SIZE,
    DisplayMode,
    EntryDecision,
    Failed,
    FetchState,
    HomeController,
    Idle,
    Loaded,
    Loading,
    Navigator,
    Proceed,
    Redirect,
    build_search_command,
    classify_display,
    evaluate_entry,
)
from .messages import QuickLinkActivated, SearchSubmitted
from .product_card import ProductCard, ProductGrid, SkeletonCard
from .quick_links import QuickLinkButton, QuickLinksBar
from .search_bar import SearchBar
from .widget import HomePage, SignupPrompt

__all__ = [
    "IDLE",
    "LOADING",
    "POPULAR_PAGE_SIZE",
    "DisplayMode",
    "EntryDecision",
    "Failed",
    "FetchState",
    "HomeController",
    "HomePage",
    "Idle",
    "Loaded",
    "Loading",
    "Navigator",
    "Proceed",
    "ProductCard",
    "ProductGrid",
    "QuickLinkActivated",
    "QuickLinkButton",
    "QuickLinksBar",
    "Redirect",
    "SearchBar",
    "SearchSubmitted",
    "SignupPrompt",
    "SkeletonCard",
    "build_search_command",
    "classify_display",
    "evaluate_entry",
]
