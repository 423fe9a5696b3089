"""Tests for session views, navigation commands, settings and the session provider."""

from __future__ import annotations

import pytest

from rental_core.config import DEFAULT_FETCH_ERROR_MESSAGE, Settings, get_settings, reset_settings
from rental_core.exceptions import CatalogFetchError, RentalError, RouteNotRegisteredError
from rental_core.models import (
    ANONYMOUS,
    NavigateCommand,
    Product,
    RedirectCommand,
    Role,
    RouteId,
    SessionView,
)
from rental_core.services import SessionProvider


class TestSessionView:
    """Tests for SessionView construction."""

    def test_anonymous_is_neither_authenticated_nor_privileged(self) -> None:
        assert ANONYMOUS.is_authenticated is False
        assert ANONYMOUS.is_privileged_role is False

    @pytest.mark.parametrize(
        ("role", "privileged", "authenticated"),
        [
            (Role.GUEST, False, False),
            (Role.MEMBER, False, True),
            (Role.ADMIN, True, True),
        ],
    )
    def test_for_role(self, role: Role, privileged: bool, authenticated: bool) -> None:
        session = SessionView.for_role(role)

        assert session.is_privileged_role is privileged
        assert session.is_authenticated is authenticated

    def test_session_view_is_read_only(self) -> None:
        with pytest.raises(AttributeError):
            ANONYMOUS.is_authenticated = True  # type: ignore[misc]


class TestNavigationCommands:
    """Tests for navigation command locations."""

    def test_location_without_params(self) -> None:
        assert NavigateCommand(RouteId.REGISTER).location == "/register"
        assert RedirectCommand(RouteId.ADMIN_DASHBOARD).location == "/admin/dashboard"

    def test_location_encodes_query(self) -> None:
        command = NavigateCommand(RouteId.SEARCH_PRODUCTS, {"q": "กล้อง"})
        assert command.location == "/products/search?q=%E0%B8%81%E0%B8%A5%E0%B9%89%E0%B8%AD%E0%B8%87"

    def test_params_are_copied(self) -> None:
        params = {"q": "camera"}
        command = NavigateCommand(RouteId.SEARCH_PRODUCTS, params)
        params["q"] = "drone"

        assert command.params == {"q": "camera"}


class TestProduct:
    """Tests for the Product model."""

    def test_key_is_string_id(self) -> None:
        assert Product(id=42).key == "42"

    def test_optional_display_fields(self) -> None:
        product = Product(id="a")
        assert product.title == ""
        assert product.images == []
        assert product.rental_price_per_day is None


class TestSessionProvider:
    """Tests for SessionProvider notifications."""

    def test_defaults_to_anonymous(self) -> None:
        assert SessionProvider().current == ANONYMOUS

    def test_update_notifies_subscribers(self) -> None:
        provider = SessionProvider()
        seen: list[SessionView] = []
        provider.subscribe(seen.append)

        admin = SessionView.for_role(Role.ADMIN)
        provider.update(admin)

        assert provider.current == admin
        assert seen == [admin]

    def test_unchanged_session_does_not_notify(self) -> None:
        provider = SessionProvider()
        seen: list[SessionView] = []
        provider.subscribe(seen.append)

        provider.update(SessionView())

        assert seen == []

    def test_unsubscribe(self) -> None:
        provider = SessionProvider()
        seen: list[SessionView] = []
        unsubscribe = provider.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        provider.update(SessionView.for_role(Role.MEMBER))

        assert seen == []


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FETCH_ERROR_MESSAGE", raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.fetch_error_message == DEFAULT_FETCH_ERROR_MESSAGE
        assert settings.catalog_timeout_seconds == 10.0
        assert settings.log_file is None

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CATALOG_BASE_URL", "https://rent.example/api")
        monkeypatch.setenv("FETCH_ERROR_MESSAGE", "Could not load products")
        reset_settings()
        try:
            settings = get_settings()
            assert settings.catalog_base_url == "https://rent.example/api"
            assert settings.fetch_error_message == "Could not load products"
            assert get_settings() is settings
        finally:
            reset_settings()


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_catalog_fetch_error_message_defaults_to_empty(self) -> None:
        error = CatalogFetchError()
        assert isinstance(error, RentalError)
        assert error.message == ""
        assert error.status_code is None

    def test_route_not_registered_names_route(self) -> None:
        error = RouteNotRegisteredError("/nowhere")
        assert error.route == "/nowhere"
        assert "/nowhere" in error.message
