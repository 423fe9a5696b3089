"""Command-line entry point for the storefront TUI."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from rental_core.config import Settings, get_settings
from rental_core.models import Role, SessionView
from rental_core.services import SessionProvider

cli = typer.Typer(
    name="rental-storefront",
    help="Rental Hub storefront - browse and search rentable items.",
    add_completion=False,
    rich_markup_mode="rich",
)


def configure_logging(settings: Settings) -> None:
    """Send logs to ``settings.log_file``; without one only warnings reach stderr."""
    level = getattr(logging, settings.log_level.upper())
    if settings.log_file is not None:
        logging.basicConfig(
            filename=settings.log_file,
            level=level,
            format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
        )
    else:
        logging.basicConfig(
            level=max(level, logging.WARNING),
            format="%(levelname)s:%(name)s:%(message)s",
        )


@cli.command()
def run(
    role: Annotated[
        Role, typer.Option("--role", help="Session role to start with", case_sensitive=False)
    ] = Role.GUEST,
    catalog_url: Annotated[
        str | None, typer.Option("--catalog-url", help="Catalog service base URL")
    ] = None,
    user: Annotated[str | None, typer.Option("--user", help="Display name")] = None,
) -> None:
    """Start the storefront."""
    configure_logging(get_settings())

    from rental_storefront.app import RentalStorefront
    from rental_storefront.context import ServiceContext

    sessions = SessionProvider(SessionView.for_role(role, display_name=user))
    app = RentalStorefront(ServiceContext(sessions=sessions, catalog_url=catalog_url))
    app.run()
