"""Rental Hub storefront - terminal UI for the rental marketplace."""


def main() -> None:
    """Run the storefront CLI."""
    from rental_storefront.cli import cli

    cli()


__all__ = ["main"]
