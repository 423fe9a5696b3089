"""Custom exceptions for Rental Hub."""


class RentalError(Exception):
    """Base exception for Rental Hub errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CatalogFetchError(RentalError):
    """Raised when the catalog service cannot deliver a page of products.

    ``message`` is meant for display and may be empty when the failure
    carried nothing human-readable.
    """

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or "")
        self.status_code = status_code


class RouteNotRegisteredError(RentalError):
    """Raised when navigating to a route that has no screen."""

    def __init__(self, route: str):
        super().__init__(f"No screen registered for route: {route}")
        self.route = route
