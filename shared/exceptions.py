"""
Base exception classes for the marketplace core.

Each module should define its own exceptions that inherit from these bases.
Screens catch errors and show them as an alert dialog: `title` is the
dialog heading and `message` its body. `alert_for` does the same for
exceptions that are not ours.
"""

from typing import Optional, Any

GENERIC_ALERT_TITLE = "Error"
GENERIC_ALERT_MESSAGE = "Something went wrong. Please try again."


class MarketplaceError(Exception):
    """
    Base exception for all marketplace errors.

    All custom exceptions should inherit from this class. Subclasses set a
    class-level `title`; a single raise site can override it.
    """

    title = GENERIC_ALERT_TITLE

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        title: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        if title is not None:
            self.title = title

    def alert(self) -> tuple[str, str]:
        """Heading and body of the alert dialog for this error."""
        return self.title, self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for alert dialogs and logs."""
        return {
            "error": self.code,
            "title": self.title,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(MarketplaceError):
    """Resource not found."""

    title = "Not found"


class ValidationError(MarketplaceError):
    """Input validation failed."""

    title = "Missing information"


class AuthenticationError(MarketplaceError):
    """Authentication failed (invalid or missing credentials)."""

    title = "Sign-in error"


class AuthorizationError(MarketplaceError):
    """Authorization failed (insufficient permissions)."""

    title = "Not allowed"


class ExternalServiceError(MarketplaceError):
    """
    Error communicating with an external service.

    `message` carries the service's own detail for logs; the alert shows
    `alert_message` instead.
    """

    alert_message = GENERIC_ALERT_MESSAGE

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service

    def alert(self) -> tuple[str, str]:
        return self.title, self.alert_message


def alert_for(error: BaseException) -> tuple[str, str]:
    """
    Title and message of the alert shown for `error`.

    Anything that is not a MarketplaceError gets the generic alert.
    """
    if not isinstance(error, MarketplaceError):
        return GENERIC_ALERT_TITLE, GENERIC_ALERT_MESSAGE
    return error.alert()
